"""Railway simulation with ETCS level 1 and level 2 train control and a radio block centre."""

__version__ = "0.1.0"