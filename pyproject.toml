[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "treni"
version = "0.1.0"
description = "Railway signalling simulation with ETCS level 1 and level 2 train control and a radio block centre"
requires-python = ">=3.10"
dependencies = []
keywords = ["railway", "simulation", "etcs", "rbc", "signalling", "trains"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
treni = "treni.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["treni"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
