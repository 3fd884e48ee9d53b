# treni

A small railway simulation. Five trains (`T1` to `T5`) run their itineraries
over a fixed network of 8 stations (`S1`–`S8`) and 16 movement-authority
sections (`MA1`–`MA16`). Two control schemes are available:

- **ETCS1**: each train checks the occupancy of the next section itself,
  through a small state file per section, and moves when the section is free.
- **ETCS2**: trains ask a radio block centre (RBC) for permission over a
  local Unix socket; the RBC keeps a virtual copy of the network and grants or
  refuses each movement.

Trains run concurrently, one thread per train, and pause three seconds
after every step.

## Installation

```
pip install .
```

Unix sockets are used for ETCS2, so a POSIX system is needed for that mode.

## Preparing the working directory

The programs work in the current directory and expect this layout:

```
file/
  binari/       section state files, one per section, created or reset at start
  itinerari/    one itinerary file per train: T1 ... T5
  log/          train logs and RBC.log, created or overwritten at start
```

The three directories must already exist and the itinerary files must be
in place; the package does not create the directories and ships no
itineraries.

Each itinerary file holds the sections of one train's route on its first
non-empty line, separated by commas or spaces, starting and ending at a
station, for example:

```
S1, MA1, MA2, MA3, MA8, S6
```

Consecutive sections must be neighbours in the network; otherwise the train
stops with an error.

## Running

Level 1 simulation:

```
treni ETCS1
```

Level 2 simulation needs the radio block centre. Start it first, in its own
terminal, from the same directory, then start the trains:

```
treni ETCS2 RBC
treni ETCS2
```

The RBC listens on the socket file `SocketTrain` in the current directory,
receives the five itineraries, then answers movement requests until every
train has left its first station and reached its last.

Each train writes its movements (`START`, `MOVE`, `LOCK`, `STOP`) to
`file/log/<train>.log`; the RBC records every request and whether it was
authorised in `file/log/RBC.log`.

Any other arguments do nothing and the command exits successfully. On a file,
socket or lookup error the command prints `error: ...` to standard error and
exits with status 1.

## Using it from Python

The building blocks can be used directly:

- `treni.railway.build_railway(directory)` and
  `treni.railway.build_virtual_railway()` build the network as a `Railway`,
  whose `find(name)` raises `treni.tracks.TrackNotFoundError` for unknown
  sections.
- `treni.train.new_train(name, railway, base_dir)` loads a `Train` and its
  itinerary; `Train.start()`, `move()`, `stop()` and `lock()` drive it and
  log each step.
- `treni.etcs1.move_etcs1(train)` and `treni.etcs2.move_etcs2(train)` advance
  a train by one step.
- `treni.rbc.RadioBlockCentre` answers single requests;
  `treni.channel` holds the socket helpers.
- `treni.etcs1.run_etcs1(base_dir, pause)`,
  `treni.etcs2.run_etcs2(base_dir, socket_path, pause)` and
  `treni.rbc.run_rbc(base_dir, socket_path)` run whole simulations.

## Tests

```
pip install .[test]
pytest
```