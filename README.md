# fittrack

A small fitness tracker. It reads records of daily walking activity and
training sessions, and reports distance, mean speed and calories burnt
for a person of a given weight and height. The reports are in Russian.

## Installation

```
pip install .
```

## Running the demo

```
fittrack
```

or, equivalently, `python -m fittrack.cli`. The command takes no options
besides `--help`. It prints the data of a built-in sample person, then
processes a built-in sample day of walking records and a built-in sample
training log. Records that cannot be parsed or evaluated are reported
through the `logging` module (on standard error) and skipped; the reports
for the others go to standard output.

## Record formats

Daily activity (`fittrack.daysteps.DaySteps`):

```
<steps>,<duration>
678,0h50m
```

Training (`fittrack.trainings.Training`):

```
<steps>,<type>,<duration>
3456,Ходьба,3h00m
15392,Бег,0h45m
```

Fields are separated by commas with no surrounding spaces. Steps must be a
positive integer, optionally with a leading `+`. Durations are sequences of
decimal numbers with units, such as `1h30m`, `1.5h`, `30.5m` or `45s`; the
units are `ns`, `us` (or `µs`), `ms`, `s`, `m` and `h`. Durations must be
positive and are kept to microsecond precision.

A training record of any type parses, but only `Ходьба` (walking) and
`Бег` (running) can be reported on; `action_info` raises `ValueError` for
any other type. Running calories are twice the walking calories for the
same steps, height, weight and duration.

## Library use

```python
from fittrack.personaldata import Personal
from fittrack.daysteps import DaySteps
from fittrack.trainings import Training
from fittrack.actioninfo import info

person = Personal(name="Витя", weight=84.6, height=1.87)

day = DaySteps(personal=person)
day.parse("7830,2h40m")
print(day.action_info(), end="")

training = Training(personal=person)
training.print()                      # name, weight and height
info(["6000,Бег,1h00m", "bad record"], training)
```

`parse` and `action_info` raise `ValueError` on bad input. `info` accepts
any object with `parse(datastring)` and `action_info()` methods (the
`fittrack.actioninfo.DataParser` protocol), prints each report, and logs
and skips records that fail.

The calculations are available on their own in `fittrack.spentenergy`:
`distance(steps, height)`, `mean_speed(steps, height, duration)`,
`walking_spent_calories(steps, weight, height, duration)` and
`running_spent_calories(steps, weight, height, duration)`. Weight is in
kilograms, height in metres, distance in kilometres and speed in km/h.
Durations are `datetime.timedelta` values; `fittrack.durations.parse_duration`
and `parse_steps` turn record fields into them.

## What it does not do

The `fittrack` command only runs the built-in samples: it does not read
records from files or standard input, take the person's data as options,
or store any history between runs. For your own data, use the library
functions above.

## Tests

```
pip install .[test]
pytest
```