"""Command that prints the sample day activity and training log."""

import argparse
import logging

from fittrack.actioninfo import info
from fittrack.daysteps import DaySteps
from fittrack.personaldata import Personal
from fittrack.trainings import Training

_DAY_SAMPLE = """\
678,0h50m
792,1h14m
1078,1h30m
7830,2h40m
,3456
12:40:00, 3456
something is wrong"""

_TRAINING_SAMPLE = """\
3456,Ходьба,3h00m
something is wrong
678,Бег,0h5m
1078,Бег,0h10m
,3456 Ходьба
7892,Ходьба,3h10m
15392,Бег,0h45m"""


def main(argv=None) -> int:
    """Print reports for the built-in sample records."""
    argparse.ArgumentParser(prog="fittrack").parse_args(argv)
    logging.basicConfig(format="%(asctime)s %(message)s", datefmt="%Y/%m/%d %H:%M:%S")

    person = Personal(name="Витя", weight=84.6, height=1.87)

    print("Активность в течение дня")
    day_steps = DaySteps(personal=person)
    day_steps.print()
    info(_DAY_SAMPLE.splitlines(), day_steps)

    training = Training(personal=person)
    print("Журнал тренировок")
    training.print()
    info(_TRAINING_SAMPLE.splitlines(), training)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())