"""Processing of a list of activity records."""

import logging
from typing import Iterable, Protocol

logger = logging.getLogger(__name__)


class DataParser(Protocol):
    """Something that reads a record and reports on it."""

    def parse(self, datastring: str) -> None: ...

    def action_info(self) -> str: ...


def info(dataset: Iterable[str], dp: DataParser) -> None:
    """Parse each record and print its report; failures are logged and skipped."""
    for index, data in enumerate(dataset):
        try:
            dp.parse(data)
        except ValueError as err:
            logger.error("Error parsing data at index %d: %s", index, err)
            continue
        try:
            report = dp.action_info()
        except ValueError as err:
            logger.error("Error getting action info at index %d: %s", index, err)
            continue
        print(report if report.endswith("\n") else report + "\n", end="")