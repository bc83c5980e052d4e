import logging

import pytest

from fittrack.actioninfo import info
from fittrack.daysteps import DaySteps
from fittrack.personaldata import Personal


class FakeParser:
    def __init__(self, reports, broken_reports=()):
        self.reports = reports
        self.broken_reports = set(broken_reports)
        self.parsed = []
        self.current = None

    def parse(self, datastring):
        if datastring not in self.reports:
            raise ValueError(f"cannot parse {datastring!r}")
        self.parsed.append(datastring)
        self.current = datastring

    def action_info(self):
        if self.current in self.broken_reports:
            raise ValueError("no report")
        return self.reports[self.current]


def test_single_item(capsys):
    parser = FakeParser({"test data": "processed test data"})
    info(["test data"], parser)
    assert capsys.readouterr().out == "processed test data\n"
    assert parser.parsed == ["test data"]


def test_empty_dataset(capsys):
    parser = FakeParser({})
    info([], parser)
    assert capsys.readouterr().out == ""
    assert parser.parsed == []


def test_trailing_newline_not_doubled(capsys):
    parser = FakeParser({"a": "first\n", "b": "second"})
    info(["a", "b"], parser)
    assert capsys.readouterr().out == "first\nsecond\n"


def test_parse_error_is_logged_and_skipped(capsys, caplog):
    parser = FakeParser({"good": "ok"})
    with caplog.at_level(logging.ERROR):
        info(["bad", "good"], parser)
    assert capsys.readouterr().out == "ok\n"
    messages = [record.getMessage() for record in caplog.records]
    assert any(m.startswith("Error parsing data at index 0:") for m in messages)


def test_action_info_error_is_logged_and_skipped(capsys, caplog):
    parser = FakeParser({"x": "x report", "y": "y report"}, broken_reports={"x"})
    with caplog.at_level(logging.ERROR):
        info(["x", "y"], parser)
    assert capsys.readouterr().out == "y report\n"
    messages = [record.getMessage() for record in caplog.records]
    assert messages == ["Error getting action info at index 0: no report"]


@pytest.mark.parametrize("bad", ["something is wrong", ",3456"])
def test_with_day_steps(capsys, bad):
    ds = DaySteps(personal=Personal(weight=75.0, height=1.75))
    info([bad, "6000,1h"], ds)
    assert capsys.readouterr().out == (
        "Количество шагов: 6000.\nДистанция составила 4.72 км.\nВы сожгли 177.19 ккал.\n"
    )