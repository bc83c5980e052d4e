import pytest

from fittrack.personaldata import Personal


@pytest.mark.parametrize(
    ("personal", "expected"),
    [
        (
            Personal(name="Иван", weight=75.0, height=1.75),
            "Имя: Иван\nВес: 75.00 кг.\nРост: 1.75 м.\n\n",
        ),
        (
            Personal(name="", weight=0.0, height=0.0),
            "Имя: \nВес: 0.00 кг.\nРост: 0.00 м.\n\n",
        ),
        (
            Personal(name="Петр", weight=75.5, height=1.85),
            "Имя: Петр\nВес: 75.50 кг.\nРост: 1.85 м.\n\n",
        ),
        (
            Personal(name="Алексей", weight=100.0, height=2.00),
            "Имя: Алексей\nВес: 100.00 кг.\nРост: 2.00 м.\n\n",
        ),
    ],
)
def test_print(capsys, personal, expected):
    personal.print()
    assert capsys.readouterr().out == expected


def test_defaults_are_empty():
    assert Personal() == Personal(name="", weight=0.0, height=0.0)