import pytest

from backend.core.formatting import UNEXPECTED_ERROR, format_value, render_result
from backend.models import Result, Target


@pytest.mark.parametrize(
    "target, value, expected",
    [
        (Target.RATE, 4.99981, "5%"),
        (Target.RATE, 3.14159, "3.14%"),
        (Target.TIME, 7.5, "7.5 years"),
        (Target.TIME, 0, "0 years"),
        (Target.AMOUNT, 1051.1618978817, "1051.16"),
        (Target.PRINCIPAL, 1051.1, "1051.1"),
        (Target.PRINCIPAL, -0.001, "0"),
        (Target.FREQUENCY, 11.5, "12"),
        (Target.FREQUENCY, 3.49, "3"),
    ],
)
def test_format_value(target, value, expected):
    assert format_value(target, value) == expected


def test_value_line_has_label():
    line = render_result(Target.AMOUNT, Result.of(1051.1618978817))

    assert line == "Amount: 1051.16"


def test_error_and_advisory_are_shown_verbatim():
    assert render_result(Target.TIME, Result(error="bad", kind="InvalidInput")) == "bad"
    assert render_result(Target.FREQUENCY, Result.advisory("try n")) == "try n"


def test_empty_result_falls_back_to_generic_error():
    empty = Result.model_construct(value=None, message=None, error=None, kind=None)

    assert render_result(Target.RATE, empty) == UNEXPECTED_ERROR


def test_targets_expose_labels_and_symbols():
    assert [target.symbol for target in Target] == ["P", "R", "T", "n", "A"]
    assert Target.FREQUENCY.label == "Frequency"
