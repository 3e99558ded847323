import pytest

from mlearnkit.status import (
    FieldStatus,
    Status,
    check_not_blank,
    check_required,
    fits_length,
)


def test_check_required_empty_uses_error_by_default():
    result = check_required("", "Author is specified.", "No author is specified.")
    assert result == FieldStatus(Status.ERROR, "No author is specified.")


def test_check_required_empty_uses_given_level():
    result = check_required(
        "", "Hint is specified.", "Hint is not specified.", Status.WARNING
    )
    assert result.status is Status.WARNING
    assert result.message == "Hint is not specified."


def test_check_required_filled_is_ok():
    result = check_required("Jane", "Author is specified.", "No author is specified.")
    assert result == FieldStatus(Status.OK, "Author is specified.")


def test_check_required_whitespace_counts_as_content():
    result = check_required("   ", "given", "missing")
    assert result.status is Status.OK


@pytest.mark.parametrize("text", ["", " ", "\t\n  "])
def test_check_not_blank_rejects_blank(text):
    result = check_not_blank(text, "Word seems to be okay.", "Please, enter some word.")
    assert result == FieldStatus(Status.ERROR, "Please, enter some word.")


def test_check_not_blank_accepts_padded_text():
    result = check_not_blank("  cat ", "Word seems to be okay.", "Please, enter some word.")
    assert result == FieldStatus(Status.OK, "Word seems to be okay.")


def test_fits_length_boundaries():
    assert fits_length("a" * 50, 50) is True
    assert fits_length("a" * 51, 50) is False
    assert fits_length("", 0) is True


def test_fits_length_rejects_negative_limit():
    with pytest.raises(ValueError):
        fits_length("abc", -1)