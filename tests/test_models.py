import pytest

from log_explorer.models import FIELD_ORDER, LogField, _FIELD_GETTERS

from conftest import make_entry


def test_field_order_covers_every_field():
    assert FIELD_ORDER == (
        LogField.ID, LogField.MICROSERVICE, LogField.MESSAGE, LogField.ERROR_MESSAGE,
    )


def test_every_field_has_a_getter():
    assert set(_FIELD_GETTERS) == set(LogField)


def test_field_text():
    entry = make_entry(
        "m1", "2024-01-01T00:00:00Z",
        microservice="auth", message="denied", error_message="bad token",
    )
    assert [entry.field_text(f) for f in LogField] == ["m1", "auth", "denied", "bad token"]


@pytest.mark.parametrize("name", ["errorMessage", LogField.ERROR_MESSAGE])
def test_parse_field_name(name):
    assert LogField.parse(name) is LogField.ERROR_MESSAGE


def test_unknown_field_name():
    assert LogField.parse("hostname") is None
