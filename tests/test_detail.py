from log_explorer.detail import render_details
from log_explorer.selection import SelectionPhase, SelectionState
from log_explorer.selectors import SelectorSet

from conftest import make_entry


def test_placeholder_while_selecting(entries):
    view = render_details(SelectionState(entries[:2], SelectionPhase.SELECTING), SelectorSet())
    assert view.placeholder
    assert view.count == 2
    assert view.entries == ()


def test_settled_renders_enabled_fields_in_order(entries):
    selectors = SelectorSet()
    selectors.toggle("errorMessage", True)
    selectors.toggle("microservice", True)
    view = render_details(SelectionState(entries[1:2], SelectionPhase.SETTLED), selectors)
    assert not view.placeholder
    assert view.entries[0].fields == (
        ("id", "e2"),
        ("microservice", "billing"),
        ("errorMessage", "connection refused"),
    )


def test_error_message_is_not_wrapped_in_details():
    long_text = "word " * 30
    entry = make_entry("x", "2024-01-01T00:00:00Z", error_message=long_text.strip())
    selectors = SelectorSet({"id": False, "errorMessage": True})
    view = render_details(SelectionState((entry,), SelectionPhase.IDLE), selectors)
    assert view.entries[0].fields == (("errorMessage", long_text.strip()),)


def test_empty_selection_renders_nothing():
    view = render_details(SelectionState(), SelectorSet())
    assert view.count == 0
    assert not view.placeholder
    assert view.entries == ()
