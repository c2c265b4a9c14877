"""
Unit tests for cell write-back.
"""
from sheet_grammar.services.cell_writer import PendingEditTarget, get_sheet_by_id, write_back


def test_write_back_updates_cell(fake_host, sheet):
    target = PendingEditTarget(cell_address="B2", sheet_id="1234")

    assert write_back(fake_host, target, "Corrected text") is True

    assert sheet.cells["B2"] == "Corrected text"


def test_write_back_resolves_sheet_by_id(fake_host, sheet):
    other = fake_host.add_sheet("5678", {"B2": "other"})
    target = PendingEditTarget(cell_address="B2", sheet_id="5678")

    write_back(fake_host, target, "changed")

    assert other.cells["B2"] == "changed"
    assert sheet.cells["B2"] == "I teh went to the the store"


def test_missing_sheet_is_silent_noop(fake_host, sheet):
    target = PendingEditTarget(cell_address="B2", sheet_id="deleted")

    assert write_back(fake_host, target, "text") is False

    assert sheet.writes == []


def test_invalid_range_is_silent_noop(fake_host, sheet):
    target = PendingEditTarget(cell_address="not-a-cell", sheet_id="1234")

    assert write_back(fake_host, target, "text") is False

    assert sheet.writes == []


def test_missing_target_is_silent_noop(fake_host, sheet):
    assert write_back(fake_host, None, "text") is False
    assert sheet.writes == []


def test_get_sheet_by_id(fake_host, sheet):
    assert get_sheet_by_id(fake_host, "1234") is sheet
    assert get_sheet_by_id(fake_host, "nope") is None
