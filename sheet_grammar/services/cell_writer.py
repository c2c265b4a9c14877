"""
Best-effort write-back of corrected text to the cell a dialog was opened for.
"""
from typing import Optional

from pydantic import BaseModel

from sheet_grammar.host.base import Sheet, SpreadsheetHost
from sheet_grammar.utils.logger import get_logger

logger = get_logger("services.cell_writer")


class PendingEditTarget(BaseModel):
    """Cell location remembered between showing a dialog and applying a correction."""

    cell_address: str
    sheet_id: str


def get_sheet_by_id(host: SpreadsheetHost, sheet_id: str) -> Optional[Sheet]:
    for sheet in host.get_sheets():
        if str(sheet.sheet_id) == sheet_id:
            return sheet
    return None


def write_back(host: SpreadsheetHost, target: Optional[PendingEditTarget], text: str) -> bool:
    """
    Overwrite the target cell with `text`.

    The sheet or range may have been deleted while the dialog was open; that
    case is a silent no-op.

    Returns:
        True if the cell was written
    """
    if target is None:
        logger.debug("No pending edit target, nothing written")
        return False

    sheet = get_sheet_by_id(host, target.sheet_id)
    if sheet is None:
        logger.warning("Target sheet not found, nothing written", sheet_id=target.sheet_id)
        return False

    cell_range = sheet.get_range(target.cell_address)
    if cell_range is None:
        logger.warning(
            "Target range not found, nothing written",
            sheet_id=target.sheet_id,
            cell_address=target.cell_address
        )
        return False

    cell_range.set_value(text)
    logger.info(
        "Cell updated",
        sheet_id=target.sheet_id,
        cell_address=target.cell_address,
        text_length=len(text)
    )
    return True
