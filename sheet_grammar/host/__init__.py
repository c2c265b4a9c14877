"""
Spreadsheet host collaborator interfaces.
"""
from sheet_grammar.host.base import CellRange, Sheet, SpreadsheetHost

__all__ = ["CellRange", "Sheet", "SpreadsheetHost"]
