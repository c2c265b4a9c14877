"""
Abstract interfaces for the spreadsheet host the add-on runs inside.

The host owns the UI, the sheets and the trigger mechanism. Action handlers
only talk to it through these classes, so they can be driven by a fake host in
tests.
"""
from abc import ABC, abstractmethod
from typing import Any, List, Optional

from sheet_grammar.schemas.dialogs import Dialog, Menu


class CellRange(ABC):
    """A range of cells on a sheet (the add-on only reads the top-left value)."""

    @property
    @abstractmethod
    def a1_notation(self) -> str:
        """Address of the range, e.g. 'B2' or 'A1:C3'."""
        pass

    @property
    @abstractmethod
    def sheet(self) -> "Sheet":
        """Sheet the range belongs to."""
        pass

    @abstractmethod
    def get_value(self) -> Any:
        """Value of the top-left cell."""
        pass

    @abstractmethod
    def set_value(self, value: Any) -> None:
        """Overwrite the value of the range."""
        pass


class Sheet(ABC):
    """A single sheet (tab) of the active spreadsheet."""

    @property
    @abstractmethod
    def sheet_id(self) -> str:
        """Stable identifier of the sheet, kept across renames."""
        pass

    @abstractmethod
    def get_range(self, a1_notation: str) -> Optional[CellRange]:
        """
        Resolve a range by A1 notation.

        Returns:
            The range, or None if the address is not valid on this sheet
        """
        pass


class SpreadsheetHost(ABC):
    """The spreadsheet application hosting the add-on for one user session."""

    @abstractmethod
    def get_active_range(self) -> Optional[CellRange]:
        """Range currently selected by the user, None if nothing is selected."""
        pass

    @abstractmethod
    def get_sheets(self) -> List[Sheet]:
        """All sheets of the active spreadsheet."""
        pass

    @abstractmethod
    def alert(self, message: str, title: Optional[str] = None) -> None:
        """Show a blocking alert."""
        pass

    @abstractmethod
    def confirm(self, title: str, message: str) -> bool:
        """Ask a yes/no question; True if the user answered yes."""
        pass

    @abstractmethod
    def prompt(self, title: str, message: str) -> Optional[str]:
        """
        Ask for a line of text.

        Returns:
            The entered text, or None if the user cancelled
        """
        pass

    @abstractmethod
    def show_dialog(self, dialog: Dialog) -> None:
        """Render a modal dialog."""
        pass

    @abstractmethod
    def add_menu(self, menu: Menu) -> None:
        """Register the add-on menu."""
        pass

    @abstractmethod
    def has_open_trigger(self, handler: str) -> bool:
        """True if an on-open trigger calling `handler` is installed."""
        pass

    @abstractmethod
    def create_open_trigger(self, handler: str) -> None:
        """Install an on-open trigger calling `handler`."""
        pass

    @abstractmethod
    def delete_open_triggers(self, handler: str) -> None:
        """Remove every on-open trigger calling `handler`."""
        pass
