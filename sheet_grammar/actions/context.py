"""
Per-session context handed to every action handler.
"""
from dataclasses import dataclass, field
from typing import Optional, Tuple

from sheet_grammar.host.base import CellRange, SpreadsheetHost
from sheet_grammar.services.cell_writer import PendingEditTarget, write_back
from sheet_grammar.services.errors import EmptySelectionError, MissingApiKeyError
from sheet_grammar.services.llm_client import ChatCompletionClient
from sheet_grammar.services.property_store import JsonFilePropertyStore
from sheet_grammar.services.settings_store import SettingsStore
from sheet_grammar.services.suggestions import TextApplier
from sheet_grammar.utils.logger import get_logger

logger = get_logger("actions.context")

API_KEY_PROMPT_TITLE = "OpenAI API Key"
API_KEY_PROMPT_MESSAGE = "Please enter your OpenAI API key:"


@dataclass
class AddOnContext:
    """
    Everything an action needs for one user session.

    `pending_target` holds at most one cell: each dialog that can write back
    replaces it, which invalidates the write-back of any older dialog.
    """

    host: SpreadsheetHost
    settings_store: SettingsStore
    llm_client: ChatCompletionClient = field(default_factory=ChatCompletionClient)
    pending_target: Optional[PendingEditTarget] = None

    def read_selection(self) -> Tuple[CellRange, str]:
        """
        Return the selected range and its text.

        Raises:
            EmptySelectionError: If nothing is selected or the cell is empty
        """
        cell_range = self.host.get_active_range()
        if cell_range is None:
            raise EmptySelectionError("Please select a range first.")

        value = cell_range.get_value()
        text = "" if value is None else str(value)
        if not text:
            raise EmptySelectionError("Selected cell is empty.")

        return cell_range, text

    def require_api_key(self) -> str:
        api_key = self.settings_store.get_api_key()
        if not api_key:
            raise MissingApiKeyError()
        return api_key

    def request_api_key(self) -> bool:
        """
        Prompt the user for an API key and store it.

        Returns:
            True if a key was saved
        """
        entered = self.host.prompt(API_KEY_PROMPT_TITLE, API_KEY_PROMPT_MESSAGE)
        if entered is None:
            logger.info("API key prompt cancelled")
            return False

        if not entered.strip():
            self.host.alert("No API key entered.")
            return False

        self.settings_store.set_api_key(entered)
        self.host.alert("API key saved successfully!")
        return True

    @staticmethod
    def make_target(cell_range: CellRange) -> PendingEditTarget:
        return PendingEditTarget(
            cell_address=cell_range.a1_notation,
            sheet_id=str(cell_range.sheet.sheet_id)
        )

    def remember_target(self, target: PendingEditTarget) -> PendingEditTarget:
        """
        Make `target` the pending edit target, replacing any previous one.

        Call only when a dialog is about to be shown for it.
        """
        self.pending_target = target
        logger.debug("Pending edit target set", sheet_id=target.sheet_id, cell_address=target.cell_address)
        return target

    def writer_for(self, target: PendingEditTarget) -> TextApplier:
        """
        Build the write-back callback for a dialog opened on `target`.

        The callback is a no-op once a newer dialog replaced the target.
        """
        def apply_text(text: str) -> bool:
            if self.pending_target is not target:
                logger.warning(
                    "Pending edit target was replaced by a newer dialog, nothing written",
                    cell_address=target.cell_address
                )
                return False
            return write_back(self.host, target, text)

        return apply_text


def create_context(
    host: SpreadsheetHost,
    user_id: str,
    storage_path: Optional[str] = None
) -> AddOnContext:
    """
    Build a context whose settings are persisted in the user's property file.

    Args:
        host: Spreadsheet host of the session
        user_id: Identifier of the current user
        storage_path: Directory for property files (if None, uses settings.PROPERTIES_STORAGE_PATH)
    """
    store = SettingsStore(JsonFilePropertyStore(user_id, base_path=storage_path))
    return AddOnContext(host=host, settings_store=store)
