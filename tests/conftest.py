"""
Pytest configuration and fixtures for grammar checker tests.
"""
import re
from typing import Any, Dict, List, Optional
from unittest.mock import MagicMock, Mock, patch

import pytest

from sheet_grammar.actions.context import AddOnContext
from sheet_grammar.host.base import CellRange, Sheet, SpreadsheetHost
from sheet_grammar.schemas.dialogs import Dialog, Menu
from sheet_grammar.services.llm_client import ChatCompletionClient
from sheet_grammar.services.property_store import InMemoryPropertyStore
from sheet_grammar.services.settings_store import SettingsStore


A1_PATTERN = re.compile(r"^[A-Z]+[1-9][0-9]*$")


class FakeRange(CellRange):
    """Single-cell range backed by the owning FakeSheet's cell map."""

    def __init__(self, sheet: "FakeSheet", a1_notation: str):
        self._sheet = sheet
        self._a1_notation = a1_notation

    @property
    def a1_notation(self) -> str:
        return self._a1_notation

    @property
    def sheet(self) -> "FakeSheet":
        return self._sheet

    def get_value(self) -> Any:
        return self._sheet.cells.get(self._a1_notation)

    def set_value(self, value: Any) -> None:
        self._sheet.cells[self._a1_notation] = value
        self._sheet.writes.append((self._a1_notation, value))


class FakeSheet(Sheet):
    def __init__(self, sheet_id: str, cells: Optional[Dict[str, Any]] = None):
        self._sheet_id = sheet_id
        self.cells: Dict[str, Any] = dict(cells or {})
        self.writes: List[tuple] = []

    @property
    def sheet_id(self) -> str:
        return self._sheet_id

    def get_range(self, a1_notation: str) -> Optional[FakeRange]:
        if not A1_PATTERN.match(a1_notation):
            return None
        return FakeRange(self, a1_notation)


class FakeHost(SpreadsheetHost):
    """Records everything the add-on asks the host to show."""

    def __init__(self):
        self.sheets: List[FakeSheet] = []
        self.active_range: Optional[FakeRange] = None
        self.alerts: List[str] = []
        self.dialogs: List[Dialog] = []
        self.menus: List[Menu] = []
        self.prompt_responses: List[Optional[str]] = []
        self.prompts: List[tuple] = []
        self.confirm_response = True
        self.triggers: List[str] = []

    def add_sheet(self, sheet_id: str, cells: Optional[Dict[str, Any]] = None) -> FakeSheet:
        sheet = FakeSheet(sheet_id, cells)
        self.sheets.append(sheet)
        return sheet

    def select(self, sheet: FakeSheet, a1_notation: str) -> FakeRange:
        self.active_range = sheet.get_range(a1_notation)
        return self.active_range

    def get_active_range(self) -> Optional[FakeRange]:
        return self.active_range

    def get_sheets(self) -> List[FakeSheet]:
        return list(self.sheets)

    def alert(self, message: str, title: Optional[str] = None) -> None:
        self.alerts.append(message)

    def confirm(self, title: str, message: str) -> bool:
        return self.confirm_response

    def prompt(self, title: str, message: str) -> Optional[str]:
        self.prompts.append((title, message))
        if not self.prompt_responses:
            return None
        return self.prompt_responses.pop(0)

    def show_dialog(self, dialog: Dialog) -> None:
        self.dialogs.append(dialog)

    def add_menu(self, menu: Menu) -> None:
        self.menus.append(menu)

    def has_open_trigger(self, handler: str) -> bool:
        return handler in self.triggers

    def create_open_trigger(self, handler: str) -> None:
        self.triggers.append(handler)

    def delete_open_triggers(self, handler: str) -> None:
        self.triggers = [t for t in self.triggers if t != handler]


@pytest.fixture
def fake_host() -> FakeHost:
    return FakeHost()


@pytest.fixture
def sheet(fake_host: FakeHost) -> FakeSheet:
    """Sheet with a misspelled sentence in B2, selected."""
    sheet = fake_host.add_sheet("1234", {"B2": "I teh went to the the store"})
    fake_host.select(sheet, "B2")
    return sheet


@pytest.fixture
def property_store() -> InMemoryPropertyStore:
    return InMemoryPropertyStore()


@pytest.fixture
def settings_store(property_store: InMemoryPropertyStore) -> SettingsStore:
    return SettingsStore(property_store)


@pytest.fixture
def mock_llm_client() -> Mock:
    client = Mock(spec=ChatCompletionClient)
    client.complete.return_value = '{"typos": []}'
    return client


@pytest.fixture
def ctx(fake_host: FakeHost, settings_store: SettingsStore, mock_llm_client: Mock) -> AddOnContext:
    """Context with a configured API key."""
    settings_store.set_api_key("sk-test-key")
    return AddOnContext(host=fake_host, settings_store=settings_store, llm_client=mock_llm_client)


@pytest.fixture
def mock_httpx_client():
    """Mock httpx.Client with context manager support."""
    with patch("httpx.Client") as mock_client_class:
        mock_client = MagicMock()
        mock_client_class.return_value = mock_client
        mock_client.__enter__.return_value = mock_client
        mock_client.__exit__.return_value = None
        yield mock_client


@pytest.fixture
def chat_response():
    """Factory fixture to create mock chat completion responses."""

    def _create_response(content: Optional[str] = None, status_code: int = 200, text: Optional[str] = None):
        body = {
            "id": "chatcmpl-test",
            "object": "chat.completion",
            "choices": [
                {"index": 0, "message": {"role": "assistant", "content": content}, "finish_reason": "stop"}
            ],
        }
        return Mock(
            status_code=status_code,
            text=text if text is not None else str(body),
            json=Mock(return_value=body),
        )

    return _create_response
