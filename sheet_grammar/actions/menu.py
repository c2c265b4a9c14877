"""
Add-on menu and handler registry.
"""
from typing import Any, Callable, Dict

from sheet_grammar.actions.boundary import action_boundary
from sheet_grammar.actions.context import AddOnContext
from sheet_grammar.actions.grammar import show_grammar_improve_dialog
from sheet_grammar.actions.preferences import (
    configure_triggers,
    on_open_document,
    set_language_preference,
    show_api_key_dialog,
    show_dictionary_manager,
    show_language_settings,
)
from sheet_grammar.actions.typos import show_typo_fix_dialog
from sheet_grammar.schemas.dialogs import Menu, MenuItem

MENU_TITLE = "Grammar Checker"


def build_menu() -> Menu:
    return Menu(
        title=MENU_TITLE,
        items=[
            MenuItem(label="Configure API Key", handler="show_api_key_dialog"),
            MenuItem(label="Fix Typos", handler="show_typo_fix_dialog"),
            MenuItem(label="Improve Grammar", handler="show_grammar_improve_dialog"),
            MenuItem(label="Manage Custom Dictionary", handler="show_dictionary_manager"),
            MenuItem(label="Language Settings", handler="show_language_settings"),
            MenuItem(),
            MenuItem(label="Configure Triggers", handler="configure_triggers"),
        ]
    )


@action_boundary
def on_open(ctx: AddOnContext) -> Menu:
    """Register the add-on menu when the spreadsheet opens."""
    menu = build_menu()
    ctx.host.add_menu(menu)
    return menu


# Handlers the host may call by name (menu items, triggers, dialog callbacks)
HANDLERS: Dict[str, Callable[..., Any]] = {
    "on_open": on_open,
    "on_open_document": on_open_document,
    "show_api_key_dialog": show_api_key_dialog,
    "show_typo_fix_dialog": show_typo_fix_dialog,
    "show_grammar_improve_dialog": show_grammar_improve_dialog,
    "show_dictionary_manager": show_dictionary_manager,
    "show_language_settings": show_language_settings,
    "set_language_preference": set_language_preference,
    "configure_triggers": configure_triggers,
}


def dispatch(ctx: AddOnContext, handler: str, *args, **kwargs) -> Any:
    """
    Run a handler by name.

    Raises:
        KeyError: If no handler is registered under that name
    """
    return HANDLERS[handler](ctx, *args, **kwargs)
