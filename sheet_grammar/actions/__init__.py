"""
Action handlers invoked by the spreadsheet host.

Each handler takes an AddOnContext as first argument and never lets a
GrammarCheckerError escape: failures are shown to the user as an alert.
"""
from sheet_grammar.actions.context import AddOnContext, create_context
from sheet_grammar.actions.grammar import show_grammar_improve_dialog
from sheet_grammar.actions.menu import HANDLERS, build_menu, dispatch, on_open
from sheet_grammar.actions.preferences import (
    configure_triggers,
    on_open_document,
    set_language_preference,
    show_api_key_dialog,
    show_dictionary_manager,
    show_language_settings,
)
from sheet_grammar.actions.typos import show_typo_fix_dialog

__all__ = [
    "AddOnContext",
    "create_context",
    "HANDLERS",
    "build_menu",
    "dispatch",
    "on_open",
    "on_open_document",
    "configure_triggers",
    "set_language_preference",
    "show_api_key_dialog",
    "show_dictionary_manager",
    "show_grammar_improve_dialog",
    "show_language_settings",
    "show_typo_fix_dialog",
]
