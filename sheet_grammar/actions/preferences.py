"""
Settings actions: API key, language, custom dictionary and triggers.
"""
from typing import Union

from sheet_grammar.actions.boundary import action_boundary
from sheet_grammar.actions.context import AddOnContext
from sheet_grammar.schemas.dialogs import LanguageDialog
from sheet_grammar.schemas.settings import Language
from sheet_grammar.services.dictionary_manager import DictionaryManager
from sheet_grammar.services.errors import GrammarCheckerError
from sheet_grammar.utils.logger import get_logger

logger = get_logger("actions.preferences")

OPEN_DOCUMENT_HANDLER = "on_open_document"


@action_boundary
def show_api_key_dialog(ctx: AddOnContext) -> bool:
    return ctx.request_api_key()


@action_boundary
def on_open_document(ctx: AddOnContext) -> None:
    """Installed as an on-open trigger: ask for an API key if none is stored."""
    if not ctx.settings_store.get_api_key():
        ctx.request_api_key()


@action_boundary
def show_language_settings(ctx: AddOnContext) -> LanguageDialog:
    dialog = LanguageDialog(current=ctx.settings_store.get_language())
    ctx.host.show_dialog(dialog)
    return dialog


@action_boundary
def set_language_preference(ctx: AddOnContext, language: Union[Language, str]) -> Language:
    """Save the language picked in the language dialog."""
    try:
        stored = ctx.settings_store.set_language(language)
    except ValueError as e:
        raise GrammarCheckerError(f"Unsupported language: {language}") from e

    ctx.host.alert(f"Language set to {stored.display_name}")
    return stored


@action_boundary
def show_dictionary_manager(ctx: AddOnContext) -> DictionaryManager:
    manager = DictionaryManager(ctx.settings_store)
    ctx.host.show_dialog(manager.view())
    return manager


@action_boundary
def configure_triggers(ctx: AddOnContext) -> None:
    """Offer to install or remove the on-open trigger."""
    host = ctx.host
    trigger_exists = host.has_open_trigger(OPEN_DOCUMENT_HANDLER)

    if trigger_exists:
        question = "The onOpenDocument trigger is already set up. Would you like to remove it?"
    else:
        question = "Would you like to set up the onOpenDocument trigger to run when the spreadsheet opens?"

    if not host.confirm("Configure Triggers", question):
        return

    if trigger_exists:
        host.delete_open_triggers(OPEN_DOCUMENT_HANDLER)
        logger.info("Open trigger removed")
        host.alert("Trigger removed successfully!")
    else:
        host.create_open_trigger(OPEN_DOCUMENT_HANDLER)
        logger.info("Open trigger created")
        host.alert("Trigger created successfully!")
