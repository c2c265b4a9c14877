"""
Fix Typos action.
"""
from typing import Optional

from sheet_grammar.actions.boundary import action_boundary
from sheet_grammar.actions.context import AddOnContext
from sheet_grammar.services.prompts import build_typo_messages
from sheet_grammar.services.response_parser import parse_typo_response
from sheet_grammar.services.suggestions import TypoReviewSession
from sheet_grammar.utils.logger import get_logger

logger = get_logger("actions.typos")

NO_TYPOS_MESSAGE = "No typos found in the selected text."


@action_boundary
def show_typo_fix_dialog(ctx: AddOnContext) -> Optional[TypoReviewSession]:
    """
    Check the selected cell for typos and open the review dialog.

    Returns:
        The review session the host routes the user's choices to, or None
        when nothing was found or the action failed
    """
    cell_range, text = ctx.read_selection()
    api_key = ctx.require_api_key()
    language = ctx.settings_store.get_language()

    logger.info("Checking text for typos", language=language.value, text_length=len(text))

    reply = ctx.llm_client.complete(api_key, build_typo_messages(text, language))
    report = parse_typo_response(reply)

    if not report.has_findings:
        ctx.host.alert(NO_TYPOS_MESSAGE)
        return None

    target = ctx.make_target(cell_range)
    session = TypoReviewSession(
        original_text=text,
        typos=report.typos,
        settings_store=ctx.settings_store,
        apply_text=ctx.writer_for(target)
    )

    if not session.has_entries:
        ctx.host.alert(NO_TYPOS_MESSAGE)
        return None

    ctx.remember_target(target)
    ctx.host.show_dialog(session.view())
    return session
