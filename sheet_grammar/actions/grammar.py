"""
Improve Grammar action.
"""
from typing import Optional

from sheet_grammar.actions.boundary import action_boundary
from sheet_grammar.actions.context import AddOnContext
from sheet_grammar.services.prompts import build_grammar_messages
from sheet_grammar.services.response_parser import parse_grammar_response
from sheet_grammar.services.suggestions import GrammarReview
from sheet_grammar.utils.logger import get_logger

logger = get_logger("actions.grammar")


@action_boundary
def show_grammar_improve_dialog(ctx: AddOnContext) -> Optional[GrammarReview]:
    """Rewrite the selected cell for grammar and show the before/after dialog."""
    cell_range, text = ctx.read_selection()
    api_key = ctx.require_api_key()
    language = ctx.settings_store.get_language()

    logger.info("Improving grammar", language=language.value, text_length=len(text))

    reply = ctx.llm_client.complete(api_key, build_grammar_messages(text, language))
    improved_text = parse_grammar_response(reply)

    target = ctx.remember_target(ctx.make_target(cell_range))
    review = GrammarReview(text, improved_text, ctx.writer_for(target))
    ctx.host.show_dialog(review.view())
    return review
