"""
Error boundary and logging for action handlers.
"""
import functools
import time
import uuid
from typing import Any, Callable, TypeVar

from sheet_grammar.actions.context import AddOnContext
from sheet_grammar.services.errors import (
    EmptySelectionError,
    GrammarCheckerError,
    MissingApiKeyError,
)
from sheet_grammar.utils.logger import get_logger

logger = get_logger("actions")

F = TypeVar("F", bound=Callable[..., Any])


def action_boundary(func: F) -> F:
    """
    Wrap an action handler.

    Logs:
    - Action name and id
    - Outcome and duration

    Every GrammarCheckerError becomes a single host alert and the handler
    returns None. A missing API key also opens the API key prompt. Other
    exceptions are logged and re-raised.
    """

    @functools.wraps(func)
    def wrapper(ctx: AddOnContext, *args, **kwargs):
        action_id = str(uuid.uuid4())
        action = func.__name__

        logger.info("Action started", action_id=action_id, action=action)
        start_time = time.time()

        try:
            result = func(ctx, *args, **kwargs)
        except MissingApiKeyError as e:
            logger.warning("Action needs an API key", action_id=action_id, action=action)
            ctx.host.alert(e.message)
            ctx.request_api_key()
            return None
        except EmptySelectionError as e:
            logger.info("Action aborted", action_id=action_id, action=action, reason=e.message)
            ctx.host.alert(e.message)
            return None
        except GrammarCheckerError as e:
            duration_ms = (time.time() - start_time) * 1000
            logger.error(
                "Action failed",
                action_id=action_id,
                action=action,
                duration_ms=f"{duration_ms:.2f}",
                error=e.message
            )
            ctx.host.alert(f"Error: {e.message}")
            return None
        except Exception as e:
            duration_ms = (time.time() - start_time) * 1000
            logger.error(
                "Action crashed",
                action_id=action_id,
                action=action,
                duration_ms=f"{duration_ms:.2f}",
                error=str(e),
                exc_info=True
            )
            raise

        duration_ms = (time.time() - start_time) * 1000
        logger.info("Action completed", action_id=action_id, action=action, duration_ms=f"{duration_ms:.2f}")
        return result

    return wrapper  # type: ignore[return-value]
