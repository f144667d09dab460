"""
Convert a use-case outcome into the textual result a tool hands back to the agent.

Data errors never abort the conversation: MissingData, DataUnavailable and
InvalidRequest are rendered as text so the completion engine can explain the
gap to the user.
"""

import logging
from collections.abc import Awaitable

from src.domain.errors import DataUnavailable, InvalidRequest, MissingData
from src.shared.logger import get_logger, log_event

logger = get_logger(__name__)


async def as_tool_result(outcome: Awaitable[str]) -> str:
    try:
        return await outcome
    except MissingData as exc:
        log_event(logger, event="tool.missing_data", message=str(exc))
        return str(exc)
    except DataUnavailable as exc:
        log_event(
            logger,
            event="tool.data_unavailable",
            message=str(exc),
            level=logging.WARNING,
        )
        return f"Data unavailable: {exc}"
    except InvalidRequest as exc:
        log_event(logger, event="tool.invalid_request", message=str(exc))
        return f"Invalid request: {exc}"
