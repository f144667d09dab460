"""
Agent session: owns one conversation transcript and drives the agent graph.

The transcript starts with the fixed system message and only ever grows.
One session serves one HTTP request, or one whole interactive console run.
"""

import logging
import uuid
from typing import Any, Optional

from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage

from src.application.agent.prompts import SYSTEM_PROMPT
from src.domain.errors import CompletionUnavailable, InvalidRequest
from src.domain.ports.observability_port import IObservabilityHandler
from src.shared.logger import get_logger, log_context, log_event

logger = get_logger(__name__)


def message_text(message: BaseMessage) -> str:
    """Plain text of a message whose content may be a list of content blocks."""
    content = message.content
    if isinstance(content, str):
        return content
    parts = []
    for block in content:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            parts.append(block.get("text", ""))
    return "".join(parts)


class AgentSession:
    def __init__(
        self,
        graph: Any,
        observability: IObservabilityHandler,
        session_id: Optional[str] = None,
    ) -> None:
        """
        Args:
            graph:         Compiled graph returned by build_agent_graph().
            observability: IObservabilityHandler implementation (e.g. Langfuse adapter).
            session_id:    Identifier used for log and trace grouping; generated if omitted.
        """
        self._graph = graph
        self._observability = observability
        self.session_id = session_id or uuid.uuid4().hex
        self._transcript: list[BaseMessage] = [SystemMessage(content=SYSTEM_PROMPT)]

    @property
    def transcript(self) -> tuple[BaseMessage, ...]:
        return tuple(self._transcript)

    async def ask(self, question: str) -> str:
        """Append *question*, run the agent loop to a final answer and return its text.

        Raises:
            InvalidRequest:        if *question* is blank.
            CompletionUnavailable: if the completion engine fails.
        """
        if not isinstance(question, str) or not question.strip():
            raise InvalidRequest("Question is required.")

        with log_context(session_id=self.session_id):
            config = {
                "callbacks": self._observability.callbacks(),
                "metadata": {
                    "langfuse_session_id": self.session_id,
                    "langfuse_tags": ["financial-research-agent"],
                },
            }
            messages = self._transcript + [HumanMessage(content=question.strip())]
            try:
                result = await self._graph.ainvoke(
                    {"messages": messages, "iterations": 0},
                    config=config,
                )
            except Exception as exc:
                log_event(
                    logger,
                    event="agent.completion_failed",
                    message=f"Completion engine failed: {exc.__class__.__name__}",
                    level=logging.ERROR,
                )
                raise CompletionUnavailable(
                    "The language model could not complete the request."
                ) from exc

            self._transcript = list(result["messages"])
            answer = message_text(self._transcript[-1])
            log_event(
                logger,
                event="agent.answered",
                message="Answer ready",
                fields={"transcript_length": len(self._transcript)},
            )
            return answer
