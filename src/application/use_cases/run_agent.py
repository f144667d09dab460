"""
Use-case: answer one question through the compiled LangGraph ReAct agent.
Each call gets a fresh AgentSession, so concurrent requests share no transcript.
"""

from typing import Any, Optional

from src.application.agent.session import AgentSession
from src.domain.ports.observability_port import IObservabilityHandler


class RunAgentUseCase:
    def __init__(self, graph: Any, observability: IObservabilityHandler) -> None:
        """
        Args:
            graph:         Compiled graph returned by build_agent_graph().
            observability: IObservabilityHandler implementation (e.g. Langfuse adapter).
        """
        self._graph = graph
        self._observability = observability

    def new_session(self, session_id: Optional[str] = None) -> AgentSession:
        return AgentSession(self._graph, self._observability, session_id=session_id)

    async def execute(self, question: str, session_id: Optional[str] = None) -> str:
        """Return the agent's final answer to *question*.

        Raises:
            InvalidRequest:        if *question* is blank.
            CompletionUnavailable: if the completion engine fails.
        """
        return await self.new_session(session_id).ask(question)
