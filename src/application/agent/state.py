"""
LangGraph agent state definition.
langgraph is the orchestration framework and is allowed in the application layer.
"""

from typing import Annotated, TypedDict

from langgraph.graph.message import add_messages


class AgentState(TypedDict):
    """Shared state threaded through every node in the ReAct graph.

    messages:   append-only transcript of LangChain BaseMessage objects managed
                by the add_messages reducer.
    iterations: completion-engine turns taken for the current question.
    """

    messages: Annotated[list, add_messages]
    iterations: int
