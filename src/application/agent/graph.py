"""
LangGraph ReAct agent graph factory.

Dependency-injection contract:
  - Receives ILanguageModel and a list of @tool-decorated callables.
  - Never imports ChatBedrock, langfuse or httpx directly.
  - langchain_core and langgraph are treated as orchestration-framework imports,
    acceptable in the application layer.

Loop: llm_node → (tool_node → llm_node)* → END. The number of completion turns
per question is capped; when the cap is hit while tools are still requested,
limit_node closes the turn with a fixed "unable to complete" answer.
"""

import asyncio
import logging

from langchain_core.messages import AIMessage, SystemMessage, ToolMessage
from langgraph.graph import END, START, StateGraph

from src.application.agent.prompts import (
    ITERATION_LIMIT_ANSWER,
    SKIPPED_TOOL_RESULT,
    SYSTEM_PROMPT,
)
from src.application.agent.state import AgentState
from src.domain.ports.llm_port import ILanguageModel
from src.shared.logger import get_logger, log_context, log_event

logger = get_logger(__name__)

DEFAULT_MAX_ITERATIONS = 5


def build_agent_graph(
    llm: ILanguageModel,
    tools: list,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
):
    """Build and compile the ReAct agent graph.

    Args:
        llm:            ILanguageModel implementation — injected, no direct SDK reference.
        tools:          List of LangChain @tool-decorated callables from tool_registry.
        max_iterations: Maximum completion-engine turns per question (>= 1).

    Returns:
        Compiled LangGraph graph ready for ainvoke() calls.
    """
    if max_iterations < 1:
        raise ValueError("max_iterations must be at least 1")

    tools_by_name = {t.name: t for t in tools}
    llm_with_tools = llm.bind_tools(tools)

    async def llm_node(state: AgentState) -> dict:
        """Reasoning step: prepend system prompt if absent, then call the LLM."""
        existing = state["messages"]
        if existing and isinstance(existing[0], SystemMessage):
            messages = existing
        else:
            messages = [SystemMessage(content=SYSTEM_PROMPT)] + existing
        response = await llm_with_tools.ainvoke(messages)
        return {
            "messages": [response],
            "iterations": state.get("iterations", 0) + 1,
        }

    async def run_tool_call(tool_call: dict) -> ToolMessage:
        name = tool_call["name"]
        with log_context(tool=name):
            tool = tools_by_name.get(name)
            if tool is None:
                content = f"Unknown tool: {name}"
            else:
                try:
                    content = str(await tool.ainvoke(tool_call["args"]))
                except Exception as exc:
                    log_event(
                        logger,
                        event="tool.failed",
                        message=f"Tool {name} raised {exc.__class__.__name__}",
                        level=logging.WARNING,
                        fields={"args": tool_call["args"]},
                    )
                    content = f"Tool {name} failed: {exc}"
            log_event(logger, event="tool.completed", message=f"Tool {name} completed")
        return ToolMessage(content=content, tool_call_id=tool_call["id"], name=name)

    async def tool_node(state: AgentState) -> dict:
        """Action step: run every requested tool call concurrently.

        gather() returns results in request order, so the transcript order does
        not depend on which call finishes first.
        """
        last_message = state["messages"][-1]
        results = await asyncio.gather(
            *(run_tool_call(tool_call) for tool_call in last_message.tool_calls)
        )
        return {"messages": list(results)}

    def limit_node(state: AgentState) -> dict:
        """Terminal step when the turn cap is reached with tool calls still pending."""
        last_message = state["messages"][-1]
        log_event(
            logger,
            event="agent.iteration_limit",
            message=f"Stopped after {state.get('iterations', 0)} completion turns",
            level=logging.WARNING,
        )
        skipped = [
            ToolMessage(
                content=SKIPPED_TOOL_RESULT,
                tool_call_id=tool_call["id"],
                name=tool_call["name"],
            )
            for tool_call in last_message.tool_calls
        ]
        return {"messages": skipped + [AIMessage(content=ITERATION_LIMIT_ANSWER)]}

    def should_continue(state: AgentState) -> str:
        """Route: execute requested tool calls, stop at the cap, or end."""
        last_message = state["messages"][-1]
        if getattr(last_message, "tool_calls", None):
            if state.get("iterations", 0) >= max_iterations:
                return "limit_node"
            return "tool_node"
        return END

    workflow = StateGraph(AgentState)
    workflow.add_node("llm_node", llm_node)
    workflow.add_node("tool_node", tool_node)
    workflow.add_node("limit_node", limit_node)
    workflow.add_edge(START, "llm_node")
    workflow.add_conditional_edges(
        "llm_node", should_continue, ["tool_node", "limit_node", END]
    )
    workflow.add_edge("tool_node", "llm_node")
    workflow.add_edge("limit_node", END)
    return workflow.compile().with_config(
        {"recursion_limit": 2 * max_iterations + 2}
    )
