"""
Composition Root shared by the FastAPI service and the interactive console.

Wires every infrastructure adapter once at startup and hands the application
layer plain, injected dependencies. The caller owns the returned HTTP client
and must close it at shutdown.
"""

from dataclasses import dataclass

import httpx

from src.application.agent.graph import build_agent_graph
from src.application.use_cases.run_agent import RunAgentUseCase
from src.domain.ports.observability_port import IObservabilityHandler
from src.infrastructure.config.settings import Settings
from src.infrastructure.entrypoints.tool_registry import create_tools
from src.infrastructure.llm.bedrock_adapter import BedrockChatAdapter
from src.infrastructure.market_data.alpha_vantage_client import AlphaVantageClient
from src.infrastructure.observability.noop_adapter import NoopObservabilityHandler


@dataclass
class AgentComponents:
    run_use_case: RunAgentUseCase
    tools: list
    http_client: httpx.AsyncClient
    observability: IObservabilityHandler

    async def aclose(self) -> None:
        self.observability.flush()
        await self.http_client.aclose()


def build_observability(settings: Settings) -> IObservabilityHandler:
    if settings.langfuse_enabled:
        from src.infrastructure.observability.langfuse_adapter import (
            LangfuseObservabilityHandler,
        )
        return LangfuseObservabilityHandler()
    return NoopObservabilityHandler()


def build_components(settings: Settings) -> AgentComponents:
    http_client = httpx.AsyncClient()
    market_data = AlphaVantageClient(
        http_client,
        api_key=settings.alphavantage_api_key,
        base_url=settings.alphavantage_base_url,
        timeout=settings.market_data_timeout_seconds,
    )
    tools = create_tools(market_data)
    llm = BedrockChatAdapter(model_id=settings.bedrock_model_id, region=settings.aws_region)
    graph = build_agent_graph(llm, tools, max_iterations=settings.agent_max_iterations)
    observability = build_observability(settings)
    return AgentComponents(
        run_use_case=RunAgentUseCase(graph, observability),
        tools=tools,
        http_client=http_client,
        observability=observability,
    )
