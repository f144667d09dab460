"""
FastAPI entry point — question/answer service.

create_app() takes an already-wired RunAgentUseCase so tests can inject fakes;
build_app() is the Composition Root for real runs.

Run locally:
    uvicorn src.infrastructure.entrypoints.fastapi_app:build_app --factory --port 8000
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from src.application.use_cases.run_agent import RunAgentUseCase
from src.domain.entities.tool_descriptor import ToolDescriptor
from src.domain.errors import CompletionUnavailable, DataUnavailable, InvalidRequest
from src.shared.logger import get_logger, log_event

logger = get_logger(__name__)


class AgentRequest(BaseModel):
    question: str = ""


class AgentResponse(BaseModel):
    answer: str


class ToolInfo(BaseModel):
    name: str
    description: str
    parameters: dict[str, Any]


def create_app(
    run_use_case: RunAgentUseCase,
    descriptors: Optional[list[ToolDescriptor]] = None,
    lifespan: Any = None,
) -> FastAPI:
    app = FastAPI(title="Financial Research Agent API", lifespan=lifespan)
    tool_infos = [
        ToolInfo(name=d.name, description=d.description, parameters=d.parameters)
        for d in descriptors or []
    ]

    @app.exception_handler(InvalidRequest)
    async def invalid_request(request: Request, exc: InvalidRequest) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(DataUnavailable)
    async def data_unavailable(request: Request, exc: DataUnavailable) -> JSONResponse:
        log_event(
            logger,
            event="api.data_unavailable",
            message=str(exc),
            level=logging.WARNING,
        )
        return JSONResponse(status_code=503, content={"detail": str(exc)})

    @app.exception_handler(CompletionUnavailable)
    async def completion_unavailable(
        request: Request, exc: CompletionUnavailable
    ) -> JSONResponse:
        return JSONResponse(status_code=502, content={"detail": str(exc)})

    @app.post("/ask", response_model=AgentResponse)
    async def ask(body: AgentRequest) -> AgentResponse:
        """Answer a single question with a fresh transcript."""
        if not body.question.strip():
            raise InvalidRequest("Question is required.")
        answer = await run_use_case.execute(body.question)
        return AgentResponse(answer=answer)

    @app.get("/tools", response_model=list[ToolInfo])
    async def list_tools() -> list[ToolInfo]:
        return tool_infos

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


def build_app() -> FastAPI:
    from src.infrastructure.config.settings import Settings
    from src.infrastructure.entrypoints.composition import build_components
    from src.infrastructure.entrypoints.tool_registry import tool_descriptors

    components = build_components(Settings.from_env())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        await components.aclose()

    return create_app(
        components.run_use_case,
        descriptors=tool_descriptors(components.tools),
        lifespan=lifespan,
    )
