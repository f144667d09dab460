"""
Interactive console entry point.

One long-lived AgentSession: every question sees the full conversation so far.
Type 'quit' or 'exit' to end.

Run:
    python -m src.infrastructure.entrypoints.console
"""

import asyncio
from collections.abc import Awaitable, Callable

from src.application.agent.session import AgentSession
from src.domain.errors import CompletionUnavailable, InvalidRequest

EXIT_COMMANDS = {"quit", "exit"}


async def run_console(
    session: AgentSession,
    read_line: Callable[[str], Awaitable[str]],
    write: Callable[[str], None] = print,
) -> None:
    """Read questions until an exit command or end of input, printing each answer."""
    write("Financial Agent ready. Type 'quit' to exit.\n")
    while True:
        try:
            line = await read_line("You: ")
        except EOFError:
            break
        if line.strip().lower() in EXIT_COMMANDS:
            break
        if not line.strip():
            continue
        try:
            answer = await session.ask(line)
        except InvalidRequest as exc:
            write(f"\n{exc}\n")
            continue
        except CompletionUnavailable as exc:
            write(f"\nAgent: {exc}\n")
            continue
        write(f"\nAgent: {answer}\n")


async def _read_stdin(prompt: str) -> str:
    return await asyncio.to_thread(input, prompt)


async def main() -> None:
    from src.infrastructure.config.settings import Settings
    from src.infrastructure.entrypoints.composition import build_components

    components = build_components(Settings.from_env())
    try:
        await run_console(components.run_use_case.new_session(), _read_stdin)
    finally:
        await components.aclose()


if __name__ == "__main__":
    asyncio.run(main())
