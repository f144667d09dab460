"""
Runtime settings loaded from environment variables (and a local .env file).

Only the entrypoints read settings; everything below them receives plain
values through constructors.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from src.domain.errors import ConfigurationError


def _number(env: Mapping[str, str], key: str, default: float, cast=float):
    raw = env.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        value = cast(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{key} must be a number, got {raw!r}") from exc
    if value <= 0:
        raise ConfigurationError(f"{key} must be positive, got {raw!r}")
    return value


@dataclass(frozen=True)
class Settings:
    alphavantage_api_key: str
    alphavantage_base_url: str = "https://www.alphavantage.co/query"
    market_data_timeout_seconds: float = 10.0
    agent_max_iterations: int = 5
    bedrock_model_id: str = "us.amazon.nova-pro-v1:0"
    aws_region: str = "us-east-1"
    langfuse_enabled: bool = False

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from *env* (defaults to os.environ after loading .env).

        Raises:
            ConfigurationError: if ALPHAVANTAGE_API_KEY is missing or a number is invalid.
        """
        if env is None:
            load_dotenv()
            env = os.environ

        api_key = (env.get("ALPHAVANTAGE_API_KEY") or "").strip()
        if not api_key:
            raise ConfigurationError(
                "ALPHAVANTAGE_API_KEY not found in environment variables. "
                "Please create a .env file with ALPHAVANTAGE_API_KEY=your_key"
            )

        return cls(
            alphavantage_api_key=api_key,
            alphavantage_base_url=env.get("ALPHAVANTAGE_BASE_URL") or cls.alphavantage_base_url,
            market_data_timeout_seconds=_number(
                env, "MARKET_DATA_TIMEOUT_SECONDS", cls.market_data_timeout_seconds
            ),
            agent_max_iterations=_number(
                env, "AGENT_MAX_ITERATIONS", cls.agent_max_iterations, cast=int
            ),
            bedrock_model_id=env.get("BEDROCK_MODEL_ID") or cls.bedrock_model_id,
            aws_region=env.get("AWS_DEFAULT_REGION") or cls.aws_region,
            langfuse_enabled=bool((env.get("LANGFUSE_SECRET_KEY") or "").strip()),
        )
