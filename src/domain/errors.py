"""
Domain error taxonomy for the financial research agent.
Zero external dependencies.

DataUnavailable: the upstream provider request itself failed.
MissingData:     the provider answered, but has no such data for the ticker.
                 This is an expected outcome and is not logged as an error.
InvalidRequest:  caller-supplied input failed validation before any network call.
"""


class FinancialAgentError(Exception):
    """Base class for every error raised by the agent core."""


class DataUnavailable(FinancialAgentError):
    """Upstream request failed (network, timeout, non-2xx, malformed body, throttling)."""


class MalformedData(DataUnavailable):
    """Upstream answered with a value the core cannot work without (e.g. a quote price)."""


class MissingData(FinancialAgentError):
    """Upstream succeeded but returned no content of the requested kind."""


class InvalidRequest(FinancialAgentError):
    """Input rejected before reaching the provider or the completion engine."""


class CompletionUnavailable(FinancialAgentError):
    """The chat completion engine failed; the request cannot be answered."""


class ConfigurationError(FinancialAgentError):
    """A required setting is missing or invalid."""
