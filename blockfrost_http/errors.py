"""
Exception hierarchy for the Blockfrost HTTP client.

Every failure surfaced by the client is a ``BlockfrostError``; the concrete
subclass tells the caller which kind of failure occurred. Underlying library
exceptions are chained as ``__cause__``.
"""

from __future__ import annotations

from typing import Optional


class BlockfrostError(Exception):
    """Base exception for all client failures."""

    kind = "error"

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class TransportError(BlockfrostError):
    """Raised when the HTTP request could not be completed (network, timeout)."""

    kind = "transport"


class SerializationError(BlockfrostError):
    """Raised when a response body matches neither the expected record nor the error envelope."""

    kind = "serialization"


class UrlParseError(BlockfrostError):
    """Raised when the base URL or an endpoint path is malformed."""

    kind = "url"


class ConfigError(BlockfrostError):
    """Raised when a required field is missing from the key file."""

    kind = "config"

    def __init__(self, field: str) -> None:
        super().__init__(f"Config field not found: {field!r}")
        self.field = field


class FileReadError(BlockfrostError):
    """Raised when the key file cannot be read."""

    kind = "file_read"


class ConfigParseError(BlockfrostError):
    """Raised when the key file is not valid TOML."""

    kind = "config_parse"


class EvaluateTxResultMalformed(BlockfrostError):
    """Raised when an evaluation response fails validation of its result body."""

    kind = "evaluate_malformed"


class EvaluateTxFailure(BlockfrostError):
    """Raised when the server reports that the transaction failed to execute."""

    kind = "evaluate_failure"


class ServiceError(BlockfrostError):
    """Error envelope reported by the remote API, copied verbatim."""

    kind = "service"

    def __init__(self, status_code: int, error: str, message: str) -> None:
        super().__init__(
            f"status code: {status_code}, error: {error!r}, message: {message!r}",
            status_code=status_code,
        )
        self.error = error
        self.message = message
