"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    MalformedResponseError,
    UpstreamError,
    UpstreamRejectedError,
    UpstreamUnavailableError,
)

__all__ = [
    "MalformedResponseError",
    "UpstreamError",
    "UpstreamRejectedError",
    "UpstreamUnavailableError",
]
