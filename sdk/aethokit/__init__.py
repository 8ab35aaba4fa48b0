"""Python SDK for the Aethokit Gas Sponsorship API.

This package is intentionally small:
- Sync and asyncio HTTP clients (gas address lookup, transaction sponsorship).
- Configuration, optionally read from ``AETHOKIT_*`` environment variables.
- A typed error taxonomy for every failure the clients surface.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_BASE_URL",
    "Aethokit",
    "AethokitConfig",
    "AethokitError",
    "AsyncAethokit",
    "DecodeError",
    "MissingGasKeyError",
    "SponsorTxRequest",
    "TransportError",
    "UnexpectedStatusError",
]

from aethokit.client import Aethokit, AsyncAethokit
from aethokit.config import DEFAULT_BASE_URL, AethokitConfig
from aethokit.errors import (
    AethokitError,
    DecodeError,
    MissingGasKeyError,
    TransportError,
    UnexpectedStatusError,
)
from aethokit.types import SponsorTxRequest
