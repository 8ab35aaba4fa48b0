from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_BASE_URL = "https://aethokit.onrender.com/api/"
DEFAULT_TIMEOUT_S = 30.0


def _get_str(name: str, default: str | None) -> str | None:
    val = os.getenv(name)
    if val is None or val == "":
        return default
    return val


def _get_float(name: str, default: float) -> float:
    val = os.getenv(name)
    if val is None or val == "":
        return default
    return float(val)


@dataclass(frozen=True)
class AethokitConfig:
    gas_key: str
    rpc_or_network: str | None = None
    base_url: str = DEFAULT_BASE_URL
    timeout_s: float = DEFAULT_TIMEOUT_S

    @classmethod
    def from_env(cls, prefix: str = "AETHOKIT_") -> AethokitConfig:
        """Build a config from ``<prefix>GAS_KEY`` and friends.

        A missing GAS KEY yields an empty one; the client rejects it.
        """
        return cls(
            gas_key=os.getenv(f"{prefix}GAS_KEY", ""),
            rpc_or_network=_get_str(f"{prefix}RPC_OR_NETWORK", None),
            base_url=_get_str(f"{prefix}BASE_URL", DEFAULT_BASE_URL),
            timeout_s=_get_float(f"{prefix}TIMEOUT", DEFAULT_TIMEOUT_S),
        )
