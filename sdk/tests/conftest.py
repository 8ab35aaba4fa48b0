from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest
from fastapi import FastAPI, Header, HTTPException, Request

from aethokit import AethokitConfig

GAS_KEY = "test-gas-key"
GAS_ADDRESS = "GasTank1111111111111111111111111111111111111"
TX_HASH = "5VERYLongSignatureHash"

Handler = Callable[[httpx.Request], httpx.Response]


def build_sponsor_service(*, gas_key: str = GAS_KEY) -> FastAPI:
    """Minimal stand-in for the sponsorship service, mounted under ``/api``."""
    app = FastAPI()
    app.state.received = []

    def _check_key(x_gas_key: str | None) -> None:
        if x_gas_key != gas_key:
            raise HTTPException(status_code=401, detail="invalid gas key")

    @app.get("/api/get-gas-address")
    def get_gas_address(x_gas_key: str | None = Header(default=None)) -> dict[str, str]:
        _check_key(x_gas_key)
        return {"gasAddress": GAS_ADDRESS}

    @app.post("/api/sponsor-tx")
    async def sponsor_tx(request: Request, x_gas_key: str | None = Header(default=None)) -> dict[str, str]:
        _check_key(x_gas_key)
        payload = await request.json()
        app.state.received.append(payload)
        if not payload.get("transaction"):
            raise HTTPException(status_code=400, detail="transaction is required")
        return {"hash": TX_HASH}

    return app


@pytest.fixture()
def config() -> AethokitConfig:
    return AethokitConfig(gas_key=GAS_KEY)


@pytest.fixture()
def sponsor_service() -> FastAPI:
    return build_sponsor_service()


@pytest.fixture()
def mock_http():
    """Build an ``httpx.Client`` backed by *handler*; sent requests land in ``sent``."""

    def _make(handler: Handler) -> tuple[httpx.Client, list[httpx.Request]]:
        sent: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            sent.append(request)
            return handler(request)

        return httpx.Client(transport=httpx.MockTransport(_record)), sent

    return _make


@pytest.fixture()
def mock_async_http():
    def _make(handler: Handler) -> tuple[httpx.AsyncClient, list[httpx.Request]]:
        sent: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            sent.append(request)
            return handler(request)

        return httpx.AsyncClient(transport=httpx.MockTransport(_record)), sent

    return _make
