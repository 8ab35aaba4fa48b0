from __future__ import annotations

import json
import logging
from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from aethokit.config import AethokitConfig
from aethokit.errors import DecodeError, MissingGasKeyError, TransportError, UnexpectedStatusError
from aethokit.types import GasAddressResponse, SponsorTxRequest, SponsorTxResponse

logger = logging.getLogger(__name__)

GAS_ADDRESS_PATH = "get-gas-address"
SPONSOR_TX_PATH = "sponsor-tx"

R = TypeVar("R", bound=BaseModel)

# InvalidURL and header encoding failures surface before any response exists.
_SEND_ERRORS = (httpx.HTTPError, httpx.InvalidURL, UnicodeEncodeError)


def _join(base_url: str, path: str) -> str:
    return base_url.rstrip("/") + "/" + path.lstrip("/")


def _require_gas_key(config: AethokitConfig) -> str:
    if not config.gas_key or not config.gas_key.strip():
        raise MissingGasKeyError()
    return config.gas_key


def _build_headers(gas_key: str, *, has_body: bool) -> dict[str, str]:
    h = {"accept": "application/json", "x-gas-key": gas_key}
    if has_body:
        h["content-type"] = "application/json"
    return h


def _encode_body(body: BaseModel | None) -> bytes | None:
    if body is None:
        return None
    payload = body.model_dump(by_alias=True, exclude_none=True)
    return json.dumps(payload, separators=(",", ":")).encode("utf-8")


def _parse_response(response: httpx.Response, model: type[R]) -> R:
    text = response.text
    if not response.is_success:
        raise UnexpectedStatusError(response.status_code, text)
    try:
        return model.model_validate_json(text)
    except ValidationError as exc:
        raise DecodeError(exc, text) from exc


def _pick_hint(rpc_or_network: str | None, config: AethokitConfig) -> str | None:
    return rpc_or_network if rpc_or_network is not None else config.rpc_or_network


def _sponsor_request(transaction: str, rpc_or_network: str | None) -> SponsorTxRequest:
    return SponsorTxRequest(transaction=transaction, rpc_or_network=rpc_or_network)


class Aethokit:
    """Synchronous client for the Aethokit Gas Sponsorship API.

    Example:
        client = Aethokit(AethokitConfig(gas_key="...", rpc_or_network="devnet"))
        sponsor = client.get_gas_address()
        tx_hash = client.sponsor_tx(serialized_tx)
    """

    def __init__(self, config: AethokitConfig, *, http: httpx.Client | None = None) -> None:
        self._gas_key = _require_gas_key(config)
        self._config = config
        self._base_url = config.base_url
        self._owns_http = http is None
        self._http = http if http is not None else httpx.Client(timeout=config.timeout_s)

    @classmethod
    def from_env(cls, *, http: httpx.Client | None = None) -> Aethokit:
        return cls(AethokitConfig.from_env(), http=http)

    @property
    def config(self) -> AethokitConfig:
        return self._config

    @property
    def base_url(self) -> str:
        return self._base_url

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> Aethokit:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def get_gas_address(self) -> str:
        """Retrieve the gas address for the gas tank associated with the GAS KEY."""
        resp = self._make_request(GAS_ADDRESS_PATH, "GET", None, GasAddressResponse)
        return resp.gas_address

    def sponsor_tx(self, transaction: str, *, rpc_or_network: str | None = None) -> str:
        """Submit a partially-signed transaction for sponsorship.

        *rpc_or_network* overrides the configured hint for this call only.
        Returns the transaction hash.
        """
        body = _sponsor_request(transaction, _pick_hint(rpc_or_network, self._config))
        resp = self._make_request(SPONSOR_TX_PATH, "POST", body, SponsorTxResponse)
        return resp.hash

    def _make_request(self, path: str, method: str, body: BaseModel | None, model: type[R]) -> R:
        url = _join(self._base_url, path)
        content = _encode_body(body)
        headers = _build_headers(self._gas_key, has_body=content is not None)
        try:
            r = self._http.request(method, url, content=content, headers=headers)
        except _SEND_ERRORS as exc:
            raise TransportError(exc) from exc
        logger.debug("%s %s returned %s", method, url, r.status_code)
        return _parse_response(r, model)


class AsyncAethokit:
    """asyncio client for the Aethokit Gas Sponsorship API."""

    def __init__(self, config: AethokitConfig, *, http: httpx.AsyncClient | None = None) -> None:
        self._gas_key = _require_gas_key(config)
        self._config = config
        self._base_url = config.base_url
        self._owns_http = http is None
        self._http = http if http is not None else httpx.AsyncClient(timeout=config.timeout_s)

    @classmethod
    def from_env(cls, *, http: httpx.AsyncClient | None = None) -> AsyncAethokit:
        return cls(AethokitConfig.from_env(), http=http)

    @property
    def config(self) -> AethokitConfig:
        return self._config

    @property
    def base_url(self) -> str:
        return self._base_url

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> AsyncAethokit:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def get_gas_address(self) -> str:
        resp = await self._make_request(GAS_ADDRESS_PATH, "GET", None, GasAddressResponse)
        return resp.gas_address

    async def sponsor_tx(self, transaction: str, *, rpc_or_network: str | None = None) -> str:
        body = _sponsor_request(transaction, _pick_hint(rpc_or_network, self._config))
        resp = await self._make_request(SPONSOR_TX_PATH, "POST", body, SponsorTxResponse)
        return resp.hash

    async def _make_request(self, path: str, method: str, body: BaseModel | None, model: type[R]) -> R:
        url = _join(self._base_url, path)
        content = _encode_body(body)
        headers = _build_headers(self._gas_key, has_body=content is not None)
        try:
            r = await self._http.request(method, url, content=content, headers=headers)
        except _SEND_ERRORS as exc:
            raise TransportError(exc) from exc
        logger.debug("%s %s returned %s", method, url, r.status_code)
        return _parse_response(r, model)
