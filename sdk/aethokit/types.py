from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class GasAddressResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    gas_address: str = Field(..., alias="gasAddress")


class SponsorTxRequest(BaseModel):
    """Request body for ``sponsor_tx``.

    ``transaction`` is the serialized, partially-signed transaction.
    ``rpc_or_network`` is an RPC endpoint or network name and is left off
    the wire when unset.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    transaction: str
    rpc_or_network: str | None = Field(None, alias="rpcOrNetwork")


class SponsorTxResponse(BaseModel):
    hash: str
