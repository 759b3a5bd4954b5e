"""HTTP client wrappers for the Blockfrost Cardano API."""

from .client import BlockfrostApi, BlockfrostHttp
from .models import (
    Address,
    AddressInfo,
    Amount,
    EvaluateTxResult,
    ExUnits,
    Genesis,
    ProtocolParams,
    ServiceErrorPayload,
    TxSubmitResult,
    UTxO,
)
from .resolver import resolve_response

__all__ = [
    "BlockfrostApi",
    "BlockfrostHttp",
    "resolve_response",
    "Address",
    "AddressInfo",
    "Amount",
    "EvaluateTxResult",
    "ExUnits",
    "Genesis",
    "ProtocolParams",
    "ServiceErrorPayload",
    "TxSubmitResult",
    "UTxO",
]
