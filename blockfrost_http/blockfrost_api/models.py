"""Typed records returned by the Blockfrost endpoints."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, RootModel, ValidationError

from blockfrost_http.errors import EvaluateTxFailure, EvaluateTxResultMalformed


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", strict=True)


class Genesis(_Record):
    """Blockchain genesis parameters."""

    active_slots_coefficient: float
    update_quorum: int
    max_lovelace_supply: str
    network_magic: int
    epoch_length: int
    system_start: int
    slots_per_kes_period: int
    slot_length: int
    max_kes_evolutions: int
    security_param: int


class ProtocolParams(_Record):
    """Protocol parameters in force for one epoch."""

    epoch: int
    min_fee_a: int
    min_fee_b: int
    max_block_size: int
    max_tx_size: int
    max_block_header_size: int
    key_deposit: str
    pool_deposit: str
    e_max: int
    n_opt: int
    a0: float
    rho: float
    tau: float
    decentralisation_param: float
    extra_entropy: Optional[Any] = None
    protocol_major_ver: int
    protocol_minor_ver: int
    min_utxo: str
    min_pool_cost: str
    nonce: str
    cost_models: Optional[Dict[str, Any]] = None
    price_mem: Optional[float] = None
    price_step: Optional[float] = None
    max_tx_ex_mem: Optional[str] = None
    max_tx_ex_steps: Optional[str] = None
    max_block_ex_mem: Optional[str] = None
    max_block_ex_steps: Optional[str] = None
    max_val_size: Optional[str] = None
    collateral_percent: Optional[int] = None
    max_collateral_inputs: Optional[int] = None
    coins_per_utxo_size: Optional[str] = None


class Amount(_Record):
    """Quantity of one asset. ``unit`` is ``lovelace`` or policy id + asset name."""

    unit: str
    quantity: str


class AddressInfo(_Record):
    address: str
    amount: List[Amount]
    stake_address: Optional[str] = None
    type: str
    script: bool


class UTxO(_Record):
    """Unspent output held by an address."""

    address: str
    tx_hash: str
    tx_index: Optional[int] = None
    output_index: int
    amount: List[Amount]
    block: str
    data_hash: Optional[str] = None
    inline_datum: Optional[str] = None
    reference_script_hash: Optional[str] = None


class Address(_Record):
    address: str


class ExUnits(_Record):
    memory: int
    steps: int


class EvaluateTxResult(_Record):
    """
    JSON-WSP envelope produced by the evaluation endpoint.

    ``result`` holds either an ``EvaluationResult`` mapping redeemer pointers
    (``spend:0``, ``mint:1``...) to execution units, or an ``EvaluationFailure``.
    """

    type: str
    version: str
    servicename: str
    methodname: str
    result: Dict[str, Any]
    reflection: Optional[Any] = None

    def execution_units(self) -> Dict[str, ExUnits]:
        """Return execution units per redeemer, raising if evaluation did not succeed."""
        if "EvaluationFailure" in self.result:
            raise EvaluateTxFailure(json.dumps(self.result["EvaluationFailure"]))
        raw = self.result.get("EvaluationResult")
        if not isinstance(raw, dict):
            raise EvaluateTxResultMalformed("EvaluationResult missing from evaluation response")
        try:
            return {pointer: ExUnits.model_validate(units) for pointer, units in raw.items()}
        except ValidationError as exc:
            raise EvaluateTxResultMalformed(str(exc)) from exc


class TxSubmitResult(RootModel[str]):
    """Hash of the accepted transaction."""

    model_config = ConfigDict(frozen=True, strict=True)

    @property
    def tx_hash(self) -> str:
        return self.root


class ServiceErrorPayload(_Record):
    """Error envelope the remote API returns in place of a result."""

    status_code: int = Field(..., description="HTTP status reported by the API")
    error: str
    message: str
