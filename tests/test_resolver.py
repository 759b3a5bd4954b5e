import json
from typing import Any, List

import pytest

from blockfrost_http.blockfrost_api.models import Address, AddressInfo, Genesis, TxSubmitResult, UTxO
from blockfrost_http.blockfrost_api.resolver import resolve_response
from blockfrost_http.errors import BlockfrostError, SerializationError, ServiceError

from payloads import GENESIS, SERVICE_ERROR, TX_HASH, UTXO


def _body(data) -> bytes:
    return json.dumps(data).encode("utf-8")


def test_success_payload_returns_record():
    genesis = resolve_response(_body(GENESIS), Genesis)
    assert isinstance(genesis, Genesis)
    assert genesis.network_magic == 764824073
    assert genesis.max_lovelace_supply == "45000000000000000"
    assert genesis.active_slots_coefficient == 0.05


def test_success_payload_list():
    utxos = resolve_response(_body([UTXO, UTXO]), List[UTxO])
    assert len(utxos) == 2
    assert utxos[0].amount[0].unit == "lovelace"
    assert utxos[0].amount[0].quantity == "42000000"
    assert utxos[0].data_hash is None


def test_unknown_fields_are_ignored():
    body = dict(GENESIS, future_field={"nested": True})
    genesis = resolve_response(_body(body), Genesis)
    assert genesis.security_param == 2160


def test_service_error_envelope_copied_verbatim():
    with pytest.raises(ServiceError) as excinfo:
        resolve_response(_body(SERVICE_ERROR), Genesis)
    err = excinfo.value
    assert err.status_code == 403
    assert err.error == "Forbidden"
    assert err.message == "Invalid project token."
    assert err.kind == "service"


def test_service_error_for_list_target():
    body = {"status_code": 404, "error": "Not Found", "message": "The requested component has not been found."}
    with pytest.raises(ServiceError) as excinfo:
        resolve_response(_body(body), List[Address])
    assert excinfo.value.status_code == 404


def test_partial_record_is_not_accepted():
    partial = {key: value for key, value in GENESIS.items() if key != "network_magic"}
    with pytest.raises(SerializationError):
        resolve_response(_body(partial), Genesis)


def test_wrong_field_type_is_not_accepted():
    body = dict(GENESIS, epoch_length="not-a-number")
    with pytest.raises(SerializationError):
        resolve_response(_body(body), Genesis)


@pytest.mark.parametrize("payload", [b"", b"not json", b"<html>502 Bad Gateway</html>", b'{"unexpected": 1}', b"[1, 2]"])
def test_unrecognized_payload_is_serialization_error(payload):
    with pytest.raises(SerializationError) as excinfo:
        resolve_response(payload, Genesis)
    assert isinstance(excinfo.value, BlockfrostError)
    assert not isinstance(excinfo.value, ServiceError)


@pytest.mark.parametrize(
    "overrides",
    [
        {"network_magic": "764824073"},
        {"slot_length": True},
        {"active_slots_coefficient": "0.05"},
    ],
)
def test_numeric_fields_are_not_coerced(overrides):
    with pytest.raises(SerializationError):
        resolve_response(_body(dict(GENESIS, **overrides)), Genesis)


def test_bool_field_rejects_string():
    body = {"address": "addr1xyz", "amount": [], "stake_address": None, "type": "shelley", "script": "yes"}
    with pytest.raises(SerializationError):
        resolve_response(_body(body), AddressInfo)


def test_submit_result_rejects_number():
    with pytest.raises(SerializationError):
        resolve_response(b"12345", TxSubmitResult)


def test_incomplete_error_envelope_is_serialization_error():
    with pytest.raises(SerializationError):
        resolve_response(_body({"status_code": 500, "error": "Internal Server Error"}), Genesis)


def test_submit_result_is_plain_string():
    result = resolve_response(_body(TX_HASH), TxSubmitResult)
    assert result.tx_hash == TX_HASH


def test_schema_free_target_accepts_any_json():
    value = resolve_response(_body({"json_value": {"int": 42}}), Any)
    assert value == {"json_value": {"int": 42}}
