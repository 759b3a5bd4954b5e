"""
Async HTTP client for the Blockfrost Cardano API.

Each endpoint method builds its URL relative to the configured base URL, sends
the ``project_id`` header and hands the raw body to ``resolve_response``. All
failures are raised as ``BlockfrostError`` subclasses.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence, Tuple, Type, TypeVar
from urllib.parse import quote

import httpx

from blockfrost_http.config import DEFAULT_TIMEOUT, BlockfrostConfig
from blockfrost_http.errors import BlockfrostError, ConfigError, ServiceError, TransportError, UrlParseError
from blockfrost_http.metrics import MetricsRecorder
from blockfrost_http.blockfrost_api.models import (
    Address,
    AddressInfo,
    EvaluateTxResult,
    Genesis,
    ProtocolParams,
    TxSubmitResult,
    UTxO,
)
from blockfrost_http.blockfrost_api.resolver import resolve_response

logger = logging.getLogger(__name__)

T = TypeVar("T")

PROJECT_ID_HEADER = "project_id"
CBOR_CONTENT_TYPE = "application/cbor"


def _normalize_base_url(url: httpx.URL) -> httpx.URL:
    # Relative joins replace the last segment unless the base path ends in "/".
    if url.path.endswith("/"):
        return url
    return url.copy_with(path=url.path + "/")


def _segment(value: Any) -> str:
    return quote(str(value), safe="")


class BlockfrostApi(ABC):
    """Operations exposed by a Blockfrost backend."""

    @abstractmethod
    async def genesis(self) -> Genesis:
        """Return the genesis parameters of the network."""

    @abstractmethod
    async def protocol_params(self, epoch: int) -> ProtocolParams:
        """Return the protocol parameters in force for ``epoch``."""

    @abstractmethod
    async def address_info(self, address: str) -> AddressInfo:
        """Return balance and type information for ``address``."""

    @abstractmethod
    async def utxos(self, address: str, count: Optional[int] = None) -> List[UTxO]:
        """Return UTxOs at ``address``, newest first, at most ``count`` of them."""

    @abstractmethod
    async def datum(self, datum_hash: str) -> Any:
        """Return the JSON content of the datum with ``datum_hash``."""

    @abstractmethod
    async def assoc_addresses(self, stake_address: str) -> List[Address]:
        """Return addresses associated with ``stake_address``."""

    @abstractmethod
    async def account_associated_addresses_total(self, base_address: str) -> List[Address]:
        """Return the associated-addresses total listing for ``base_address``."""

    @abstractmethod
    async def execution_units(self, tx_bytes: bytes) -> EvaluateTxResult:
        """Evaluate the script execution cost of a CBOR transaction."""

    @abstractmethod
    async def submit_tx(self, tx_bytes: bytes) -> TxSubmitResult:
        """Submit a CBOR transaction to the network."""


class BlockfrostHttp(BlockfrostApi):
    """Blockfrost backend over ``httpx.AsyncClient``."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        async_client: Optional[httpx.AsyncClient] = None,
        metrics: Optional[MetricsRecorder] = None,
    ) -> None:
        self._base_url = base_url
        self._api_key = api_key
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = async_client
        self._owns_client = async_client is None
        self._metrics = metrics

    @classmethod
    def from_config(
        cls,
        config: BlockfrostConfig | None = None,
        *,
        async_client: Optional[httpx.AsyncClient] = None,
        metrics: Optional[MetricsRecorder] = None,
    ) -> "BlockfrostHttp":
        """Build a client from ``config``, or from the environment and key file when omitted."""
        config = config or BlockfrostConfig.from_env()
        if not config.api_key:
            raise ConfigError("project_id")
        return cls(
            config.base_url,
            config.api_key,
            timeout=config.timeout,
            async_client=async_client,
            metrics=metrics,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def api_key(self) -> str:
        return self._api_key

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self._base_url!r})"

    async def __aenter__(self) -> "BlockfrostHttp":
        return self

    async def __aexit__(self, *_exc_info: object) -> None:
        await self.aclose()

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
            self._owns_client = True
        return self._client

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    def endpoint_url(self, path: str) -> httpx.URL:
        """Resolve ``path`` (e.g. ``./genesis``) against the base URL."""
        try:
            base = httpx.URL(self._base_url)
        except httpx.InvalidURL as exc:
            raise UrlParseError(f"Invalid base URL {self._base_url!r}: {exc}") from exc
        if not base.scheme or not base.host:
            raise UrlParseError(f"Base URL must be absolute: {self._base_url!r}")
        try:
            return _normalize_base_url(base).join(path)
        except httpx.InvalidURL as exc:
            raise UrlParseError(f"Invalid endpoint path {path!r}: {exc}") from exc

    def _build_headers(self, *, content_type: Optional[str] = None) -> Dict[str, str]:
        headers = {PROJECT_ID_HEADER: self._api_key}
        if content_type:
            headers["Content-Type"] = content_type
        return headers

    async def _request(
        self,
        operation: str,
        method: str,
        path: str,
        target: Type[T],
        *,
        params: Optional[Sequence[Tuple[str, str]]] = None,
        content: Optional[bytes] = None,
    ) -> T:
        try:
            result = await self._request_once(method, path, target, params=params, content=content)
        except BlockfrostError as exc:
            if self._metrics is not None:
                self._metrics.record_call(operation, error_kind=exc.kind)
            raise
        if self._metrics is not None:
            self._metrics.record_call(operation)
        return result

    async def _request_once(
        self,
        method: str,
        path: str,
        target: Type[T],
        *,
        params: Optional[Sequence[Tuple[str, str]]],
        content: Optional[bytes],
    ) -> T:
        url = self.endpoint_url(path)
        client = await self._get_client()
        try:
            if method == "POST":
                response = await client.post(
                    url,
                    content=content,
                    headers=self._build_headers(content_type=CBOR_CONTENT_TYPE),
                )
            else:
                response = await client.get(
                    url,
                    params=list(params) if params else None,
                    headers=self._build_headers(),
                )
        except httpx.RequestError as exc:
            logger.warning("Blockfrost request failed for path %s", path, extra={"path": path})
            raise TransportError(f"Request to {path} failed: {exc}") from exc

        try:
            return resolve_response(response.content, target)
        except ServiceError as exc:
            logger.info(
                "Blockfrost returned %s %s for path %s",
                exc.status_code,
                exc.error,
                path,
                extra={"path": path, "error": exc.error},
            )
            raise

    async def genesis(self) -> Genesis:
        return await self._request("genesis", "GET", "./genesis", Genesis)

    async def protocol_params(self, epoch: int) -> ProtocolParams:
        return await self._request(
            "protocol_params", "GET", f"./epochs/{_segment(epoch)}/parameters", ProtocolParams
        )

    async def address_info(self, address: str) -> AddressInfo:
        return await self._request(
            "address_info", "GET", f"./addresses/{_segment(address)}", AddressInfo
        )

    async def utxos(self, address: str, count: Optional[int] = None) -> List[UTxO]:
        params = [("order", "desc")]
        if count is not None:
            params.append(("count", str(count)))
        # Only the first page is fetched; callers page beyond the API default themselves.
        return await self._request(
            "utxos", "GET", f"./addresses/{_segment(address)}/utxos", List[UTxO], params=params
        )

    async def datum(self, datum_hash: str) -> Any:
        return await self._request("datum", "GET", f"./scripts/datum/{_segment(datum_hash)}", Any)

    async def assoc_addresses(self, stake_address: str) -> List[Address]:
        return await self._request(
            "assoc_addresses",
            "GET",
            f"./accounts/{_segment(stake_address)}/addresses",
            List[Address],
        )

    async def account_associated_addresses_total(self, base_address: str) -> List[Address]:
        return await self._request(
            "account_associated_addresses_total",
            "GET",
            f"./accounts/{_segment(base_address)}/addresses/total",
            List[Address],
        )

    async def execution_units(self, tx_bytes: bytes) -> EvaluateTxResult:
        # The evaluate endpoint takes the CBOR as hex text.
        return await self._request(
            "execution_units",
            "POST",
            "./utils/txs/evaluate",
            EvaluateTxResult,
            content=bytes(tx_bytes).hex().encode("ascii"),
        )

    async def submit_tx(self, tx_bytes: bytes) -> TxSubmitResult:
        # The submit endpoint takes raw CBOR bytes.
        return await self._request(
            "submit_tx", "POST", "./tx/submit", TxSubmitResult, content=bytes(tx_bytes)
        )
