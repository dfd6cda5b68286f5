"""Horizon-backed ledger client."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Mapping, Optional, TypeVar

from stellar_sdk import ServerAsync
from stellar_sdk.client.aiohttp_client import AiohttpClient
from stellar_sdk.exceptions import BadRequestError, BaseHorizonError
from stellar_sdk.exceptions import ConnectionError as HorizonConnectionError
from stellar_sdk.exceptions import NotFoundError as HorizonNotFoundError

from admin_wallet.domain.ledger import (
    AccountSnapshot,
    Balance,
    LedgerNetwork,
    NetworkError,
    NotFoundError,
    ProtocolError,
    RejectedError,
    SubmissionResult,
    SubmissionUnknownError,
    TransactionEnvelope,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _horizon_message(exc: BaseHorizonError) -> str:
    return exc.title or exc.detail or f"Horizon responded with status {exc.status}"


def _result_codes(extras: Optional[Mapping[str, Any]]) -> Optional[Mapping[str, Any]]:
    if not extras:
        return None
    return extras.get("result_codes")


def _describe_rejection(exc: BaseHorizonError) -> str:
    codes = _result_codes(exc.extras) or {}
    transaction_code = codes.get("transaction")
    operation_codes = codes.get("operations") or []
    if transaction_code and operation_codes:
        return f"Transaction rejected: {transaction_code} ({', '.join(operation_codes)})"
    if transaction_code:
        return f"Transaction rejected: {transaction_code}"
    return f"Transaction rejected: {_horizon_message(exc)}"


class HorizonLedgerClient:
    """Ledger client over ``stellar_sdk.ServerAsync``.

    Reads and submissions are bounded by ``request_timeout``. Submission
    failures are split between explicit rejections, which did not apply, and
    transport failures, whose outcome is unknown.
    """

    def __init__(
        self,
        network: LedgerNetwork,
        *,
        request_timeout: float = 20.0,
        server: Optional[ServerAsync] = None,
    ) -> None:
        self._network = network
        self._request_timeout = request_timeout
        self._server = server or ServerAsync(
            horizon_url=network.horizon_url,
            client=AiohttpClient(request_timeout=request_timeout),
        )

    async def _bounded(self, call: Awaitable[T]) -> T:
        return await asyncio.wait_for(call, timeout=self._request_timeout)

    async def load_account(self, address: str) -> AccountSnapshot:
        try:
            data = await self._bounded(self._server.accounts().account_id(address).call())
        except HorizonNotFoundError as exc:
            raise NotFoundError(f"Account {address} not found on {self._network.name}") from exc
        except HorizonConnectionError as exc:
            raise NetworkError(f"Could not reach Horizon: {exc}") from exc
        except asyncio.TimeoutError as exc:
            raise NetworkError("Timed out loading account from Horizon") from exc
        except BaseHorizonError as exc:
            raise NetworkError(f"Horizon error while loading account: {_horizon_message(exc)}") from exc
        return self._to_snapshot(data)

    async def fetch_base_fee(self) -> int:
        try:
            return int(await self._bounded(self._server.fetch_base_fee()))
        except HorizonConnectionError as exc:
            raise NetworkError(f"Could not reach Horizon: {exc}") from exc
        except asyncio.TimeoutError as exc:
            raise NetworkError("Timed out fetching base fee from Horizon") from exc
        except BaseHorizonError as exc:
            raise NetworkError(f"Horizon error while fetching base fee: {_horizon_message(exc)}") from exc

    async def submit(self, envelope: TransactionEnvelope) -> SubmissionResult:
        if not envelope.is_signed:
            raise ValueError("Only signed envelopes can be submitted")
        try:
            data = await self._bounded(
                self._server.submit_transaction(envelope.xdr, skip_memo_required_check=True)
            )
        except BadRequestError as exc:
            logger.warning("Horizon rejected transaction %s: %s", envelope.hash, _result_codes(exc.extras))
            raise RejectedError(
                _describe_rejection(exc),
                title=exc.title,
                detail=exc.detail,
                result_codes=_result_codes(exc.extras),
                extras=exc.extras,
            ) from exc
        except HorizonConnectionError as exc:
            raise SubmissionUnknownError(
                f"Connection to Horizon failed during submission: {exc}",
                transaction_hash=envelope.hash,
            ) from exc
        except asyncio.TimeoutError as exc:
            raise SubmissionUnknownError(
                "Timed out waiting for Horizon to confirm submission",
                transaction_hash=envelope.hash,
            ) from exc
        except BaseHorizonError as exc:
            if exc.status is not None and exc.status < 500:
                raise RejectedError(
                    f"Transaction rejected: {_horizon_message(exc)}",
                    title=exc.title,
                    detail=exc.detail,
                    result_codes=_result_codes(exc.extras),
                    extras=exc.extras,
                ) from exc
            raise SubmissionUnknownError(
                f"Horizon failed during submission: {_horizon_message(exc)}",
                transaction_hash=envelope.hash,
            ) from exc
        return SubmissionResult(
            hash=data.get("hash") or envelope.hash,
            ledger=data.get("ledger"),
            successful=bool(data.get("successful", True)),
            raw=data,
        )

    async def close(self) -> None:
        await self._server.close()

    @staticmethod
    def _to_snapshot(data: Mapping[str, Any]) -> AccountSnapshot:
        try:
            balances = tuple(
                Balance(
                    asset_type=entry["asset_type"],
                    amount=entry["balance"],
                    asset_code=entry.get("asset_code"),
                    asset_issuer=entry.get("asset_issuer"),
                )
                for entry in data["balances"]
            )
            return AccountSnapshot(
                account_id=data["account_id"],
                sequence=int(data["sequence"]),
                balances=balances,
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise ProtocolError(f"Unexpected account payload from Horizon: {exc}") from exc
