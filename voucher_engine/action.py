"""Derive the approval and deposit-lock calls for a voucher request."""

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Protocol, Tuple

from .addresses import is_native, to_address
from .fees import FeePercent, amount_with_fee
from .models import Call, FunctionCall, VoucherRequest, is_concrete_amount

logger = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    """Raised when a voucher request is malformed."""


class VoucherLookupError(LookupError):
    """Raised when a voucher request is missing from the batch registry."""


class BaseAction(Protocol):
    async def encode_call(self, batch) -> Tuple[Call, ...]:
        ...


@dataclass(frozen=True)
class ActionResult:
    action: Optional["VoucherRequestAction"]
    error: Optional[ConfigurationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class VoucherRequestAction:
    """Locks the user deposit for one voucher request with the paymaster.

    The fee is always charged on the first asset of the request: added to the
    native value when that asset is the native currency, otherwise added to its
    ERC-20 approval.
    """

    def __init__(self, voucher_request: VoucherRequest) -> None:
        self._voucher_request = voucher_request
        self._native_amount = 0

        for index, asset in enumerate(voucher_request.tokens):
            if is_concrete_amount(asset.amount) and asset.amount < 0:
                raise ConfigurationError("asset amounts must be non-negative")
            if not (isinstance(asset.token, str) and is_native(asset.token)):
                continue
            if index != 0:
                raise ConfigurationError("native currency must be first asset")
            if not is_concrete_amount(asset.amount):
                raise ConfigurationError("native amount must be a fixed value")
            self._native_amount = asset.amount

    @classmethod
    def try_create(cls, voucher_request: VoucherRequest) -> ActionResult:
        try:
            return ActionResult(action=cls(voucher_request))
        except ConfigurationError as exc:
            return ActionResult(action=None, error=exc)

    @property
    def voucher_request(self) -> VoucherRequest:
        return self._voucher_request

    @property
    def native_amount(self) -> int:
        return self._native_amount

    async def encode_call(self, batch) -> Tuple[Call, ...]:
        chain_id = batch.chain_id
        paymaster_address = batch.config.paymasters.address_on(chain_id)

        info = batch.get_voucher_internal_info(self._voucher_request)
        if info is None:
            raise VoucherLookupError(
                f"voucher request not found: {self._voucher_request.request_id}"
            )

        max_fee_percent = _max_fee_percent(batch.config)

        native_value = self._native_amount
        if self._native_amount > 0 and max_fee_percent > 0:
            native_value = amount_with_fee(self._native_amount, max_fee_percent)

        calls: List[Call] = []
        for index, asset in enumerate(self._voucher_request.tokens):
            token_address = to_address(chain_id, asset.token)
            if is_native(token_address):
                continue

            # Only index 0 bears the fee; a native first asset already carries it.
            approve_amount = asset.amount
            if index == 0 and is_concrete_amount(asset.amount):
                approve_amount = amount_with_fee(asset.amount, max_fee_percent)

            calls.append(
                FunctionCall(
                    target=token_address,
                    function_name="approve",
                    args=(paymaster_address, approve_amount),
                )
            )

        approvals = len(calls)
        calls.append(
            FunctionCall(
                target=batch.config.paymasters,
                function_name="lockUserDeposit",
                args=(info.voucher_request,),
                value=native_value,
            )
        )

        logger.debug(
            "Derived %d approvals for voucher %s on chain %s (native value %d).",
            approvals,
            self._voucher_request.request_id,
            chain_id,
            native_value,
        )
        return tuple(calls)


def _max_fee_percent(config) -> FeePercent:
    fee_config = config.input.fee_config
    if fee_config is None or fee_config.max_fee_percent is None:
        return 0
    if not math.isfinite(fee_config.max_fee_percent):
        raise ValueError("Fee percent must be a finite number.")
    return fee_config.max_fee_percent
