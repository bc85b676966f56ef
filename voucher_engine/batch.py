"""Batch context collecting voucher actions for a single chain."""

import logging
from typing import Dict, List, Optional, Protocol, Tuple

from .action import BaseAction, VoucherRequestAction
from .addresses import to_address
from .config import SdkConfig
from .models import Call, InternalVoucherRequest, VoucherInternalInfo, VoucherRequest

logger = logging.getLogger(__name__)


class VoucherRegistry(Protocol):
    def register(self, voucher_request: VoucherRequest, info: VoucherInternalInfo) -> None:
        ...

    def resolve(self, voucher_request: VoucherRequest) -> Optional[VoucherInternalInfo]:
        ...


class BatchContext(Protocol):
    chain_id: int
    config: SdkConfig

    def get_voucher_internal_info(
        self, voucher_request: VoucherRequest
    ) -> Optional[VoucherInternalInfo]:
        ...


class InMemoryVoucherRegistry:
    def __init__(self) -> None:
        self._entries: Dict[VoucherRequest, VoucherInternalInfo] = {}

    def register(self, voucher_request: VoucherRequest, info: VoucherInternalInfo) -> None:
        self._entries[voucher_request] = info

    def resolve(self, voucher_request: VoucherRequest) -> Optional[VoucherInternalInfo]:
        return self._entries.get(voucher_request)

    def __contains__(self, voucher_request: object) -> bool:
        return voucher_request in self._entries

    def __len__(self) -> int:
        return len(self._entries)


class BatchBuilder:
    """Collects voucher actions and encodes their calls for one chain."""

    def __init__(
        self,
        chain_id: int,
        config: SdkConfig,
        registry: Optional[VoucherRegistry] = None,
    ) -> None:
        self.chain_id = chain_id
        self.config = config
        if registry is None:
            registry = InMemoryVoucherRegistry()
        self._registry: VoucherRegistry = registry
        self._actions: List[BaseAction] = []

    @property
    def actions(self) -> Tuple[BaseAction, ...]:
        return tuple(self._actions)

    def add_voucher_request(self, voucher_request: VoucherRequest) -> VoucherRequestAction:
        action = VoucherRequestAction(voucher_request)
        record = InternalVoucherRequest(
            origin_chain_id=self.chain_id,
            request_id=voucher_request.request_id,
            destination_chain_id=voucher_request.destination_chain_id,
            assets=tuple(
                (to_address(self.chain_id, asset.token), asset.amount)
                for asset in voucher_request.tokens
            ),
        )
        self._registry.register(voucher_request, VoucherInternalInfo(voucher_request=record))
        self._actions.append(action)
        logger.debug(
            "Registered voucher %s on chain %s.", voucher_request.request_id, self.chain_id
        )
        return action

    def get_voucher_internal_info(
        self, voucher_request: VoucherRequest
    ) -> Optional[VoucherInternalInfo]:
        return self._registry.resolve(voucher_request)

    async def encode_calls(self) -> Tuple[Call, ...]:
        calls: List[Call] = []
        for action in self._actions:
            calls.extend(await action.encode_call(self))
        return tuple(calls)
