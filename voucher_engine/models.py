"""Domain models for voucher requests and the calls derived from them."""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple, Union

NATIVE_CURRENCY = "0x0000000000000000000000000000000000000000"


class AddressResolutionError(LookupError):
    """Raised when a token or contract has no address on the requested chain."""


@dataclass(frozen=True)
class SymbolicAmount:
    """An amount only known when the batch is submitted."""

    name: str


Amount = Union[int, SymbolicAmount]


@dataclass(frozen=True)
class MultichainAddress:
    """A token or contract deployed at possibly different addresses per chain."""

    addresses: Tuple[Tuple[int, str], ...]

    def address_on(self, chain_id: int) -> str:
        for known_chain, address in self.addresses:
            if known_chain == chain_id:
                return address
        raise AddressResolutionError(f"No address on chain {chain_id}.")

    def to_dict(self) -> Dict[str, str]:
        return {str(chain_id): address for chain_id, address in self.addresses}

    @staticmethod
    def from_dict(data: Dict[str, str]) -> "MultichainAddress":
        entries = []
        for chain_id, address in data.items():
            try:
                entries.append((int(chain_id), address))
            except ValueError as exc:
                raise ValueError(f"Invalid chain id: {chain_id}") from exc
        return MultichainAddress(addresses=tuple(sorted(entries)))


TokenIdentifier = Union[str, MultichainAddress]
CallTarget = Union[str, MultichainAddress]


@dataclass(frozen=True)
class AssetEntry:
    token: TokenIdentifier
    amount: Amount

    def to_dict(self) -> Dict[str, object]:
        token = self.token.to_dict() if isinstance(self.token, MultichainAddress) else self.token
        return {"token": token, "amount": amount_to_json(self.amount)}

    @staticmethod
    def from_dict(data: Dict[str, object]) -> "AssetEntry":
        raw_token = data["token"]
        if isinstance(raw_token, dict):
            token: TokenIdentifier = MultichainAddress.from_dict(raw_token)
        elif isinstance(raw_token, str) and raw_token:
            token = raw_token
        else:
            raise ValueError("Asset token must be an address or a chain-to-address map.")
        return AssetEntry(token=token, amount=amount_from_json(data["amount"]))


@dataclass(frozen=True)
class VoucherRequest:
    request_id: str
    tokens: Tuple[AssetEntry, ...]
    destination_chain_id: Optional[int] = None
    notes: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, object]:
        return {
            "request_id": self.request_id,
            "tokens": [asset.to_dict() for asset in self.tokens],
            "destination_chain_id": self.destination_chain_id,
            "notes": list(self.notes),
        }

    @staticmethod
    def from_dict(data: Dict[str, object]) -> "VoucherRequest":
        destination = data.get("destination_chain_id")
        return VoucherRequest(
            request_id=str(data["request_id"]),
            tokens=tuple(AssetEntry.from_dict(entry) for entry in data["tokens"]),
            destination_chain_id=int(destination) if destination is not None else None,
            notes=tuple(data.get("notes", [])),
        )


@dataclass(frozen=True)
class InternalVoucherRequest:
    """The on-chain voucher request record passed to ``lockUserDeposit``."""

    origin_chain_id: int
    request_id: str
    destination_chain_id: Optional[int]
    assets: Tuple[Tuple[str, Amount], ...]

    def to_dict(self) -> Dict[str, object]:
        return {
            "origin_chain_id": self.origin_chain_id,
            "request_id": self.request_id,
            "destination_chain_id": self.destination_chain_id,
            "assets": [
                {"token": token, "amount": amount_to_json(amount)}
                for token, amount in self.assets
            ],
        }


@dataclass(frozen=True)
class VoucherInternalInfo:
    voucher_request: InternalVoucherRequest


@dataclass(frozen=True)
class ValueCall:
    target: str
    value: int


@dataclass(frozen=True)
class FunctionCall:
    target: CallTarget
    function_name: str
    args: Tuple[object, ...]
    value: Optional[int] = None


Call = Union[ValueCall, FunctionCall]


def is_concrete_amount(amount: object) -> bool:
    return isinstance(amount, int) and not isinstance(amount, bool)


def amount_to_json(amount: Amount) -> object:
    if isinstance(amount, SymbolicAmount):
        return {"runtime_var": amount.name}
    return amount


def amount_from_json(value: object) -> Amount:
    if isinstance(value, dict):
        name = value.get("runtime_var")
        if not isinstance(name, str) or not name:
            raise ValueError("Symbolic amounts must name a runtime_var.")
        return SymbolicAmount(name=name)
    if isinstance(value, bool):
        raise ValueError("Amount must be an integer.")
    if isinstance(value, int):
        if value < 0:
            raise ValueError("Amount must be non-negative.")
        return value
    if isinstance(value, str) and value.isdigit():
        return int(value)
    raise ValueError(f"Unsupported amount: {value!r}")


def call_to_dict(call: Call, chain_id: int) -> Dict[str, object]:
    if isinstance(call, ValueCall):
        return {"target": call.target, "value": call.value}

    target = call.target
    if isinstance(target, MultichainAddress):
        target = target.address_on(chain_id)
    payload: Dict[str, object] = {
        "target": target,
        "function_name": call.function_name,
        "args": [_arg_to_json(arg) for arg in call.args],
    }
    if call.value is not None:
        payload["value"] = call.value
    return payload


def _arg_to_json(arg: object) -> object:
    if isinstance(arg, InternalVoucherRequest):
        return arg.to_dict()
    if isinstance(arg, SymbolicAmount):
        return amount_to_json(arg)
    return arg
