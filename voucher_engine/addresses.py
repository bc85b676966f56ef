"""Chain-specific token address resolution."""

from .models import NATIVE_CURRENCY, AddressResolutionError, MultichainAddress, TokenIdentifier


def to_address(chain_id: int, token: TokenIdentifier) -> str:
    if isinstance(token, MultichainAddress):
        return token.address_on(chain_id)
    if isinstance(token, str) and token:
        return token
    raise AddressResolutionError(f"Cannot resolve token {token!r} on chain {chain_id}.")


def same_address(left: str, right: str) -> bool:
    return left.lower() == right.lower()


def is_native(address: str) -> bool:
    return same_address(address, NATIVE_CURRENCY)
