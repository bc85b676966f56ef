from .action import (
    ActionResult,
    BaseAction,
    ConfigurationError,
    VoucherLookupError,
    VoucherRequestAction,
)
from .addresses import is_native, same_address, to_address
from .batch import BatchBuilder, BatchContext, InMemoryVoucherRegistry, VoucherRegistry
from .config import ConfigLoadError, FeeConfig, InputConfig, SdkConfig, config_from_dict, load_config
from .fees import FEE_DENOMINATOR, amount_with_fee
from .models import (
    NATIVE_CURRENCY,
    AddressResolutionError,
    AssetEntry,
    Call,
    FunctionCall,
    InternalVoucherRequest,
    MultichainAddress,
    SymbolicAmount,
    ValueCall,
    VoucherInternalInfo,
    VoucherRequest,
    call_to_dict,
)

__all__ = [
    "ActionResult",
    "AddressResolutionError",
    "AssetEntry",
    "BaseAction",
    "BatchBuilder",
    "BatchContext",
    "Call",
    "ConfigLoadError",
    "ConfigurationError",
    "FEE_DENOMINATOR",
    "FeeConfig",
    "FunctionCall",
    "InMemoryVoucherRegistry",
    "InputConfig",
    "InternalVoucherRequest",
    "MultichainAddress",
    "NATIVE_CURRENCY",
    "SdkConfig",
    "SymbolicAmount",
    "ValueCall",
    "VoucherInternalInfo",
    "VoucherLookupError",
    "VoucherRegistry",
    "VoucherRequest",
    "VoucherRequestAction",
    "amount_with_fee",
    "call_to_dict",
    "config_from_dict",
    "is_native",
    "load_config",
    "same_address",
    "to_address",
]
