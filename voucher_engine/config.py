"""Paymaster and fee configuration."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional
import json
import math

from .models import MultichainAddress


class ConfigLoadError(ValueError):
    """Raised when a configuration document is malformed."""


@dataclass(frozen=True)
class FeeConfig:
    max_fee_percent: Optional[float] = None


@dataclass(frozen=True)
class InputConfig:
    fee_config: Optional[FeeConfig] = None


@dataclass(frozen=True)
class SdkConfig:
    paymasters: MultichainAddress
    input: InputConfig = field(default_factory=InputConfig)

    def with_fee_percent(self, max_fee_percent: float) -> "SdkConfig":
        return SdkConfig(
            paymasters=self.paymasters,
            input=InputConfig(fee_config=FeeConfig(max_fee_percent=max_fee_percent)),
        )

    def to_dict(self) -> Dict[str, object]:
        data: Dict[str, object] = {"paymasters": self.paymasters.to_dict()}
        if self.input.fee_config is not None:
            data["fee_config"] = {"max_fee_percent": self.input.fee_config.max_fee_percent}
        return data


def config_from_dict(data: Dict[str, object]) -> SdkConfig:
    paymasters = data.get("paymasters")
    if not isinstance(paymasters, dict) or not paymasters:
        raise ConfigLoadError("Config must map at least one chain to a paymaster address.")
    try:
        paymaster_directory = MultichainAddress.from_dict(paymasters)
    except ValueError as exc:
        raise ConfigLoadError(str(exc)) from exc

    fee_data = data.get("fee_config")
    fee_config: Optional[FeeConfig] = None
    if fee_data is not None:
        if not isinstance(fee_data, dict):
            raise ConfigLoadError("fee_config must be an object.")
        fee_config = FeeConfig(max_fee_percent=_parse_fee(fee_data.get("max_fee_percent")))

    return SdkConfig(paymasters=paymaster_directory, input=InputConfig(fee_config=fee_config))


def load_config(path: Path) -> SdkConfig:
    try:
        data = json.loads(path.read_text())
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigLoadError(f"Cannot read config {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigLoadError("Config root must be an object.")
    return config_from_dict(data)


def _parse_fee(value: object) -> Optional[float]:
    if value is None:
        return None
    if isinstance(value, bool):
        raise ConfigLoadError("max_fee_percent must be a number.")
    try:
        fee = float(value)
    except (TypeError, ValueError) as exc:
        raise ConfigLoadError("max_fee_percent must be a number.") from exc
    if not math.isfinite(fee):
        raise ConfigLoadError("max_fee_percent must be finite.")
    return fee
