from __future__ import annotations

from typing import Dict, Iterable, List

from paymaster.core.errors import UnsupportedJurisdictionError
from paymaster.tax.jurisdictions.base import JurisdictionAdapter
from paymaster.tax.jurisdictions.namibia import adapter as namibia
from paymaster.tax.jurisdictions.south_africa import adapter as south_africa

_REGISTRY: Dict[str, JurisdictionAdapter] = {}


def register_jurisdiction_adapters(adapters: Iterable[JurisdictionAdapter]) -> None:
    for adapter in adapters:
        _REGISTRY[adapter.code.upper()] = adapter


register_jurisdiction_adapters((namibia, south_africa))


def get_jurisdiction_adapter(country: str) -> JurisdictionAdapter:
    code = (country or "").strip().upper()
    try:
        return _REGISTRY[code]
    except KeyError as exc:
        raise UnsupportedJurisdictionError(country) from exc


def list_jurisdiction_adapters() -> List[JurisdictionAdapter]:
    return list(_REGISTRY.values())


def list_supported_countries() -> list[str]:
    return sorted(_REGISTRY)


__all__ = [
    "UnsupportedJurisdictionError",
    "get_jurisdiction_adapter",
    "list_jurisdiction_adapters",
    "list_supported_countries",
    "register_jurisdiction_adapters",
]
