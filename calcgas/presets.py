"""
Gas chromatography presets and form defaults.

A preset only overrides gravgas, relacionCalorEspecifico and fpv; it is a
plain mapping overlay applied before each computation.
"""
from __future__ import annotations

from typing import Any, Dict, Mapping

NO_PRESET = "-"

DEFAULTS: Dict[str, float] = {
    "plumaAzul": 0.0,
    "plumaRoja": 0.0,
    "diametroPlaca": 0.0,
    "diametroPuente": 0.0,
    "medidorRangoEstatico": 0.0,
    "medidorRangoDiferencial": 0.0,
    "temperaturac": 0.0,
    "gravgas": 1.0,
    "fb": 674.44,
    "fpv": 1.02196342,
    "relacionCalorEspecifico": 1.3,
}

PRESET_KEYS = ("gravgas", "relacionCalorEspecifico", "fpv")

PRESETS: Dict[str, Dict[str, float]] = {
    "Gas típico": {"gravgas": 0.65, "relacionCalorEspecifico": 1.31, "fpv": 1.02},
    "Gas asociado húmedo": {"gravgas": 0.75, "relacionCalorEspecifico": 1.28, "fpv": 1.015},
    "Gas seco": {"gravgas": 0.60, "relacionCalorEspecifico": 1.33, "fpv": 1.025},
    "Gas PM-08": {"gravgas": 0.6631, "relacionCalorEspecifico": 1.3, "fpv": 1.0212752},
    "Gas C-109": {"gravgas": 0.6631, "relacionCalorEspecifico": 1.33, "fpv": 1.02196342},
}


class UnknownPresetError(KeyError):
    """Raised when a preset name is not in PRESETS."""
    pass


def apply_preset(values: Mapping[str, Any], name: str) -> Dict[str, Any]:
    """Return a copy of values with the preset fields overlaid.

    NO_PRESET returns an unchanged copy.
    """
    if name == NO_PRESET:
        return dict(values)
    try:
        overrides = PRESETS[name]
    except KeyError:
        raise UnknownPresetError(f"Unknown preset: {name!r} (choose from {sorted(PRESETS)})") from None
    return {**values, **overrides}


def with_defaults(values: Mapping[str, Any]) -> Dict[str, Any]:
    """Overlay partial values (e.g. restored from disk) on DEFAULTS."""
    return {**DEFAULTS, **values}
