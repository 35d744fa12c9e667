from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..presets import NO_PRESET, DEFAULTS


@dataclass
class UIState:
    inputs: Dict[str, Any] = field(default_factory=lambda: dict(DEFAULTS))
    auto_calc: bool = True
    preset: str = NO_PRESET
    outputs: Optional[Dict[str, float]] = None


def degenerate_warnings(inputs: Dict[str, Any]) -> List[str]:
    """Messages for readings that drive the result toward zero."""
    msgs: List[str] = []
    if not float(inputs.get("diametroPuente", 0.0)) > 0:
        msgs.append("Diámetro de puente no definido")
    if not float(inputs.get("diametroPlaca", 0.0)) > 0:
        msgs.append("Diámetro de placa no definido")
    if not float(inputs.get("gravgas", 0.0)) > 0:
        msgs.append("Gravedad del gas debe ser > 0")
    if float(inputs.get("plumaAzul", 0.0)) * float(inputs.get("plumaRoja", 0.0)) <= 0:
        msgs.append("Lecturas de pluma en cero")
    return msgs


def status_line(inputs: Dict[str, Any], note: Optional[str] = None) -> str:
    """Degenerate-input warnings, followed by an optional note."""
    parts = degenerate_warnings(inputs)
    if note:
        parts.append(note)
    return "; ".join(parts)
