"""
Persistence of the last-used inputs and a lightweight parser for TXT field sheets.

Field sheet format (sections optional, '#' starts a comment line):

    [LECTURAS]
    plumaAzul: 10
    diametro placa: 2,000
    [GAS]
    preset: Gas típico
    gravgas: 0,65

Decimal commas are normalized. Labels match input aliases or attribute names,
case-insensitively, ignoring spaces and underscores.
"""
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Tuple
import json
import logging
import os
from pathlib import Path

from .presets import with_defaults
from .schemas import FlowInputs

logger = logging.getLogger(__name__)

STORE_KEY = "calcgas:v1:inputs"
STATE_ENV = "CALCGAS_STATE"


def default_state_path() -> Path:
    env = os.environ.get(STATE_ENV)
    if env:
        return Path(env)
    return Path.home() / ".calcgas" / "inputs.json"


class InputStore:
    """JSON file holding the last-used form values under STORE_KEY."""

    def __init__(self, path: Optional[os.PathLike] = None):
        self.path = Path(path) if path is not None else default_state_path()

    def load(self) -> Dict[str, Any]:
        """Saved values overlaid on DEFAULTS and coerced to floats; defaults alone when nothing usable is stored."""
        if not self.path.exists():
            return with_defaults({})
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
            saved = raw.get(STORE_KEY, {}) if isinstance(raw, dict) else {}
            if not isinstance(saved, dict):
                raise ValueError(f"{STORE_KEY} is not an object")
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable input state %s: %s", self.path, e)
            return with_defaults({})
        # restored entries go through the same coercion as form entries
        return FlowInputs.model_validate(with_defaults(saved)).model_dump(by_alias=True)

    def save(self, values: Mapping[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump({STORE_KEY: dict(values)}, f, ensure_ascii=False)
        os.replace(tmp, self.path)

    def clear(self) -> None:
        if self.path.exists():
            self.path.unlink()


def _norm_label(s: str) -> str:
    return s.strip().lower().replace(" ", "").replace("_", "")


def _norm_number(s: str) -> float:
    s_clean = s.strip().replace("\u00A0", "").replace(" ", "").replace(",", ".")
    try:
        return float(s_clean)
    except ValueError as e:
        raise ValueError(f"Invalid numeric value: '{s}'") from e


# normalized label -> alias
_LABELS: Dict[str, str] = {}
for _name, _field in FlowInputs.model_fields.items():
    _LABELS[_norm_label(_name)] = _field.alias or _name
    _LABELS[_norm_label(_field.alias or _name)] = _field.alias or _name


def parse_field_report(text: str) -> Tuple[Dict[str, float], Optional[str]]:
    """Return (inputs keyed by alias, preset name or None)."""
    values: Dict[str, float] = {}
    preset: Optional[str] = None
    for ln in text.splitlines():
        ln = ln.strip()
        if not ln or ln.startswith("#") or (ln.startswith("[") and ln.endswith("]")):
            continue
        if ":" not in ln:
            raise ValueError(f"Malformed line (expected 'key: value'): '{ln}'")
        k, v = ln.split(":", 1)
        label = _norm_label(k)
        if label == "preset":
            preset = v.strip() or None
            continue
        alias = _LABELS.get(label)
        if alias is None:
            logger.warning("Unknown field sheet label %r ignored", k.strip())
            continue
        values[alias] = _norm_number(v)
    return values, preset
