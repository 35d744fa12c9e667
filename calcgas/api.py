"""
Thin, stable API for the UI layer and the CLI.

Contracts (do not change signatures during UI work):
  - compute(inputs) -> dict
  - compute_with_preset(inputs, preset) -> dict
  - compare(A, B) -> dict

Inputs are mappings keyed by field alias (plumaAzul, ...) or attribute name.
Coercion is performed via Pydantic schemas; outputs use the alias keys.
"""
from __future__ import annotations

from typing import Any, Dict, Mapping
import logging

from pydantic import ValidationError

from . import analysis as A
from . import presets as P
from .schemas import FlowInputs


class BackendError(Exception):
    """Raised when backend API computation fails in a controlled way."""
    pass


def _validate(inputs: Mapping[str, Any]) -> FlowInputs:
    if not isinstance(inputs, Mapping):
        raise BackendError(f"inputs must be a mapping, got {type(inputs).__name__}")
    try:
        return FlowInputs.model_validate(dict(inputs))
    except ValidationError as e:
        raise BackendError(str(e)) from e


def compute(inputs: Mapping[str, Any]) -> Dict[str, Any]:
    """Compute all sixteen outputs for one set of readings."""
    try:
        inp = _validate(inputs)
        return A.compute_flow(inp).model_dump(by_alias=True)
    except Exception:
        logging.getLogger(__name__).exception("compute failed")
        raise


def compute_with_preset(inputs: Mapping[str, Any], preset: str) -> Dict[str, Any]:
    """Overlay a gas preset on inputs, then compute."""
    return compute(P.apply_preset(inputs, preset))


def compare(inputs_a: Mapping[str, Any], inputs_b: Mapping[str, Any]) -> Dict[str, Any]:
    """Compute both input sets and report per-field deltas and changed fields."""
    try:
        out_a = A.compute_flow(_validate(inputs_a))
        out_b = A.compute_flow(_validate(inputs_b))
        return A.compare_outputs(out_a, out_b)
    except Exception:
        logging.getLogger(__name__).exception("compare failed")
        raise
