"""
Orifice-meter flow computation chain and output comparison (backend-only).
Uses formulas and centralized calibration constants; no I/O.
"""
from __future__ import annotations

import logging
import math
from typing import Any, Dict, List, Optional

from . import formulas as F
from .calibration import K_ORIFICE
from .schemas import FlowInputs, FlowOutputs, OUTPUT_FIELDS

logger = logging.getLogger(__name__)


def _sentinel(values: Dict[str, float]) -> Dict[str, float]:
    out: Dict[str, float] = {}
    for name, v in values.items():
        if not math.isfinite(v):
            logger.debug("non-finite %s=%r replaced by 0.0", name, v)
            v = 0.0
        out[name] = v
    return out


def compute_flow(inp: FlowInputs) -> FlowOutputs:
    """Run the full chain for one set of readings.

    Total for any finite inputs: degenerate readings (zero diameters, zero
    pressure, non-positive gravity) degrade the affected terms to 0.0.
    """
    beta_d = F.beta_ratio(inp.diametro_placa, inp.diametro_puente)
    b = F.pipe_size_term(inp.diametro_puente)
    e = F.orifice_e(inp.diametro_placa, F.orifice_polynomial(beta_d, b))
    k = K_ORIFICE

    pfipca = F.static_pressure_psia(inp.medidor_rango_estatico, inp.diametro_placa)
    hw = F.differential_head(inp.medidor_rango_diferencial, inp.diametro_puente)
    x = F.head_pressure_ratio(hw, pfipca)
    y = F.expansion_factor(x, beta_d, inp.relacion_calor_especifico)

    be = F.secondary_term(e, inp.diametro_placa, k)
    fr = F.reynolds_factor(be, pfipca, hw)

    temperatura_f = F.c_to_f(inp.temperatura_c)
    ftf = F.flowing_temperature_factor(temperatura_f)
    fg = F.gravity_factor(inp.grav_gas)

    c_hora = F.hourly_coefficient(inp.fb, inp.fpv, ftf, fg, fr, y)
    factor = F.daily_correction_factor(c_hora, inp.medidor_rango_diferencial, inp.medidor_rango_estatico)
    caudal = F.gas_flow(inp.pluma_azul, inp.pluma_roja, factor)

    return FlowOutputs(**_sentinel(dict(
        betaD=beta_d,
        b=b,
        e=e,
        k=k,
        pfipca=pfipca,
        hw=hw,
        x=x,
        y=y,
        be=be,
        fr=fr,
        temperaturaf=temperatura_f,
        ftf=ftf,
        fg=fg,
        cHora=c_hora,
        factorCorreccion=factor,
        caudaldegas=caudal,
    )))


def _pct(a: float, b: float) -> Optional[float]:
    if a == 0:
        return None
    return (b - a) / abs(a) * 100.0


def compare_outputs(out_a: FlowOutputs, out_b: FlowOutputs) -> Dict[str, Any]:
    """Per-field A/B values, delta and percent delta (None when A is 0)."""
    a = out_a.model_dump(by_alias=True)
    b = out_b.model_dump(by_alias=True)
    fields: Dict[str, Dict[str, Any]] = {}
    changed: List[str] = []
    for name in OUTPUT_FIELDS:
        va, vb = a[name], b[name]
        fields[name] = {"A": va, "B": vb, "delta": vb - va, "pct": _pct(va, vb)}
        if va != vb:
            changed.append(name)
    return {"fields": fields, "changed": changed}
