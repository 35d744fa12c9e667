from __future__ import annotations

import math
from typing import Annotated, Any, Dict, Tuple

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def _coerce_number(v: Any) -> float:
    """Form-entry coercion: empty, invalid or non-finite entries become 0.0."""
    if v is None:
        return 0.0
    if isinstance(v, str):
        s = v.strip().replace("\u00A0", "").replace(" ", "").replace(",", ".")
        if not s:
            return 0.0
        try:
            v = float(s)
        except ValueError:
            return 0.0
    try:
        f = float(v)
    except (TypeError, ValueError, OverflowError):
        return 0.0
    return f if math.isfinite(f) else 0.0


# Common helpers
Reading = Annotated[float, BeforeValidator(_coerce_number)]


class FlowInputs(BaseModel):
    """Field readings and gas properties for one computation."""
    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    pluma_azul: Reading = Field(0.0, alias="plumaAzul")
    pluma_roja: Reading = Field(0.0, alias="plumaRoja")
    diametro_placa: Reading = Field(0.0, alias="diametroPlaca")            # [in]
    diametro_puente: Reading = Field(0.0, alias="diametroPuente")          # [in]
    medidor_rango_estatico: Reading = Field(0.0, alias="medidorRangoEstatico")        # [%]
    medidor_rango_diferencial: Reading = Field(0.0, alias="medidorRangoDiferencial")  # [%]
    temperatura_c: Reading = Field(0.0, alias="temperaturac")              # [°C]
    grav_gas: Reading = Field(1.0, alias="gravgas")
    fb: Reading = Field(674.44, alias="fb")
    fpv: Reading = Field(1.02196342, alias="fpv")
    relacion_calor_especifico: Reading = Field(1.3, alias="relacionCalorEspecifico")


class FlowOutputs(BaseModel):
    """Derived quantities, intermediate audit values included."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    beta_d: float = Field(alias="betaD")
    b: float
    e: float
    k: float
    pfipca: float
    hw: float
    x: float
    y: float
    be: float
    fr: float
    temperatura_f: float = Field(alias="temperaturaf")
    ftf: float
    fg: float
    c_hora: float = Field(alias="cHora")
    factor_correccion: float = Field(alias="factorCorreccion")
    caudal_de_gas: float = Field(alias="caudaldegas")


INPUT_FIELDS: Tuple[str, ...] = tuple(f.alias or name for name, f in FlowInputs.model_fields.items())
OUTPUT_FIELDS: Tuple[str, ...] = tuple(f.alias or name for name, f in FlowOutputs.model_fields.items())

# Display metadata: alias -> (label, unit, decimals)
HEADLINE_FIELDS: Dict[str, Tuple[str, str, int]] = {
    "caudaldegas": ("Caudal de gas", "(unid.)", 3),
    "cHora": ("CHora", "", 5),
    "factorCorreccion": ("Factor Corrección", "", 5),
}

AUDIT_FIELDS: Dict[str, str] = {
    "betaD": "β",
    "y": "y",
    "ftf": "FTF",
    "fg": "FG",
    "fr": "FR",
    "pfipca": "PFIPCA",
    "hw": "HW",
    "x": "x",
    "b": "b",
    "e": "e",
    "k": "k",
    "temperaturaf": "Temp (°F)",
}
