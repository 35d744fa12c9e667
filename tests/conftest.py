from __future__ import annotations

import pytest


# Field sheet of the reference scenario (Gas típico properties)
SCENARIO = {
    "plumaAzul": 10,
    "plumaRoja": 10,
    "diametroPlaca": 2,
    "diametroPuente": 4,
    "medidorRangoEstatico": 50,
    "medidorRangoDiferencial": 50,
    "temperaturac": 20,
    "gravgas": 0.65,
    "fb": 674.44,
    "fpv": 1.02,
    "relacionCalorEspecifico": 1.31,
}


@pytest.fixture
def scenario() -> dict:
    return dict(SCENARIO)
