from __future__ import annotations

from calcgas import calibration as CAL
from calcgas.anchors import ANCHORS, ORIGINS


def test_no_calibration_drift():
    for key, value in ANCHORS.items():
        assert float(getattr(CAL, key)) == float(value), key


def test_origins_reference_anchors():
    assert set(ORIGINS) <= set(ANCHORS)


def test_orifice_constant():
    assert CAL.K_ORIFICE == 0.647
