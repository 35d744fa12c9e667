from __future__ import annotations

import json
import logging

import pytest

from calcgas import io
from calcgas.presets import DEFAULTS


SHEET = """
# Planilla de campo, pozo 12
[LECTURAS]
Pluma Azul: 10
pluma_roja: 10
diametro placa: 2,000
diametroPuente: 4
medidorRangoEstatico: 50
medidor rango diferencial: 50
temperaturac: 20
[GAS]
preset: Gas típico
FB: 674,44
"""


def test_store_roundtrip(tmp_path, scenario):
    store = io.InputStore(tmp_path / "state" / "inputs.json")
    store.save(scenario)
    assert store.load() == scenario
    raw = json.loads(store.path.read_text(encoding="utf-8"))
    assert io.STORE_KEY in raw


def test_store_missing_file_gives_defaults(tmp_path):
    assert io.InputStore(tmp_path / "nope.json").load() == DEFAULTS


def test_store_partial_values_overlay_defaults(tmp_path):
    p = tmp_path / "inputs.json"
    p.write_text(json.dumps({io.STORE_KEY: {"plumaAzul": 3}}), encoding="utf-8")
    out = io.InputStore(p).load()
    assert out["plumaAzul"] == 3
    assert out["fpv"] == DEFAULTS["fpv"]


@pytest.mark.parametrize("content", ["{not json", json.dumps({io.STORE_KEY: [1, 2]})])
def test_store_corrupt_file_falls_back(tmp_path, caplog, content):
    p = tmp_path / "inputs.json"
    p.write_text(content, encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="calcgas.io"):
        assert io.InputStore(p).load() == DEFAULTS
    assert "Ignoring unreadable input state" in caplog.text


def test_store_clear(tmp_path, scenario):
    store = io.InputStore(tmp_path / "inputs.json")
    store.save(scenario)
    store.clear()
    assert not store.path.exists()
    store.clear()


def test_default_path_env(monkeypatch, tmp_path):
    monkeypatch.setenv(io.STATE_ENV, str(tmp_path / "x.json"))
    assert io.InputStore().path == tmp_path / "x.json"


def test_parse_field_report(scenario):
    values, preset = io.parse_field_report(SHEET)
    assert preset == "Gas típico"
    for key in ("plumaAzul", "plumaRoja", "diametroPlaca", "diametroPuente",
                "medidorRangoEstatico", "medidorRangoDiferencial", "temperaturac", "fb"):
        assert values[key] == scenario[key]
    assert "gravgas" not in values


def test_parse_unknown_label_warns(caplog):
    with caplog.at_level(logging.WARNING, logger="calcgas.io"):
        values, preset = io.parse_field_report("operador: 7\nfpv: 1,02")
    assert values == {"fpv": 1.02}
    assert preset is None
    assert "operador" in caplog.text


def test_parse_bad_number():
    with pytest.raises(ValueError, match="Invalid numeric value"):
        io.parse_field_report("gravgas: 0,6x")


def test_parse_malformed_line():
    with pytest.raises(ValueError, match="Malformed line"):
        io.parse_field_report("gravgas 0,65")


def test_store_coerces_restored_values(tmp_path):
    p = tmp_path / "inputs.json"
    p.write_text(json.dumps({io.STORE_KEY: {"plumaAzul": None, "gravgas": "abc",
                                            "fpv": "1,02", "fb": 10**400, "extra": "x"}}),
                 encoding="utf-8")
    out = io.InputStore(p).load()
    assert out == dict(DEFAULTS, plumaAzul=0.0, gravgas=0.0, fpv=1.02, fb=0.0)
    assert all(isinstance(v, float) for v in out.values())
