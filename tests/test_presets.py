from __future__ import annotations

import pytest

from calcgas.presets import DEFAULTS, NO_PRESET, PRESET_KEYS, PRESETS, UnknownPresetError, apply_preset, with_defaults


@pytest.mark.parametrize("name", list(PRESETS))
def test_preset_only_touches_gas_fields(scenario, name):
    out = apply_preset(scenario, name)
    assert set(PRESETS[name]) == set(PRESET_KEYS)
    for k in scenario:
        if k in PRESET_KEYS:
            assert out[k] == PRESETS[name][k]
        else:
            assert out[k] == scenario[k]


def test_apply_preset_returns_copy(scenario):
    before = dict(scenario)
    apply_preset(scenario, "Gas seco")
    assert scenario == before


def test_no_preset_is_noop(scenario):
    out = apply_preset(scenario, NO_PRESET)
    assert out == scenario
    assert out is not scenario


def test_unknown_preset():
    with pytest.raises(UnknownPresetError):
        apply_preset(DEFAULTS, "Gas inexistente")


def test_with_defaults_overlay():
    out = with_defaults({"plumaAzul": 7})
    assert out["plumaAzul"] == 7
    assert out["fb"] == 674.44
    assert set(out) == set(DEFAULTS)
