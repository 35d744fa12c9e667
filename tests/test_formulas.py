from __future__ import annotations

import math

import pytest

from calcgas import formulas as F


def test_finite_or_zero():
    assert F.finite_or_zero(1.5) == 1.5
    assert F.finite_or_zero(math.nan) == 0.0
    assert F.finite_or_zero(math.inf) == 0.0
    assert F.finite_or_zero(-math.inf) == 0.0


@pytest.mark.parametrize("v,expected", [(4.0, 2.0), (0.0, 0.0), (-4.0, 0.0), (math.nan, 0.0)])
def test_guarded_sqrt(v, expected):
    assert F.guarded_sqrt(v) == expected


def test_c_to_f():
    assert F.c_to_f(0) == 32
    assert F.c_to_f(100) == pytest.approx(212)
    assert F.c_to_f(-40) == pytest.approx(-40)


def test_beta_and_pipe_term_guards():
    assert F.beta_ratio(2, 4) == 0.5
    assert F.beta_ratio(2, 0) == 0.0
    assert F.beta_ratio(2, -4) == 0.0
    assert F.pipe_size_term(4) == 265.0
    assert F.pipe_size_term(0) == 0.0


def test_orifice_polynomial():
    assert F.orifice_polynomial(0.5, 265.0) == pytest.approx(320.0)
    assert F.orifice_polynomial(0.0, 0.0) == 830.0


def test_pressure_and_head():
    assert F.static_pressure_psia(50, 2) == pytest.approx(14.2233)
    assert F.differential_head(50, 4) == 2.0
    assert F.head_pressure_ratio(2.0, 0.0) == 0.0
    assert F.head_pressure_ratio(2.0, -1.0) == 0.0
    assert F.head_pressure_ratio(27.7, 1.0) == pytest.approx(1.0)


def test_expansion_factor_guards():
    assert F.expansion_factor(0.1, 0.0, 1.3) == 0.0
    # x = 0 means no expansion correction
    assert F.expansion_factor(0.0, 0.5, 1.3) == 1.0
    # 1 + x < 0: square root term collapses, result is 0 rather than an error
    assert F.expansion_factor(-2.0, 0.5, 1.3) == 0.0
    assert F.expansion_factor(1e10, 1e-300, 1e80) == 0.0


def test_secondary_term_and_reynolds():
    assert F.secondary_term(640.0, 2.0) == pytest.approx(640.0 / (12835 * 0.647 * 2.0))
    assert F.secondary_term(640.0, 0.0) == 0.0
    assert F.secondary_term(640.0, 2.0, k=0.0) == 0.0
    assert F.reynolds_factor(1.0, 1.0, 4.0) == pytest.approx(1.5)
    assert F.reynolds_factor(1.0, 0.0, 4.0) == 0.0
    assert F.reynolds_factor(1.0, 1.0, 0.0) == 0.0
    # product underflows to zero
    assert F.reynolds_factor(1.0, 5e-324, 5e-324) == 0.0


def test_temperature_and_gravity_factors():
    assert F.flowing_temperature_factor(60.0) == 1.0
    assert F.flowing_temperature_factor(-460.0) == 0.0
    assert F.flowing_temperature_factor(-600.0) == 0.0
    assert F.gravity_factor(1.0) == 1.0
    assert F.gravity_factor(0.25) == 2.0
    assert F.gravity_factor(0.0) == 0.0
    assert F.gravity_factor(-1.0) == 0.0


def test_daily_factor_and_flow():
    c = 100.0
    expected = c * 24 / 35.31 * math.sqrt(14.2233 * 50 * 50 / 10000)
    assert F.daily_correction_factor(c, 50, 50) == pytest.approx(expected)
    assert F.daily_correction_factor(c, -50, 50) == 0.0
    assert F.gas_flow(4.0, 9.0, 2.0) == pytest.approx(12.0)
    assert F.gas_flow(-4.0, 9.0, 2.0) == 0.0


def test_kgf_cm2_to_psi():
    assert F.kgf_cm2_to_psi(1.0) == 14.2233
    assert F.static_pressure_psia(100, 1) == F.kgf_cm2_to_psi(1.0)
