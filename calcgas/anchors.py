"""
Frozen anchor set for the orifice-flow constants with brief origin notes.

These values document the empirical chain used by the field calculator.
Tests assert no drift relative to these values. Update this file deliberately
together with the golden values in tests/test_analysis.py.
"""

ANCHORS: dict[str, float] = {
    # Orifice coefficient polynomial in beta (plus pipe-size term)
    "POLY_C0": 830.0,
    "POLY_C1": 5000.0,
    "POLY_C2": 9000.0,
    "POLY_C3": 4200.0,
    "PIPE_TERM_K": 530.0,         # b = 530 / sqrt(D)

    # Orifice discharge constant (not the specific-heat ratio)
    "K_ORIFICE": 0.647,
    "BE_DIVISOR": 12835.0,        # be = e / (12835 * k * d)

    # Pressure conversion, kgf/cm^2 -> psi
    "PSI_PER_KGF_CM2": 14.2233,
    "PERCENT": 100.0,

    # Expansion factor
    "X_DIVISOR": 27.7,            # x = hw / (27.7 * pf)
    "Y_C0": 0.41,
    "Y_C1": 0.35,

    # Temperature
    "T_REF_R": 520.0,             # 60 F base, degrees Rankine
    "R_OFFSET": 460.0,

    # Daily correction factor
    "HOURS_PER_DAY": 24.0,
    "FT3_PER_M3": 35.31,
    "RANGE_SCALE": 10000.0,       # two percent readings
}

# Origins (free-text for docs)
ORIGINS: dict[str, str] = {
    "K_ORIFICE": "Fixed orifice constant of the field sheet; distinct from k = Cp/Cv input",
    "PSI_PER_KGF_CM2": "1 kgf/cm² = 14.2233 psi; static chart calibrated in kgf/cm²",
    "FT3_PER_M3": "Hourly ft³ coefficient to daily m³",
    "T_REF_R": "Base temperature 60 °F = 520 °R",
}
