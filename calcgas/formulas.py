import math

from .calibration import (
    BE_DIVISOR,
    FT3_PER_M3,
    HOURS_PER_DAY,
    K_ORIFICE,
    PERCENT,
    PIPE_TERM_K,
    POLY_C0,
    POLY_C1,
    POLY_C2,
    POLY_C3,
    PSI_PER_KGF_CM2,
    R_OFFSET,
    RANGE_SCALE,
    T_REF_R,
    X_DIVISOR,
    Y_C0,
    Y_C1,
)

# =============================
# Numeric guards
# =============================

def finite_or_zero(v: float) -> float:
    """NaN / ±Inf → 0.0, anything else unchanged."""
    return v if math.isfinite(v) else 0.0

def guarded_sqrt(v: float) -> float:
    """Square root that returns 0.0 for a negative or NaN radicand instead of raising."""
    if v > 0:
        return math.sqrt(v)
    return 0.0

# Conversions
def c_to_f(t_c: float) -> float:
    """°C → °F."""
    return 9 / 5 * t_c + 32

def kgf_cm2_to_psi(p: float) -> float:
    """kgf/cm² → psi."""
    return p * PSI_PER_KGF_CM2

# =============================
# Orifice geometry
# =============================

def beta_ratio(d_plate_in: float, d_pipe_in: float) -> float:
    """
    Diameter ratio beta = d / D.
    Args:
        d_plate_in: orifice plate bore [in]
        d_pipe_in: meter run bore [in]
    Returns:
        float: beta, 0.0 when the pipe bore is not positive
    """
    if d_pipe_in > 0:
        return d_plate_in / d_pipe_in
    return 0.0

def pipe_size_term(d_pipe_in: float) -> float:
    """
    Empirical pipe-size term b = 530 / sqrt(D).
    Args:
        d_pipe_in: meter run bore [in]
    Returns:
        float: b, 0.0 when the pipe bore is not positive
    """
    if d_pipe_in > 0:
        return PIPE_TERM_K / math.sqrt(d_pipe_in)
    return 0.0

def orifice_polynomial(beta: float, b: float) -> float:
    """
    Orifice coefficient polynomial:
        830 - 5000*beta + 9000*beta^2 - 4200*beta^3 + b
    """
    beta2 = beta * beta
    return POLY_C0 - POLY_C1 * beta + POLY_C2 * beta2 - POLY_C3 * beta2 * beta + b

def orifice_e(d_plate_in: float, polynomial: float) -> float:
    """e = d * polynomial."""
    return d_plate_in * polynomial

# =============================
# Pressure and head
# =============================

def static_pressure_psia(static_range_pct: float, d_plate_in: float) -> float:
    """
    Static chart reading to absolute pressure:
        pf = range% * d / 100 * 14.2233
    Args:
        static_range_pct: static chart range [% of full scale]
        d_plate_in: orifice plate bore [in]
    Returns:
        float: pfipca [psia]
    """
    return kgf_cm2_to_psi(static_range_pct * d_plate_in / PERCENT)

def differential_head(diff_range_pct: float, d_pipe_in: float) -> float:
    """hw = range% * D / 100 (working head units)."""
    return diff_range_pct * d_pipe_in / PERCENT

def head_pressure_ratio(hw: float, pf_psia: float) -> float:
    """
    x = hw / (27.7 * pf), 0.0 when pf is not positive.
    """
    if pf_psia > 0:
        return hw / (X_DIVISOR * pf_psia)
    return 0.0

# =============================
# Correction factors
# =============================

def expansion_factor(x: float, beta: float, k_ratio: float) -> float:
    """
    Expansion factor Y:
        raiz = sqrt(1 + x)
        Y = raiz - (0.41 + 0.35*k^4) * x / (beta * raiz)
    The whole expression is forced to 0.0 when beta is not positive or when
    the arithmetic is not finite.
    Args:
        x: head / pressure ratio
        beta: diameter ratio
        k_ratio: ratio of specific heats Cp/Cv
    Returns:
        float: Y
    """
    if not beta > 0:
        return 0.0
    raiz = guarded_sqrt(1 + x)
    k2 = k_ratio * k_ratio
    numerador = (Y_C0 + Y_C1 * k2 * k2) * x
    denom = beta * raiz
    if denom == 0:
        return 0.0
    return finite_or_zero(raiz - numerador / denom)

def secondary_term(e: float, d_plate_in: float, k: float = K_ORIFICE) -> float:
    """
    be = e / (12835 * k * d), 0.0 unless k > 0 and d > 0.
    """
    if k > 0 and d_plate_in > 0:
        return e / (BE_DIVISOR * k * d_plate_in)
    return 0.0

def reynolds_factor(be: float, pf_psia: float, hw: float) -> float:
    """
    Reynolds-style factor:
        fr = 1 + be / sqrt(pf * hw)
    Args:
        be: secondary term
        pf_psia: static pressure [psia]
        hw: differential head
    Returns:
        float: fr, 0.0 unless pf > 0 and hw > 0
    """
    if pf_psia > 0 and hw > 0:
        root = guarded_sqrt(pf_psia * hw)
        if root > 0:
            return 1 + be / root
    return 0.0

def flowing_temperature_factor(t_f: float) -> float:
    """
    Ftf = sqrt(520 / (460 + T[°F])). Absolute temperatures at or below
    0 °R give 0.0.
    """
    t_r = R_OFFSET + t_f
    if t_r > 0:
        return guarded_sqrt(T_REF_R / t_r)
    return 0.0

def gravity_factor(gravity: float) -> float:
    """Fg = sqrt(1 / G), 0.0 for non-positive gravity."""
    if gravity > 0:
        return guarded_sqrt(1 / gravity)
    return 0.0

def hourly_coefficient(fb: float, fpv: float, ftf: float, fg: float, fr: float, y: float) -> float:
    """C' per hour: Fb * Fpv * Ftf * Fg * Fr * Y."""
    return fb * fpv * ftf * fg * fr * y

def daily_correction_factor(c_hora: float, diff_range_pct: float, static_range_pct: float) -> float:
    """
    Daily correction factor:
        C' * 24 / 35.31 * sqrt(14.2233 * diff% * static% / 10000)
    Args:
        c_hora: hourly coefficient
        diff_range_pct: differential chart range [%]
        static_range_pct: static chart range [%]
    Returns:
        float: factor (0.0 when the chart product is negative)
    """
    chart = guarded_sqrt(PSI_PER_KGF_CM2 * diff_range_pct * static_range_pct / RANGE_SCALE)
    return c_hora * HOURS_PER_DAY / FT3_PER_M3 * chart

def gas_flow(pen_blue: float, pen_red: float, factor: float) -> float:
    """
    Flow rate: geometric mean of the two pen readings times the factor.
    A negative pen product gives 0.0.
    """
    return guarded_sqrt(pen_blue * pen_red) * factor
