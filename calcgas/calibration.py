"""
Centralized constants for the orifice-meter field calculation.

Values are sourced from anchors.ANCHORS to keep the golden tests stable.
Update anchors.py deliberately when retuning.
"""
from .anchors import ANCHORS

# --- Orifice coefficient polynomial ---
# e = d * (830 - 5000*beta + 9000*beta^2 - 4200*beta^3 + 530/sqrt(D))
POLY_C0: float = float(ANCHORS["POLY_C0"])
POLY_C1: float = float(ANCHORS["POLY_C1"])
POLY_C2: float = float(ANCHORS["POLY_C2"])
POLY_C3: float = float(ANCHORS["POLY_C3"])
PIPE_TERM_K: float = float(ANCHORS["PIPE_TERM_K"])

# Orifice discharge constant. Kept separate from the specific-heat ratio input.
K_ORIFICE: float = float(ANCHORS["K_ORIFICE"])
BE_DIVISOR: float = float(ANCHORS["BE_DIVISOR"])

# --- Pressure / head ---
PSI_PER_KGF_CM2: float = float(ANCHORS["PSI_PER_KGF_CM2"])  # [psi per kgf/cm^2]
PERCENT: float = float(ANCHORS["PERCENT"])

# --- Expansion factor Y ---
X_DIVISOR: float = float(ANCHORS["X_DIVISOR"])
Y_C0: float = float(ANCHORS["Y_C0"])
Y_C1: float = float(ANCHORS["Y_C1"])

# --- Flowing temperature ---
T_REF_R: float = float(ANCHORS["T_REF_R"])    # [degR]
R_OFFSET: float = float(ANCHORS["R_OFFSET"])  # degF -> degR

# --- Daily correction factor ---
HOURS_PER_DAY: float = float(ANCHORS["HOURS_PER_DAY"])
FT3_PER_M3: float = float(ANCHORS["FT3_PER_M3"])
RANGE_SCALE: float = float(ANCHORS["RANGE_SCALE"])
