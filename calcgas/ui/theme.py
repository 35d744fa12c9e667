from __future__ import annotations

COLORS = {
  "ok": "#00C853",
  "warn": "#FFC400",
  "crit": "#FF1744",
  "neutral": "#90A4AE",
  "bg": "#121212",
  "panel": "#1E1E1E",
}

DEBOUNCE_MS = 400
