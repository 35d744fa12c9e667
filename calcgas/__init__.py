"""Orifice-meter gas flow calculator: backend, CLI and PySide6 form."""
