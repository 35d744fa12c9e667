from __future__ import annotations

from typing import Any, Dict, Optional
from PySide6 import QtWidgets

from ..widgets.inputs import LabeledSpin
from ..widgets.results import AuditTag, MetricCard
from ..service import Debounce
from ..state import UIState, status_line
from ..theme import DEBOUNCE_MS
from ... import api
from ... import io
from ... import presets as P
from ...schemas import AUDIT_FIELDS, HEADLINE_FIELDS

# alias -> (label, unit, tooltip)
PROCESS_FIELDS = {
    "plumaAzul": ("Pluma Azul", "-", None),
    "plumaRoja": ("Pluma Roja", "-", None),
    "diametroPlaca": ("Diám. Placa", "in", None),
    "diametroPuente": ("Diám. Puente", "in", None),
    "medidorRangoEstatico": ("Rango Estático", "%", None),
    "medidorRangoDiferencial": ("Rango Diferencial", "%", None),
    "temperaturac": ("Temperatura", "°C", None),
}

GAS_FIELDS = {
    "gravgas": ("Gravedad del gas γ", "-", "Relativa al aire (≈1)."),
    "fpv": ("FPV", "-", "Factor de compresibilidad."),
    "fb": ("FB", "-", "Constante base del medidor."),
    "relacionCalorEspecifico": ("k (γ de calores)", "-", "Relación de calores específicos (k)."),
}


class CalculatorTab(QtWidgets.QWidget):
    def __init__(self, state: UIState, store: Optional[io.InputStore] = None, parent=None):
        super().__init__(parent)
        self.state = state
        self.store = store or io.InputStore()
        self.fields: Dict[str, LabeledSpin] = {}
        self._loading = False
        self.debounce = Debounce(DEBOUNCE_MS, self)
        self.debounce.triggered.connect(self.on_debounced)
        self._build_ui()
        self._restore()

    def _build_ui(self) -> None:
        root = QtWidgets.QVBoxLayout(self)

        # Top bar: preset + auto toggle
        top = QtWidgets.QHBoxLayout()
        top.addWidget(QtWidgets.QLabel("Cromatografía"))
        self.preset = QtWidgets.QComboBox()
        self.preset.addItem("Sin cromatografía elegida", P.NO_PRESET)
        for name in P.PRESETS:
            self.preset.addItem(name, name)
        self.preset.activated.connect(self.on_preset)
        top.addWidget(self.preset)
        top.addStretch(1)
        self.auto = QtWidgets.QCheckBox("Auto calcular")
        self.auto.setChecked(self.state.auto_calc)
        self.auto.toggled.connect(self.on_auto_toggled)
        top.addWidget(self.auto)
        root.addLayout(top)

        # Inputs
        cols = QtWidgets.QHBoxLayout()
        grp_proc = QtWidgets.QGroupBox("Variables de proceso")
        form_proc = QtWidgets.QFormLayout(grp_proc)
        grp_gas = QtWidgets.QGroupBox("Propiedades del gas y factores")
        form_gas = QtWidgets.QFormLayout(grp_gas)
        for group, form in ((PROCESS_FIELDS, form_proc), (GAS_FIELDS, form_gas)):
            for key, (label, unit, tip) in group.items():
                w = LabeledSpin(label, unit, tooltip=tip)
                w.valueChanged.connect(self.on_changed)
                self.fields[key] = w
                form.addRow(w)

        btn_row = QtWidgets.QHBoxLayout()
        self.calc = QtWidgets.QPushButton("Calcular")
        self.calc.clicked.connect(self.on_submit)
        self.reset = QtWidgets.QPushButton("Reset")
        self.reset.clicked.connect(self.on_reset)
        btn_row.addWidget(self.calc)
        btn_row.addWidget(self.reset)
        form_gas.addRow(btn_row)
        cols.addWidget(grp_proc)
        cols.addWidget(grp_gas)
        root.addLayout(cols)

        # Results
        grp_res = QtWidgets.QGroupBox("Resultado")
        res_layout = QtWidgets.QHBoxLayout(grp_res)
        self.cards: Dict[str, MetricCard] = {}
        for key, (title, unit, digits) in HEADLINE_FIELDS.items():
            card = MetricCard(title, unit, digits)
            self.cards[key] = card
            res_layout.addWidget(card)
        root.addWidget(grp_res)

        grp_audit = QtWidgets.QGroupBox("Cálculos intermedios (auditoría)")
        grid = QtWidgets.QGridLayout(grp_audit)
        self.tags: Dict[str, AuditTag] = {}
        for i, (key, label) in enumerate(AUDIT_FIELDS.items()):
            tag = AuditTag(label)
            self.tags[key] = tag
            grid.addWidget(tag, i // 4, i % 4)
        root.addWidget(grp_audit)

        self.status = QtWidgets.QLabel("Aún no hay resultados. Complete el formulario y calcule.")
        root.addWidget(self.status)
        self._sync_buttons()

    # --- state <-> widgets ---
    def _restore(self) -> None:
        self._set_values(self.store.load())
        if self.state.auto_calc:
            self.recompute()

    def _set_values(self, values: Dict[str, Any]) -> None:
        self._loading = True
        try:
            for key, w in self.fields.items():
                w.setValue(float(values.get(key, P.DEFAULTS[key])))
        finally:
            self._loading = False
        self.state.inputs = self.values()

    def values(self) -> Dict[str, float]:
        return {key: w.value() for key, w in self.fields.items()}

    def _sync_buttons(self) -> None:
        manual = not self.state.auto_calc
        self.calc.setVisible(manual)
        self.reset.setVisible(manual)

    # --- slots ---
    def on_changed(self, *_: Any) -> None:
        if self._loading:
            return
        self.state.inputs = self.values()
        self.debounce.pulse()

    def on_debounced(self) -> None:
        try:
            self.store.save(self.state.inputs)
        except OSError as e:
            self.status.setText(f"No se pudo guardar: {e}")
        if self.state.auto_calc:
            self.recompute()

    def on_auto_toggled(self, checked: bool) -> None:
        self.state.auto_calc = checked
        self._sync_buttons()
        if checked:
            self.recompute()

    def on_submit(self) -> None:
        self.state.inputs = self.values()
        if self.recompute():
            self.status.setText(status_line(self.state.inputs, "Resultados recalculados con los datos ingresados."))

    def on_reset(self) -> None:
        self.debounce.cancel()
        self.preset.setCurrentIndex(0)
        self.state.preset = P.NO_PRESET
        self._set_values(dict(P.DEFAULTS))
        self.state.outputs = None
        for card in self.cards.values():
            card.clear()
        for tag in self.tags.values():
            tag.set_value(None)
        try:
            self.store.save(self.state.inputs)
        except OSError as e:
            self.status.setText(f"No se pudo guardar: {e}")
            return
        self.status.setText("Formulario restablecido.")

    def on_preset(self, index: int) -> None:
        name = self.preset.itemData(index)
        self.state.preset = name
        if name == P.NO_PRESET:
            return
        self._set_values(P.apply_preset(self.values(), name))
        self.status.setText("Preset aplicado")
        self.debounce.pulse()

    def recompute(self) -> bool:
        try:
            out = api.compute(self.state.inputs)
        except api.BackendError as e:
            self.status.setText(f"Error: {e}")
            return False
        self.state.outputs = out
        for key, card in self.cards.items():
            card.set_value(out.get(key))
        for key, tag in self.tags.items():
            tag.set_value(out.get(key))
        self.status.setText(status_line(self.state.inputs))
        return True
