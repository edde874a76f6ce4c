"""
Stability dock widgets.
Panels that render a ValidationResult and restrict bond-order controls.
"""
from typing import Dict, List, Optional

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QButtonGroup,
    QDockWidget,
    QFormLayout,
    QHBoxLayout,
    QHeaderView,
    QLabel,
    QListWidget,
    QPushButton,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from chemcalc.bonds import allowed_bond_orders, bond_type_name, bond_type_symbol
from chemcalc.recognize import recognize_molecule
from chemcalc.validator import ValidationResult
from core.model import MolGraph


class StabilityDock(QDockWidget):
    """
    Dock widget displaying the stability analysis of the current molecule.
    """

    def __init__(self, parent=None):
        super().__init__("Estabilidad", parent)
        self.setAllowedAreas(Qt.DockWidgetArea.LeftDockWidgetArea | Qt.DockWidgetArea.RightDockWidgetArea)

        container = QWidget()
        layout = QVBoxLayout(container)
        layout.setContentsMargins(8, 8, 8, 8)

        self.info_label = QLabel("Empieza a construir una molécula")
        self.info_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.info_label.setStyleSheet("color: #666666; font-style: italic; padding: 10px;")
        layout.addWidget(self.info_label)

        form = QFormLayout()
        self.status_label = QLabel("-")
        self.formula_label = QLabel("-")
        self.charge_label = QLabel("0")
        self.name_label = QLabel("-")
        form.addRow("Estado", self.status_label)
        form.addRow("Fórmula", self.formula_label)
        form.addRow("Carga total", self.charge_label)
        form.addRow("Molécula", self.name_label)
        layout.addLayout(form)

        self.atom_table = QTableWidget(0, 4)
        self.atom_table.setHorizontalHeaderLabels(["Átomo", "Electrones", "Faltan", "Carga"])
        self.atom_table.horizontalHeader().setSectionResizeMode(QHeaderView.ResizeMode.Stretch)
        self.atom_table.verticalHeader().setVisible(False)
        self.atom_table.setAlternatingRowColors(True)
        layout.addWidget(self.atom_table)

        layout.addWidget(QLabel("Pistas"))
        self.hint_list = QListWidget()
        layout.addWidget(self.hint_list)

        layout.addWidget(QLabel("Avisos"))
        self.warning_list = QListWidget()
        layout.addWidget(self.warning_list)

        layout.addStretch()
        self.setWidget(container)

    def show_graph(self, graph: MolGraph) -> ValidationResult:
        """Validate the graph, render the result and return it."""
        result = graph.validate()
        atoms = sorted(graph.atoms.values(), key=lambda a: a.id)
        self.show_result(result, recognize_molecule(atoms))
        return result

    def show_result(self, result: ValidationResult, names: Optional[List[str]] = None) -> None:
        self.info_label.setVisible(not result.is_valid)
        if result.is_stable:
            self.status_label.setText("Estable")
            self.status_label.setStyleSheet("color: #2e7d32; font-weight: bold;")
        else:
            self.status_label.setText("Inestable")
            self.status_label.setStyleSheet("color: #c62828; font-weight: bold;")
        self.formula_label.setText(result.formula)
        self.charge_label.setText(f"{result.total_charge:+d}" if result.total_charge else "0")
        self.name_label.setText(", ".join(names) if names else "-")

        self.atom_table.setRowCount(len(result.atom_stability))
        for row, stability in enumerate(result.atom_stability):
            values = [
                f"{stability.element}{stability.atom_id}",
                f"{stability.current_electrons}/{stability.target_electrons}",
                str(stability.needs_electrons),
                str(stability.formal_charge),
            ]
            for col, value in enumerate(values):
                self.atom_table.setItem(row, col, QTableWidgetItem(value))

        self.hint_list.clear()
        self.hint_list.addItems(result.hints)
        self.warning_list.clear()
        self.warning_list.addItems(result.warnings)


class BondOrderSelector(QWidget):
    """Single/double/triple buttons limited to the orders a pair of atoms allows."""

    order_selected = pyqtSignal(int)

    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.group = QButtonGroup(self)
        self.group.setExclusive(True)
        self.buttons: Dict[int, QPushButton] = {}
        for order in (1, 2, 3):
            button = QPushButton(bond_type_symbol(order))
            button.setToolTip(bond_type_name(order))
            button.setCheckable(True)
            self.group.addButton(button, order)
            layout.addWidget(button)
            self.buttons[order] = button
        self.buttons[1].setChecked(True)
        self.group.idClicked.connect(self.order_selected.emit)

    def current_order(self) -> int:
        return self.group.checkedId()

    def set_endpoints(self, element1: str, element2: str) -> None:
        """Enable only the bond orders allowed between the two elements."""
        enabled = allowed_bond_orders(element1, element2)
        for order, button in self.buttons.items():
            button.setEnabled(enabled[order])
        if not enabled.get(self.current_order(), False):
            best = max(order for order, ok in enabled.items() if ok)
            self.buttons[best].setChecked(True)
