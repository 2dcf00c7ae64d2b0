"""
Main Application Window
=======================
The window holding the material form, the input and output text areas, and
the stress-strain chart.

Why is this file needed?
------------------------
1. Layout: It organizes the visual structure of the application.
2. Routing: It marshals widget contents into the ProjectState, calls the
   controller, and presents results or errors. No calculation happens here.
"""
import logging
import os

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QGridLayout, QSplitter, QLabel,
    QLineEdit, QComboBox, QDoubleSpinBox, QPushButton, QPlainTextEdit,
    QFileDialog, QMessageBox
)
from PySide6.QtCore import Qt
from PySide6.QtGui import QAction, QFontDatabase

from stressstrainplotter.config import VISIBLE_APP_NAME, INPUT_FILE_FILTER, SCRIPT_FILE_FILTER
from stressstrainplotter.controller.plotter import PlotterController
from stressstrainplotter.model.errors import StressStrainError
from stressstrainplotter.model.materials import MaterialParameters, MeshKind
from stressstrainplotter.model.state import ProjectState
from stressstrainplotter.view.widgets.curve_plot import CurvePlotWidget

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, project_state: ProjectState) -> None:
        super().__init__()
        self.project: ProjectState = project_state
        self.controller = PlotterController(self.project)

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1200, 700)

        main_widget = QWidget()
        self.setCentralWidget(main_widget)
        main_layout = QVBoxLayout(main_widget)

        # --- 1. CONTROL PANEL ---
        controls = QGridLayout()

        self.material_edit = QLineEdit()
        self.material_edit.setPlaceholderText("Material Name")

        self.mesh_combo = QComboBox()
        for kind in MeshKind:
            self.mesh_combo.addItem(kind.value, userData=kind.value)

        self.temperature_spin = QDoubleSpinBox()
        self.temperature_spin.setRange(-273.15, 5000.0)
        self.temperature_spin.setDecimals(2)
        self.temperature_spin.setSuffix(" °C")

        self.poisson_spin = QDoubleSpinBox()
        self.poisson_spin.setRange(-1.0, 0.5)
        self.poisson_spin.setDecimals(3)
        self.poisson_spin.setSingleStep(0.01)

        controls.addWidget(QLabel("Material Name:"), 0, 0)
        controls.addWidget(self.material_edit, 0, 1)
        controls.addWidget(QLabel("Mesh Type:"), 1, 0)
        controls.addWidget(self.mesh_combo, 1, 1)
        controls.addWidget(QLabel("Temperature [°C]:"), 2, 0)
        controls.addWidget(self.temperature_spin, 2, 1)
        controls.addWidget(QLabel("Poisson Ratio:"), 3, 0)
        controls.addWidget(self.poisson_spin, 3, 1)

        self.btn_plot = QPushButton("Plot Curve")
        self.btn_plot.clicked.connect(self.on_plot_clicked)
        self.btn_generate = QPushButton("Generate APDL")
        self.btn_generate.clicked.connect(self.on_generate_clicked)
        self.btn_switch = QPushButton("Switch Input Order")
        self.btn_switch.clicked.connect(self.on_switch_clicked)

        controls.addWidget(self.btn_plot, 4, 0)
        controls.addWidget(self.btn_generate, 4, 1)
        controls.addWidget(self.btn_switch, 5, 0)

        main_layout.addLayout(controls)

        # --- 2. TEXT AREAS + CHART ---
        splitter = QSplitter(Qt.Horizontal)
        main_layout.addWidget(splitter, 1)

        fixed_font = QFontDatabase.systemFont(QFontDatabase.SystemFont.FixedFont)

        self.input_edit = QPlainTextEdit()
        self.input_edit.setFont(fixed_font)
        self.input_edit.setPlaceholderText("strain [%]    stress [MPa]")
        splitter.addWidget(self.input_edit)

        self.output_edit = QPlainTextEdit()
        self.output_edit.setFont(fixed_font)
        self.output_edit.setReadOnly(True)
        splitter.addWidget(self.output_edit)

        self.chart = CurvePlotWidget()
        splitter.addWidget(self.chart)
        splitter.setSizes([250, 450, 500])

        # --- ACTIONS & MENUS ---
        self._create_actions()
        self._create_menus()

        self.load_from_state()

    def _create_actions(self) -> None:
        self.act_new = QAction("New", self)
        self.act_new.setShortcut("Ctrl+N")
        self.act_new.triggered.connect(self.on_file_new)

        self.act_open = QAction("Open Data...", self)
        self.act_open.setShortcut("Ctrl+O")
        self.act_open.triggered.connect(self.on_file_open)

        self.act_export = QAction("Export APDL...", self)
        self.act_export.setShortcut("Ctrl+S")
        self.act_export.triggered.connect(self.on_export_script)
        self.act_export.setEnabled(False)  # Disabled until a script exists

        self.act_exit = QAction("Exit", self)
        self.act_exit.triggered.connect(self.close)

    def _create_menus(self) -> None:
        file_menu = self.menuBar().addMenu("&File")
        file_menu.addAction(self.act_new)
        file_menu.addSeparator()
        file_menu.addAction(self.act_open)
        file_menu.addAction(self.act_export)
        file_menu.addSeparator()
        file_menu.addAction(self.act_exit)

    # --- STATE SYNC ---

    def load_from_state(self) -> None:
        """Populate the widgets from the ProjectState."""
        params = self.project.parameters
        self.material_edit.setText(params.material_name)
        self.mesh_combo.setCurrentIndex(self.mesh_combo.findData(params.mesh_kind.value))
        self.temperature_spin.setValue(params.temperature)
        self.poisson_spin.setValue(params.poisson_ratio)
        self.input_edit.setPlainText(self.project.input_text)
        self.output_edit.setPlainText(self.project.script or "")
        if self.project.curve is not None:
            self.chart.set_curve(self.project.curve)
        self._update_status()

    def _sync_to_state(self) -> None:
        """Push the widget contents into the ProjectState before a request."""
        self.controller.set_input_text(self.input_edit.toPlainText())
        self.controller.set_parameters(
            MaterialParameters(
                temperature=self.temperature_spin.value(),
                poisson_ratio=self.poisson_spin.value(),
                material_name=self.material_edit.text(),
                mesh_kind=MeshKind(self.mesh_combo.currentData()),
            )
        )

    def _update_status(self) -> None:
        self.statusBar().showMessage(f"Input order: {self.project.order_label}")

    # --- SLOTS ---

    def on_switch_clicked(self) -> None:
        self._sync_to_state()
        switched = self.controller.switch_input_order()
        self.input_edit.setPlainText(switched)
        self._update_status()

    def on_plot_clicked(self) -> None:
        self._sync_to_state()
        try:
            curve = self.controller.plot_curve()
        except StressStrainError as e:
            QMessageBox.critical(self, "Error", f"Error plotting graph: {e}")
            return
        self.chart.set_curve(curve)

    def on_generate_clicked(self) -> None:
        self._sync_to_state()
        try:
            script = self.controller.generate_script()
        except StressStrainError as e:
            QMessageBox.critical(self, "Error", f"Error generating APDL: {e}")
            return
        self.output_edit.setPlainText(script)
        self.act_export.setEnabled(True)

    def on_file_new(self) -> None:
        self.controller.new_session()
        self.chart.clear_curve()
        self.act_export.setEnabled(False)
        self.load_from_state()

    def on_file_open(self) -> None:
        path, _ = QFileDialog.getOpenFileName(self, "Open Data", "", INPUT_FILE_FILTER)
        if not path:
            return
        try:
            text = self.controller.load_input(path)
        except (OSError, UnicodeDecodeError) as e:
            QMessageBox.critical(self, "Error", f"Could not open file:\n{e}")
            return
        self.input_edit.setPlainText(text)
        self.statusBar().showMessage(f"Loaded {os.path.basename(path)}", 5000)

    def on_export_script(self) -> None:
        path, _ = QFileDialog.getSaveFileName(self, "Export APDL", "", SCRIPT_FILE_FILTER)
        if not path:
            return
        try:
            self.controller.export_script(path)
        except (StressStrainError, OSError) as e:
            QMessageBox.critical(self, "Error", f"Could not export APDL script:\n{e}")
            return
        self.statusBar().showMessage(f"Exported {os.path.basename(path)}", 5000)
