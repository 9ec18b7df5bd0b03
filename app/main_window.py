# -*- coding: utf-8 -*-
"""
Main application window: launcher for the contract and vehicle wizards.
"""

from typing import Optional

from PyQt5.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QShortcut,
)
from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QFont, QKeySequence

from .config import Config
from services.translation_manager import tr, get_language, set_language, get_layout_direction
from utils.logger import get_logger

logger = get_logger(__name__)


class MainWindow(QMainWindow):
    """Back-office shell; each button opens a wizard in create mode."""

    language_changed = pyqtSignal(bool)  # True for Arabic, False for English

    def __init__(self, client=None, lookups=None, parent=None):
        super().__init__(parent)
        self.client = client
        self.lookups = lookups
        self.open_wizards = []

        self._setup_window()
        self._setup_shortcuts()
        self._create_widgets()

    def _setup_window(self):
        """Configure window properties."""
        self.setWindowTitle(f"{Config.APP_NAME} - {Config.APP_TITLE}")
        self.setMinimumSize(640, 360)
        self.setLayoutDirection(get_layout_direction())

    def _setup_shortcuts(self):
        # Language toggle: Ctrl+L
        self.lang_shortcut = QShortcut(QKeySequence("Ctrl+L"), self)
        self.lang_shortcut.activated.connect(self.toggle_language)

    def _create_widgets(self):
        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(40, 40, 40, 40)
        layout.setSpacing(24)

        self.title_label = QLabel(Config.APP_TITLE_AR if get_language() == "ar" else Config.APP_TITLE)
        font = QFont()
        font.setPointSize(16)
        font.setBold(True)
        self.title_label.setFont(font)
        self.title_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.title_label)

        buttons = QHBoxLayout()
        self.btn_add_contract = QPushButton(tr("main.add_contract"))
        self.btn_add_contract.clicked.connect(lambda: self.open_contract_wizard())
        buttons.addWidget(self.btn_add_contract)

        self.btn_add_vehicle = QPushButton(tr("main.add_vehicle"))
        self.btn_add_vehicle.clicked.connect(lambda: self.open_vehicle_wizard())
        buttons.addWidget(self.btn_add_vehicle)
        layout.addLayout(buttons)
        layout.addStretch()

        self.setCentralWidget(central)

    # =========================================================================
    # Wizards
    # =========================================================================

    def open_contract_wizard(self, record: Optional[dict] = None, entity_id: Optional[str] = None):
        """Open the contract wizard; with ``entity_id`` it edits ``record``."""
        from ui.wizards.contract import ContractWizard
        wizard = ContractWizard(
            record=record, entity_id=entity_id, on_saved=self._on_contract_saved,
            lookups=self.lookups, client=self.client,
        )
        return self._show_wizard(wizard)

    def open_vehicle_wizard(self, record: Optional[dict] = None, entity_id: Optional[str] = None):
        """Open the vehicle wizard; with ``entity_id`` it edits ``record``."""
        from ui.wizards.vehicle import VehicleWizard
        wizard = VehicleWizard(
            record=record, entity_id=entity_id, on_saved=self._on_vehicle_saved,
            lookups=self.lookups, client=self.client,
        )
        return self._show_wizard(wizard)

    def _show_wizard(self, wizard):
        self.open_wizards.append(wizard)
        wizard.wizard_cancelled.connect(lambda: self._forget(wizard))
        wizard.wizard_completed.connect(lambda _data: self._forget(wizard))
        wizard.setAttribute(Qt.WA_DeleteOnClose, True)
        wizard.show()
        return wizard

    def _forget(self, wizard):
        if wizard in self.open_wizards:
            self.open_wizards.remove(wizard)

    def _on_contract_saved(self, data):
        logger.info(f"Contract saved: {data}")

    def _on_vehicle_saved(self, data):
        logger.info(f"Vehicle saved: {data}")

    def toggle_language(self):
        is_arabic = get_language() != "ar"
        set_language("ar" if is_arabic else "en")
        self.setLayoutDirection(get_layout_direction())
        self.title_label.setText(Config.APP_TITLE_AR if is_arabic else Config.APP_TITLE)
        self.btn_add_contract.setText(tr("main.add_contract"))
        self.btn_add_vehicle.setText(tr("main.add_vehicle"))
        self.language_changed.emit(is_arabic)
