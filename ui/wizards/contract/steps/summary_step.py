# -*- coding: utf-8 -*-
"""
Summary Step - read-only review before submitting.
"""

from PyQt5.QtWidgets import QLabel, QFormLayout, QGroupBox

from ui.wizards.framework import BaseStep


class SummaryStep(BaseStep):
    """Step 6: review. Nothing to validate here; submit runs the full check."""

    def setup_ui(self):
        self.sections = []

    def refresh(self):
        for box in self.sections:
            self.main_layout.removeWidget(box)
            box.deleteLater()
        self.sections = []

        position = self.main_layout.indexOf(self.form) + 1
        for title, rows in self.navigator.context.get_summary():
            box = QGroupBox(title)
            layout = QFormLayout(box)
            for label, value in rows:
                layout.addRow(QLabel(label), QLabel(str(value)))
            self.main_layout.insertWidget(position, box)
            position += 1
            self.sections.append(box)
