# -*- coding: utf-8 -*-
"""
Step indicator - numbered step buttons shown in the wizard header.

Completed steps are marked, the current step is highlighted, and only the
steps the navigator reports as reachable can be clicked.
"""

from typing import Iterable, List

from PyQt5.QtWidgets import QWidget, QHBoxLayout, QPushButton
from PyQt5.QtCore import pyqtSignal

from app.config import Config


class StepIndicator(QWidget):
    """Clickable step list; emits ``step_clicked(index)``."""

    step_clicked = pyqtSignal(int)

    def __init__(self, titles: List[str], parent=None):
        super().__init__(parent)
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(8)

        self.buttons: List[QPushButton] = []
        for index, title in enumerate(titles):
            button = QPushButton(f"{index + 1}. {title}")
            button.setCheckable(True)
            button.setFlat(True)
            button.clicked.connect(lambda _checked, i=index: self.step_clicked.emit(i))
            layout.addWidget(button)
            self.buttons.append(button)
        layout.addStretch()

    def update_state(self, current: int, completed: Iterable[int], reachable: Iterable[int]):
        completed = set(completed)
        reachable = set(reachable)
        for index, button in enumerate(self.buttons):
            button.setChecked(index == current)
            button.setEnabled(index in reachable)
            if index == current:
                color, weight = Config.PRIMARY_COLOR, 700
            elif index in completed:
                color, weight = "#22A06B", 600
            else:
                color, weight = "#919EAB", 400
            button.setStyleSheet(
                f"QPushButton {{ color: {color}; font-weight: {weight}; border: none; "
                f"padding: 4px 8px; background: transparent; }}"
            )
