# -*- coding: utf-8 -*-
"""Message boxes used by the wizards (translated titles, RTL aware)."""

from PyQt5.QtWidgets import QWidget, QMessageBox

from services.translation_manager import tr, get_layout_direction
from utils.logger import get_logger

logger = get_logger(__name__)


class ErrorHandler:
    """Static helpers around QMessageBox."""

    @staticmethod
    def _box(parent: QWidget, icon, title: str, message: str, buttons=QMessageBox.Ok,
             default=QMessageBox.Ok) -> int:
        box = QMessageBox(icon, title, message, buttons, parent)
        box.setDefaultButton(default)
        box.setLayoutDirection(get_layout_direction())
        return box.exec_()

    @staticmethod
    def show_error(parent: QWidget, message: str, title: str = None):
        """Submission or lookup failure."""
        logger.debug(f"Error dialog: {message}")
        ErrorHandler._box(parent, QMessageBox.Critical, title or tr("dialog.error"), message)

    @staticmethod
    def show_warning(parent: QWidget, message: str, title: str = None):
        """Refused selection (e.g. a blacklisted customer)."""
        ErrorHandler._box(parent, QMessageBox.Warning, title or tr("dialog.warning"), message)

    @staticmethod
    def confirm(parent: QWidget, message: str, title: str = None) -> bool:
        """Yes/No question; No is the default."""
        reply = ErrorHandler._box(
            parent, QMessageBox.Question, title or tr("dialog.confirm"), message,
            QMessageBox.Yes | QMessageBox.No, QMessageBox.No,
        )
        return reply == QMessageBox.Yes
