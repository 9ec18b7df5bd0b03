# -*- coding: utf-8 -*-
"""
Slide toggle for boolean FieldSet values (add-ons, membership).
"""

from PyQt5.QtWidgets import QAbstractButton
from PyQt5.QtCore import Qt, QRectF, QSize
from PyQt5.QtGui import QPainter, QColor, QPen

from app.config import Config


class ToggleSwitch(QAbstractButton):
    """
    Checkable button drawn as a track with a sliding knob.

    ``toggled(bool)`` fires for clicks and for ``setChecked``; use
    ``set_checked_silently`` to mirror a FieldSet value without feedback.
    """

    TRACK_W = 40
    TRACK_H = 22
    KNOB_MARGIN = 2
    KNOB_D = TRACK_H - KNOB_MARGIN * 2
    LABEL_GAP = 8
    HEIGHT = 28

    COLOR_ON = QColor(Config.PRIMARY_COLOR)
    COLOR_OFF = QColor("#D1D5DB")
    COLOR_KNOB = QColor("#FFFFFF")
    COLOR_LABEL = QColor("#637381")

    def __init__(self, label: str = "", checked: bool = False, parent=None):
        super().__init__(parent)
        self.setCheckable(True)
        self.setChecked(checked)
        self.setText(label)
        self.setCursor(Qt.PointingHandCursor)
        self.setFixedHeight(self.HEIGHT)

    def set_checked_silently(self, checked: bool):
        blocked = self.blockSignals(True)
        self.setChecked(checked)
        self.blockSignals(blocked)

    def sizeHint(self) -> QSize:
        width = self.TRACK_W
        if self.text():
            width += self.LABEL_GAP + self.fontMetrics().horizontalAdvance(self.text())
        return QSize(width, self.HEIGHT)

    def hitButton(self, pos) -> bool:
        return self.rect().contains(pos)

    def paintEvent(self, event):
        p = QPainter(self)
        p.setRenderHint(QPainter.Antialiasing)
        if not self.isEnabled():
            p.setOpacity(0.5)

        rtl = self.layoutDirection() == Qt.RightToLeft
        top = (self.height() - self.TRACK_H) / 2
        left = self.width() - self.TRACK_W if rtl else 0
        track = QRectF(left, top, self.TRACK_W, self.TRACK_H)

        p.setPen(Qt.NoPen)
        p.setBrush(self.COLOR_ON if self.isChecked() else self.COLOR_OFF)
        p.drawRoundedRect(track, self.TRACK_H / 2, self.TRACK_H / 2)

        # The knob sits at the "end" side when on (right in LTR, left in RTL)
        at_end = self.isChecked() != rtl
        knob_x = track.right() - self.KNOB_D - self.KNOB_MARGIN if at_end \
            else track.left() + self.KNOB_MARGIN
        p.setBrush(self.COLOR_KNOB)
        p.setPen(QPen(QColor(0, 0, 0, 20), 0.5))
        p.drawEllipse(QRectF(knob_x, top + self.KNOB_MARGIN, self.KNOB_D, self.KNOB_D))

        if self.text():
            p.setPen(self.COLOR_LABEL)
            text_width = self.width() - self.TRACK_W - self.LABEL_GAP
            text_left = 0 if rtl else self.TRACK_W + self.LABEL_GAP
            align = (Qt.AlignRight if rtl else Qt.AlignLeft) | Qt.AlignVCenter
            p.drawText(QRectF(text_left, 0, text_width, self.height()), align, self.text())
        p.end()
