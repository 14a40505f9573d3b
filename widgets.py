from PySide6.QtWidgets import QLabel, QFrame, QApplication
from PySide6.QtCore import Qt, Signal, QTimer, Property

class CopyLabel(QLabel):
    """
    A label that copies its text to clipboard on click.
    Uses dynamic property to handle flash styling without resetting font styles.
    """
    copied = Signal(str)

    def __init__(self, text, parent=None):
        super().__init__(text, parent)
        self.setObjectName("CodeLabel")
        self.setCursor(Qt.PointingHandCursor)
        self.setToolTip("Click to copy")

        self._flashing = False

        # Flash timer
        self.flash_timer = QTimer(self)
        self.flash_timer.timeout.connect(self.reset_style)
        self.flash_timer.setSingleShot(True)

    def mousePressEvent(self, event):
        if event.button() == Qt.LeftButton:
            self.copy_text()

    def copy_text(self):
        QApplication.clipboard().setText(self.text())
        self.flash_effect()
        self.copied.emit(self.text())

    def get_flashing(self):
        return self._flashing

    def set_flashing(self, val):
        self._flashing = val
        # Trigger style update
        self.style().unpolish(self)
        self.style().polish(self)

    flashing = Property(bool, get_flashing, set_flashing)

    def flash_effect(self):
        self.set_flashing(True)
        self.flash_timer.start(150)

    def reset_style(self):
        self.set_flashing(False)

class FlashFrame(QFrame):
    """
    A clickable color swatch that flashes its border when pressed.
    """
    clicked = Signal()

    def __init__(self, color_hex, parent=None):
        super().__init__(parent)
        self.setObjectName("Swatch")
        self.setCursor(Qt.PointingHandCursor)
        self.set_color(color_hex)

        self.flash_timer = QTimer(self)
        self.flash_timer.timeout.connect(self.reset_style)
        self.flash_timer.setSingleShot(True)

    def set_color(self, color_hex):
        self.color_hex = color_hex
        self.default_style = f"background-color: {self.color_hex};"
        self.setStyleSheet(self.default_style)

    def enterEvent(self, event):
        self.setStyleSheet(f"background-color: {self.color_hex}; border: 2px solid #ffffff;")
        super().enterEvent(event)

    def leaveEvent(self, event):
        self.setStyleSheet(self.default_style)
        super().leaveEvent(event)

    def mousePressEvent(self, event):
        if event.button() == Qt.LeftButton:
            self.flash_effect()
            self.clicked.emit()

    def flash_effect(self):
        self.setStyleSheet(f"background-color: {self.color_hex}; border: 3px solid #ffffff;")
        self.flash_timer.start(100)

    def reset_style(self):
        if self.underMouse():
            self.setStyleSheet(f"background-color: {self.color_hex}; border: 2px solid #ffffff;")
        else:
            self.setStyleSheet(self.default_style)

class ComplianceBadge(QLabel):
    """
    Pass/Fail pill. The 'passed' property picks the stylesheet colors.
    """
    def __init__(self, parent=None):
        super().__init__("Fail", parent)
        self.setObjectName("ComplianceBadge")
        self.setAlignment(Qt.AlignCenter)
        self.setFixedWidth(60)
        self._passed = False

    def is_passed(self):
        return self._passed

    def set_passed(self, passed):
        self._passed = bool(passed)
        self.setText("Pass" if self._passed else "Fail")
        self.style().unpolish(self)
        self.style().polish(self)

    passed = Property(bool, is_passed, set_passed)
