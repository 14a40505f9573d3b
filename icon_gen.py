from PySide6.QtGui import QIcon, QPixmap, QPainter, QColor, QPen
from PySide6.QtCore import Qt, QRect

def create_app_icon():
    """
    Generates the application icon: a circle split into black and white halves.
    """
    size = 64
    pixmap = QPixmap(size, size)
    pixmap.fill(Qt.transparent)

    painter = QPainter(pixmap)
    painter.setRenderHint(QPainter.Antialiasing)

    rect = QRect(4, 4, 56, 56)
    painter.setPen(Qt.NoPen)

    # Angles are in 1/16th of a degree, counter-clockwise from 3 o'clock
    painter.setBrush(QColor("#000000"))
    painter.drawPie(rect, 90 * 16, 180 * 16)
    painter.setBrush(QColor("#ffffff"))
    painter.drawPie(rect, 270 * 16, 180 * 16)

    # Outline
    painter.setBrush(Qt.NoBrush)
    painter.setPen(QPen(QColor("#808080"), 2))
    painter.drawEllipse(rect)

    painter.end()

    return QIcon(pixmap)
