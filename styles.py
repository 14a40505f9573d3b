STYLESHEET = """
QMainWindow {
    background-color: #121212;
    color: #e0e0e0;
}

QWidget {
    font-family: 'Roboto', 'Inter', 'Segoe UI', monospace;
    font-size: 14px;
    color: #e0e0e0;
}

/* Labels */
QLabel {
    color: #e0e0e0;
}

QLabel#AppTitle {
    font-weight: bold;
    font-size: 26px;
    color: #ffffff;
}

QLabel#AppSubtitle {
    color: #aaaaaa;
}

QLabel#SectionTitle {
    font-weight: bold;
    font-size: 15px;
    margin-top: 8px;
    margin-bottom: 4px;
    color: #ffffff;
}

QLabel#RatioLabel {
    font-size: 24px;
    font-weight: bold;
    color: #ffffff;
}

QLabel#ResultLabel {
    font-weight: bold;
    color: #aaaaaa;
}

QLabel#DisplayKey {
    color: #888888;
}

/* Buttons */
QPushButton {
    background-color: #1e1e1e;
    border: 1px solid #333333;
    border-radius: 8px;
    padding: 6px 12px;
    font-weight: bold;
    color: #e0e0e0;
}

QPushButton:hover {
    background-color: #2c2c2c;
    border-color: #444444;
}

QPushButton:pressed {
    background-color: #383838;
}

/* Hex Inputs */
QLineEdit {
    background-color: #1e1e1e;
    border: 1px solid #333333;
    border-radius: 6px;
    padding: 6px;
    font-family: monospace;
    color: #e0e0e0;
}

QLineEdit:focus {
    border-color: #666666;
}

/* Color Swatches */
QFrame#Swatch {
    border-radius: 6px;
    border: 1px solid #333333;
}

QFrame#ColorDisplay {
    background-color: #1e1e1e;
    border: 1px solid #333333;
    border-radius: 8px;
}

QLabel#CodeLabel {
    font-family: monospace;
    font-size: 13px;
    color: #aaaaaa;
}
QLabel#CodeLabel:hover {
    color: #ffffff;
}
QLabel#CodeLabel[flashing="true"] {
    color: #4CAF50;
}

/* Pass / Fail */
QLabel#ComplianceBadge {
    border-radius: 10px;
    padding: 2px 6px;
    font-size: 12px;
    font-weight: bold;
    color: #ffffff;
    background-color: #F44336;
}
QLabel#ComplianceBadge[passed="true"] {
    background-color: #4CAF50;
}

/* Preview Tabs */
QTabWidget::pane {
    border: 1px solid #333;
    border-radius: 4px;
}
QTabBar::tab {
    background: #1e1e1e;
    color: #aaa;
    padding: 8px 12px;
    border-top-left-radius: 4px;
    border-top-right-radius: 4px;
    margin-right: 2px;
}
QTabBar::tab:selected {
    background: #333;
    color: #fff;
    font-weight: bold;
}

/* Status Bar */
QStatusBar {
    color: #aaaaaa;
}

/* Color Dialog */
QDialog {
    background-color: #121212;
    color: #e0e0e0;
}
"""
