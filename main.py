import sys
import os
import json
import logging
from PySide6.QtWidgets import QApplication, QMainWindow, QWidget, QVBoxLayout, QLabel
from PySide6.QtGui import QIcon

from styles import STYLESHEET
from contrast_utils import hex_to_rgb, AA_NORMAL
from icon_gen import create_app_icon
from contrast_ui import ContrastChecker

logger = logging.getLogger(__name__)

# --- Constants ---
SETTINGS_FILE = "settings.json"
SETTINGS_ENV = "CONTRAST_CHECKER_SETTINGS"
LOG_LEVEL_ENV = "CONTRAST_CHECKER_LOG_LEVEL"
STATUS_TIMEOUT_MS = 3000

DEFAULT_SETTINGS = {
    "foreground": "#000000",
    "background": "#FFFFFF",
    "target_ratio": AA_NORMAL,
}

def load_icon():
    base_path = getattr(sys, '_MEIPASS', os.path.dirname(os.path.abspath(__file__)))
    for name in ["icon.ico", "icon.png"]:
        path = os.path.join(base_path, name)
        if os.path.exists(path):
            return QIcon(path)
    return create_app_icon()

def load_settings(path=None):
    """
    Reads start-up settings from a JSON file on top of DEFAULT_SETTINGS.
    The file is optional and never written. Bad entries are skipped.
    """
    settings = dict(DEFAULT_SETTINGS)
    path = path or os.environ.get(SETTINGS_ENV, SETTINGS_FILE)
    if not os.path.exists(path):
        return settings

    try:
        with open(path, 'r') as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Could not read settings from %s: %s", path, e)
        return settings

    if not isinstance(data, dict):
        logger.warning("Ignoring %s: expected a JSON object", path)
        return settings

    for key in ("foreground", "background"):
        if key not in data:
            continue
        if hex_to_rgb(data[key]) is None:
            logger.warning("Ignoring %s setting %r: not a #RRGGBB color", key, data[key])
        else:
            settings[key] = data[key]

    if "target_ratio" in data:
        ratio = data["target_ratio"]
        if isinstance(ratio, (int, float)) and not isinstance(ratio, bool) and 1 <= ratio <= 21:
            settings["target_ratio"] = float(ratio)
        else:
            logger.warning("Ignoring target_ratio setting %r: must be a number in [1, 21]", ratio)

    return settings

def configure_logging():
    level = logging.getLevelName(os.environ.get(LOG_LEVEL_ENV, "WARNING").upper())
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

class MainWindow(QMainWindow):
    def __init__(self, settings=None):
        super().__init__()
        self.setWindowTitle("Contrast Checker")
        self.setMinimumWidth(640)

        # Set App Icon
        self.setWindowIcon(load_icon())

        self.app_settings = settings or dict(DEFAULT_SETTINGS)
        self.setup_ui()

    def setup_ui(self):
        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        main_layout = QVBoxLayout(central_widget)
        main_layout.setSpacing(10)
        main_layout.setContentsMargins(20, 20, 20, 20)

        main_layout.addWidget(QLabel("Contrast Checker", objectName="AppTitle"))
        main_layout.addWidget(QLabel("Check color contrast for accessibility compliance",
                                     objectName="AppSubtitle"))

        s = self.app_settings
        self.checker = ContrastChecker(foreground=s["foreground"],
                                       background=s["background"],
                                       target_ratio=s["target_ratio"])
        self.checker.results_copied.connect(self.on_results_copied)
        for color_input in (self.checker.fg_input, self.checker.bg_input):
            color_input.hex_value.copied.connect(self.on_value_copied)
            color_input.rgb_value.copied.connect(self.on_value_copied)
        self.checker.suggestion_val.copied.connect(self.on_value_copied)
        main_layout.addWidget(self.checker)

        self.statusBar().showMessage("Ready", STATUS_TIMEOUT_MS)

    def on_results_copied(self, text):
        self.statusBar().showMessage("Copied to clipboard: contrast results", STATUS_TIMEOUT_MS)

    def on_value_copied(self, text):
        self.statusBar().showMessage(f"Copied to clipboard: {text}", STATUS_TIMEOUT_MS)

def main():
    configure_logging()
    settings = load_settings()
    logger.info("Starting with %s on %s (target %.2f)",
                settings["foreground"], settings["background"], settings["target_ratio"])

    os.environ["QT_AUTO_SCREEN_SCALE_FACTOR"] = "1"
    app = QApplication(sys.argv)
    app.setStyleSheet(STYLESHEET)

    window = MainWindow(settings)
    window.show()

    return app.exec()

if __name__ == "__main__":
    sys.exit(main())
