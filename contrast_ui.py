import logging

from PySide6.QtWidgets import (QWidget, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit,
                               QPushButton, QFrame, QGridLayout, QTabWidget, QColorDialog,
                               QApplication)
from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QColor

from contrast_utils import (calculate_contrast, suggest_passing_color, check_compliance,
                            format_ratio, format_results, hex_to_rgb, rgb_to_hex,
                            AA_NORMAL, AA_LARGE, AAA_NORMAL, AAA_LARGE)
from widgets import FlashFrame, CopyLabel, ComplianceBadge

logger = logging.getLogger(__name__)

PRESETS = ["#FFFFFF", "#000000", "#808080", "#404040"]

class ColorInput(QWidget):
    """
    Hex entry + swatch (opens a color dialog) + presets + HEX/RGB readout.
    Emits color_changed with the raw text on every edit, valid or not.
    """
    color_changed = Signal(str)

    def __init__(self, title, default_hex, parent=None):
        super().__init__(parent)
        self.title = title
        self.color_hex = default_hex
        self.setup_ui()
        self.update_display()

    def setup_ui(self):
        vbox = QVBoxLayout(self)
        vbox.setContentsMargins(0, 0, 0, 0)
        vbox.setSpacing(8)

        vbox.addWidget(QLabel(self.title, objectName="SectionTitle"))

        # Input Row: Swatch + Edit
        hbox = QHBoxLayout()

        self.swatch = FlashFrame(self.color_hex)
        self.swatch.setFixedSize(60, 36)
        self.swatch.setToolTip(f"Select {self.title.lower()}")
        self.swatch.clicked.connect(self.pick_color)
        hbox.addWidget(self.swatch)

        self.hex_edit = QLineEdit(self.color_hex)
        self.hex_edit.setMaxLength(7)
        self.hex_edit.setAccessibleName(f"{self.title} hex value")
        self.hex_edit.textChanged.connect(self.on_text_changed)
        hbox.addWidget(self.hex_edit)

        vbox.addLayout(hbox)

        # Presets
        preset_row = QHBoxLayout()
        preset_row.setSpacing(5)
        for p in PRESETS:
            s = FlashFrame(p)
            s.setFixedSize(20, 20)
            s.clicked.connect(lambda c=p: self.set_color(c))
            preset_row.addWidget(s)
        preset_row.addStretch()
        vbox.addLayout(preset_row)

        # Color Display
        display = QFrame()
        display.setObjectName("ColorDisplay")
        grid = QGridLayout(display)
        grid.setContentsMargins(10, 8, 10, 8)

        grid.addWidget(QLabel("HEX", objectName="DisplayKey"), 0, 0)
        self.hex_value = CopyLabel(self.color_hex.upper())
        self.hex_value.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
        grid.addWidget(self.hex_value, 0, 1)

        self.rgb_key = QLabel("RGB", objectName="DisplayKey")
        grid.addWidget(self.rgb_key, 1, 0)
        self.rgb_value = CopyLabel("")
        self.rgb_value.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
        grid.addWidget(self.rgb_value, 1, 1)

        vbox.addWidget(display)

    def text(self):
        return self.hex_edit.text()

    def set_color(self, hex_val):
        # Normalize valid input; anything else goes in as typed
        rgb = hex_to_rgb(hex_val)
        if rgb is not None:
            hex_val = rgb_to_hex(*rgb).upper()
        self.hex_edit.setText(hex_val)

    def on_text_changed(self, text):
        self.color_hex = text
        self.update_display()
        self.color_changed.emit(text)

    def update_display(self):
        self.hex_value.setText(self.color_hex.upper())

        rgb = hex_to_rgb(self.color_hex)
        if rgb is None:
            self.rgb_key.hide()
            self.rgb_value.hide()
            return

        r, g, b = rgb
        self.swatch.set_color(rgb_to_hex(r, g, b))
        self.rgb_value.setText(f"{r}, {g}, {b}")
        self.rgb_key.show()
        self.rgb_value.show()

    def pick_color(self):
        rgb = hex_to_rgb(self.color_hex)
        initial = QColor(rgb_to_hex(*rgb)) if rgb else QColor(Qt.black)
        color = QColorDialog.getColor(initial, self, f"Select {self.title.lower()}")
        if color.isValid():
            self.set_color(color.name())

class ContrastChecker(QWidget):
    results_copied = Signal(str)

    def __init__(self, parent=None, foreground="#000000", background="#FFFFFF",
                 target_ratio=AA_NORMAL):
        super().__init__(parent)

        # Raw text as typed; may be invalid
        self.fg_color = foreground
        self.bg_color = background
        self.target_ratio = target_ratio
        self.ratio = 1.0

        self.setup_ui()
        self.update_results()

    def setup_ui(self):
        layout = QVBoxLayout()
        layout.setSpacing(20)
        self.setLayout(layout)

        # --- 1. Inputs Area ---
        inputs_layout = QHBoxLayout()
        inputs_layout.setSpacing(20)

        self.fg_input = ColorInput("Foreground Color", self.fg_color)
        self.fg_input.color_changed.connect(lambda t: self.on_hex_changed(t, True))
        inputs_layout.addWidget(self.fg_input)

        self.bg_input = ColorInput("Background Color", self.bg_color)
        self.bg_input.color_changed.connect(lambda t: self.on_hex_changed(t, False))
        inputs_layout.addWidget(self.bg_input)

        layout.addLayout(inputs_layout)

        swap_row = QHBoxLayout()
        self.swap_btn = QPushButton("⇄  Swap Colors")
        self.swap_btn.setCursor(Qt.PointingHandCursor)
        self.swap_btn.clicked.connect(self.swap_colors)
        swap_row.addStretch()
        swap_row.addWidget(self.swap_btn)
        swap_row.addStretch()
        layout.addLayout(swap_row)

        # --- 2. Preview Area ---
        preview_header = QHBoxLayout()
        preview_header.addWidget(QLabel("Preview", objectName="SectionTitle"))
        preview_header.addStretch()
        self.copy_btn = QPushButton("Copy Results")
        self.copy_btn.setCursor(Qt.PointingHandCursor)
        self.copy_btn.clicked.connect(self.copy_results)
        preview_header.addWidget(self.copy_btn)
        layout.addLayout(preview_header)

        self.tabs = QTabWidget()

        self.text_preview = QFrame()
        self.text_preview.setObjectName("PreviewBox")
        text_layout = QVBoxLayout(self.text_preview)
        self.small_text_lbl = QLabel("Small Text (16px)")
        self.small_text_lbl.setAlignment(Qt.AlignCenter)
        self.large_text_lbl = QLabel("Large Text (24px)")
        self.large_text_lbl.setAlignment(Qt.AlignCenter)
        text_layout.addWidget(self.small_text_lbl)
        text_layout.addWidget(self.large_text_lbl)
        self.tabs.addTab(self.text_preview, "Text")

        self.ui_preview = QFrame()
        self.ui_preview.setObjectName("PreviewBox")
        ui_layout = QHBoxLayout(self.ui_preview)
        self.button_lbl = QLabel("Button")
        self.outlined_lbl = QLabel("Outlined Button")
        ui_layout.addStretch()
        ui_layout.addWidget(self.button_lbl)
        ui_layout.addWidget(self.outlined_lbl)
        ui_layout.addStretch()
        self.tabs.addTab(self.ui_preview, "UI Elements")

        layout.addWidget(self.tabs)

        # --- 3. Results Area ---
        results_grid = QGridLayout()
        results_grid.setSpacing(10)

        self.ratio_lbl = QLabel(objectName="RatioLabel")
        results_grid.addWidget(self.ratio_lbl, 0, 0, 1, 3, Qt.AlignCenter)

        aa_header = QLabel("WCAG 2.1 AA", objectName="ResultLabel")
        aa_header.setToolTip(f"AA requires a contrast ratio of at least {AA_NORMAL:g}:1 for normal text\n"
                             f"and {AA_LARGE:g}:1 for large text (18pt or 14pt bold).")
        aaa_header = QLabel("WCAG 2.1 AAA", objectName="ResultLabel")
        aaa_header.setToolTip(f"AAA requires a contrast ratio of at least {AAA_NORMAL:g}:1 for normal text\n"
                              f"and {AAA_LARGE:g}:1 for large text (18pt or 14pt bold).")
        results_grid.addWidget(aa_header, 1, 1, Qt.AlignCenter)
        results_grid.addWidget(aaa_header, 1, 2, Qt.AlignCenter)

        self.badges = {}
        rows = [
            (f"Normal Text ({AA_NORMAL:g}:1 / {AAA_NORMAL:g}:1)", "aa_normal", "aaa_normal"),
            (f"Large Text ({AA_LARGE:g}:1 / {AAA_LARGE:g}:1)", "aa_large", "aaa_large"),
        ]
        for row, (title, aa_key, aaa_key) in enumerate(rows, start=2):
            results_grid.addWidget(QLabel(title, objectName="ResultLabel"), row, 0)
            for col, key in enumerate((aa_key, aaa_key), start=1):
                badge = ComplianceBadge()
                self.badges[key] = badge
                results_grid.addWidget(badge, row, col, Qt.AlignCenter)

        layout.addLayout(results_grid)

        # --- 4. Suggestion Area ---
        self.suggestion_frame = QFrame()
        suggestion_layout = QHBoxLayout(self.suggestion_frame)
        suggestion_layout.setContentsMargins(0, 0, 0, 0)

        lbl = QLabel(f"Suggestion ({self.target_ratio:g}:1): ", objectName="SuggestionLabel")
        self.suggestion_val = CopyLabel("")
        self.suggestion_apply = QPushButton("Apply")
        self.suggestion_apply.clicked.connect(self.apply_suggestion)

        suggestion_layout.addWidget(lbl)
        suggestion_layout.addWidget(self.suggestion_val)
        suggestion_layout.addWidget(self.suggestion_apply)
        suggestion_layout.addStretch()

        layout.addWidget(self.suggestion_frame)
        layout.addStretch()

    def on_hex_changed(self, text, is_fg):
        if is_fg: self.fg_color = text
        else: self.bg_color = text

        if hex_to_rgb(text) is None:
            logger.debug("Ignoring invalid %s color %r", "foreground" if is_fg else "background", text)
        self.update_results()

    def colors_valid(self):
        return hex_to_rgb(self.fg_color) is not None and hex_to_rgb(self.bg_color) is not None

    def swap_colors(self):
        fg, bg = self.fg_color, self.bg_color
        self.fg_input.set_color(bg)
        self.bg_input.set_color(fg)

    def update_results(self):
        self.ratio = calculate_contrast(self.fg_color, self.bg_color)
        self.ratio_lbl.setText(format_ratio(self.ratio))

        result = check_compliance(self.ratio)
        for key, badge in self.badges.items():
            badge.set_passed(getattr(result, key))

        if not self.colors_valid():
            # Preview keeps the last valid pair
            self.suggestion_frame.hide()
            return

        self.update_preview()

        if self.ratio < self.target_ratio:
            better = suggest_passing_color(self.fg_color, self.bg_color, self.target_ratio)
            self.suggestion_val.setText(better.upper())
            self.suggestion_frame.show()
        else:
            self.suggestion_frame.hide()

    def update_preview(self):
        fg = rgb_to_hex(*hex_to_rgb(self.fg_color))
        bg = rgb_to_hex(*hex_to_rgb(self.bg_color))

        self.text_preview.setStyleSheet(
            f"QFrame#PreviewBox {{ background-color: {bg}; border-radius: 6px; padding: 16px; }}"
            f"QLabel {{ color: {fg}; background: transparent; }}")
        self.small_text_lbl.setStyleSheet("font-size: 16px;")
        self.large_text_lbl.setStyleSheet("font-size: 24px;")

        self.ui_preview.setStyleSheet(
            f"QFrame#PreviewBox {{ background-color: {bg}; border-radius: 6px; padding: 16px; }}")
        self.button_lbl.setStyleSheet(
            f"background-color: {fg}; color: {bg}; border-radius: 6px; padding: 10px;")
        self.outlined_lbl.setStyleSheet(
            f"background: transparent; border: 2px solid {fg}; color: {fg}; border-radius: 6px; padding: 8px;")

    def apply_suggestion(self):
        self.fg_input.set_color(self.suggestion_val.text())

    def copy_results(self):
        text = format_results(self.fg_color, self.bg_color, self.ratio)
        QApplication.clipboard().setText(text)
        self.results_copied.emit(text)
        return text
