# -*- coding: utf-8 -*-
"""
Password Generator (PyQt5)

Desktop shell around ``passwordgenerator.core``:
- Length field and character class checkboxes.
- Generate / copy to clipboard / save to file.
- Colour-coded strength bar (0..100).
- Settings persistence via QSettings.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from PyQt5 import QtCore, QtGui, QtWidgets

from passwordgenerator.core import (
    GenerationRequest,
    InvalidRequest,
    StrengthLevel,
    generate_password,
    parse_length,
    save_password,
    score_strength,
    strength_level,
)

# -------------------------
# Application Constants
# -------------------------

APP_ORG = "PasswordGenerator"
APP_NAME = "PasswordGenerator"
APP_TITLE = "Password Generator"

DEFAULT_LENGTH = 16
MAX_LENGTH = 128

STRENGTH_COLORS = {
    StrengthLevel.WEAK: "#d32f2f",  # red
    StrengthLevel.MEDIUM: "#f57c00",  # orange
    StrengthLevel.STRONG: "#388e3c",  # green
}


logger = logging.getLogger(__name__)


# =========================
#        MAIN WINDOW
# =========================

class MainWindow(QtWidgets.QMainWindow):
    """
    Main window: options panel, password output, buttons and strength bar.

    Every generation and scoring call goes through ``passwordgenerator.core``;
    the window only reads inputs and shows results.
    """

    def __init__(self, settings: Optional[QtCore.QSettings] = None) -> None:
        super().__init__()

        if settings is None:
            settings = QtCore.QSettings(APP_ORG, APP_NAME)
        self.settings = settings

        self.setWindowTitle(APP_TITLE)
        self.setMinimumSize(600, 300)

        self._apply_global_styles()
        self._build_ui()
        self._load_settings()
        self.update_strength_bar()

    # ---------- UI CONSTRUCTION ----------

    def _build_ui(self) -> None:
        central = QtWidgets.QWidget(self)
        self.setCentralWidget(central)

        self._main_layout = QtWidgets.QVBoxLayout(central)

        self._build_menu_bar()

        self._main_layout.addWidget(self._build_options_panel())

        body = QtWidgets.QHBoxLayout()
        body.addWidget(self._build_strength_panel(), stretch=1)

        mono_font = QtGui.QFont("Consolas")
        mono_font.setStyleHint(QtGui.QFont.TypeWriter)

        self.password_edit = QtWidgets.QPlainTextEdit()
        self.password_edit.setReadOnly(True)
        self.password_edit.setFont(mono_font)
        self.password_edit.setPlaceholderText("Click “Generate Password” to create a password.")
        body.addWidget(self.password_edit, stretch=3)
        self._main_layout.addLayout(body, stretch=1)

        self._main_layout.addLayout(self._build_button_row())

        self.status_bar = self.statusBar()
        self.status_bar.showMessage("Ready.")

    def _build_options_panel(self) -> QtWidgets.QGroupBox:
        group = QtWidgets.QGroupBox("Options")
        layout = QtWidgets.QHBoxLayout(group)

        layout.addWidget(QtWidgets.QLabel("Password Length:"))
        self.length_edit = QtWidgets.QLineEdit(str(DEFAULT_LENGTH))
        self.length_edit.setMaximumWidth(60)
        layout.addWidget(self.length_edit)

        self.upper_cb = QtWidgets.QCheckBox("Uppercase")
        self.lower_cb = QtWidgets.QCheckBox("Lowercase")
        self.digits_cb = QtWidgets.QCheckBox("Digits")
        self.special_cb = QtWidgets.QCheckBox("Special Characters")

        for cb in (self.upper_cb, self.lower_cb, self.digits_cb, self.special_cb):
            cb.setChecked(True)
            layout.addWidget(cb)

        layout.addStretch(1)
        return group

    def _build_strength_panel(self) -> QtWidgets.QGroupBox:
        group = QtWidgets.QGroupBox("Password Strength")
        layout = QtWidgets.QVBoxLayout(group)

        self.strength_bar = QtWidgets.QProgressBar()
        self.strength_bar.setRange(0, 100)
        self.strength_bar.setFormat("%v%")
        self.strength_bar.setTextVisible(True)

        self.strength_label = QtWidgets.QLabel("Strength: N/A")

        layout.addWidget(self.strength_bar)
        layout.addWidget(self.strength_label)
        layout.addStretch(1)
        return group

    def _build_button_row(self) -> QtWidgets.QHBoxLayout:
        row = QtWidgets.QHBoxLayout()
        self.generate_btn = QtWidgets.QPushButton("Generate Password")
        self.copy_btn = QtWidgets.QPushButton("Copy to Clipboard")
        self.save_btn = QtWidgets.QPushButton("Save to File")

        row.addWidget(self.generate_btn)
        row.addWidget(self.copy_btn)
        row.addWidget(self.save_btn)

        self.generate_btn.clicked.connect(self.on_generate_clicked)
        self.copy_btn.clicked.connect(self.on_copy_clicked)
        self.save_btn.clicked.connect(self.on_save_clicked)
        return row

    def _build_menu_bar(self) -> None:
        menubar = self.menuBar()

        file_menu = menubar.addMenu("&File")

        generate_action = QtWidgets.QAction("&Generate Password", self)
        generate_action.setShortcut("Ctrl+G")
        generate_action.triggered.connect(self.on_generate_clicked)
        file_menu.addAction(generate_action)

        save_action = QtWidgets.QAction("&Save to File...", self)
        save_action.setShortcut("Ctrl+S")
        save_action.triggered.connect(self.on_save_clicked)
        file_menu.addAction(save_action)

        file_menu.addSeparator()

        exit_action = QtWidgets.QAction("E&xit", self)
        exit_action.setShortcut("Ctrl+Q")
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

    # ---------- STYLES ----------

    def _apply_global_styles(self) -> None:
        self.setStyleSheet(
            """
            QMainWindow { background-color: #ffffff; }

            QGroupBox {
                font-weight: 600;
                border: 1px solid #ccc;
                border-radius: 6px;
                margin-top: 10px;
            }
            QGroupBox::title {
                subcontrol-origin: margin;
                left: 8px;
                padding: 0 4px;
            }

            QPushButton {
                background-color: #1a73e8;
                color: #ffffff;
                border-radius: 4px;
                padding: 6px 12px;
                border: 1px solid #1a73e8;
            }
            QPushButton:hover { background-color: #4285f4; }
            QPushButton:pressed { background-color: #3367d6; }
            """
        )

    def _set_strength_bar_style(self, level: StrengthLevel) -> None:
        color = STRENGTH_COLORS[level]
        self.strength_bar.setStyleSheet(
            f"""
            QProgressBar {{
                border: 1px solid #ccc;
                border-radius: 4px;
                text-align: center;
            }}
            QProgressBar::chunk {{
                border-radius: 4px;
                margin: 0px;
                background-color: {color};
            }}
            """
        )

    # ---------- SETTINGS ----------

    def _load_settings(self) -> None:
        self.restoreGeometry(self.settings.value("geometry", b""))

        self.length_edit.setText(self.settings.value("length", str(DEFAULT_LENGTH), type=str))
        self.upper_cb.setChecked(self.settings.value("upper", True, type=bool))
        self.lower_cb.setChecked(self.settings.value("lower", True, type=bool))
        self.digits_cb.setChecked(self.settings.value("digits", True, type=bool))
        self.special_cb.setChecked(self.settings.value("special", True, type=bool))

    def _save_settings(self) -> None:
        self.settings.setValue("geometry", self.saveGeometry())

        self.settings.setValue("length", self.length_edit.text())
        self.settings.setValue("upper", self.upper_cb.isChecked())
        self.settings.setValue("lower", self.lower_cb.isChecked())
        self.settings.setValue("digits", self.digits_cb.isChecked())
        self.settings.setValue("special", self.special_cb.isChecked())
        self.settings.sync()

    def closeEvent(self, event: QtGui.QCloseEvent) -> None:
        self._save_settings()
        super().closeEvent(event)

    # ---------- DIALOGS ----------

    def _show_error(self, title: str, message: str) -> None:
        QtWidgets.QMessageBox.warning(self, title, message)

    def _ask_save_path(self) -> str:
        path, _ = QtWidgets.QFileDialog.getSaveFileName(
            self, "Save Password to File", "", "Text files (*.txt);;All files (*)"
        )
        return path

    # ---------- ACTIONS ----------

    def _read_request(self) -> GenerationRequest:
        length = parse_length(self.length_edit.text())
        if length > MAX_LENGTH:
            raise InvalidRequest(f"Password length must be at most {MAX_LENGTH} characters.")
        return GenerationRequest.from_flags(
            length=length,
            uppercase=self.upper_cb.isChecked(),
            lowercase=self.lower_cb.isChecked(),
            digits=self.digits_cb.isChecked(),
            special=self.special_cb.isChecked(),
        )

    def current_password(self) -> str:
        return self.password_edit.toPlainText()

    def update_strength_bar(self) -> None:
        score = score_strength(self.current_password())
        level = strength_level(score)

        self.strength_bar.setValue(score)
        self.strength_label.setText(f"Strength: {level.value}")
        self._set_strength_bar_style(level)

    def on_generate_clicked(self) -> None:
        try:
            password = generate_password(self._read_request())
        except InvalidRequest as e:
            self._show_error("Error", str(e))
            return

        self.password_edit.setPlainText(password)
        self.update_strength_bar()
        self.status_bar.showMessage("Password generated.", 5000)

    def on_copy_clicked(self) -> None:
        pwd = self.current_password()
        if not pwd:
            self.status_bar.showMessage("No password to copy.", 5000)
            return

        QtWidgets.QApplication.clipboard().setText(pwd)
        self.status_bar.showMessage("Password copied to clipboard.", 5000)

    def on_save_clicked(self) -> None:
        pwd = self.current_password()
        if not pwd:
            self._show_error("Error", "No password generated to save.")
            return

        path = self._ask_save_path()
        if not path:
            return

        try:
            save_password(pwd, path)
        except OSError:
            logger.warning("Could not save password to %s.", path, exc_info=True)
            self._show_error("Error", "Error saving password to file.")
            return

        self.status_bar.showMessage(f"Password saved to file: {path}", 8000)


# =========================
#          ENTRY
# =========================

def main() -> None:
    # High-DPI friendliness (must be set before app creation)
    QtWidgets.QApplication.setAttribute(QtCore.Qt.AA_EnableHighDpiScaling, True)
    QtWidgets.QApplication.setAttribute(QtCore.Qt.AA_UseHighDpiPixmaps, True)

    logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")

    app = QtWidgets.QApplication(sys.argv)
    app.setOrganizationName(APP_ORG)
    app.setApplicationName(APP_NAME)

    window = MainWindow()
    window.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
