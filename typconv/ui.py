from __future__ import annotations

"""PyQt5 UI for TypConv.

Implements the conversion settings window and its two-way binding to
FormState: widget edits write into the state, state changes re-render
the matching widget.
"""

import logging
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Type

from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import (
    QCheckBox,
    QComboBox,
    QFormLayout,
    QFrame,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QStyle,
    QVBoxLayout,
    QWidget,
)

from .settings import UIConfig
from .state import (
    FormState,
    InputFileType,
    OutputFileType,
    TemplateOption,
    option_labels,
)


logger = logging.getLogger(__name__)

TITLE = "Conversion Settings"
FILENAME_PLACEHOLDER = "defaults to input file name"
BROWSE_TEXT = "Browse Files or Drag & Drop"


class ConversionSettingsWindow(QWidget):
    """Single-screen conversion settings form."""

    def __init__(
        self,
        config: Optional[UIConfig] = None,
        state: Optional[FormState] = None,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._config = config or UIConfig()
        self._state = state if state is not None else FormState()
        self.setWindowTitle(self._config.window_title)
        # Drops are a placeholder only
        self.setAcceptDrops(False)

        self._setup_ui()
        self._render_all()
        self._state.subscribe(self._on_state_changed)

    @property
    def state(self) -> FormState:
        return self._state

    # ---- UI Construction ----

    def _setup_ui(self) -> None:
        cfg = self._config
        root = QVBoxLayout(self)
        root.setContentsMargins(0, 15, 0, 0)
        root.setSpacing(0)

        settings_widget = QWidget()
        settings_widget.setFixedSize(cfg.window_width, cfg.settings_height)
        settings_layout = QVBoxLayout(settings_widget)
        settings_layout.setSpacing(cfg.spacing)

        self.lbl_title = QLabel(TITLE)
        font = self.lbl_title.font()
        font.setBold(True)
        if font.pointSizeF() > 0:
            font.setPointSizeF(font.pointSizeF() + 4)
        else:
            font.setPixelSize(font.pixelSize() + 5)
        self.lbl_title.setFont(font)
        settings_layout.addWidget(self.lbl_title)

        form = QFormLayout()
        form.setVerticalSpacing(cfg.spacing)

        self.edit_filename = QLineEdit()
        self.edit_filename.setPlaceholderText(FILENAME_PLACEHOLDER)
        form.addRow("Output File Name:", self.edit_filename)

        self.combo_template = self._make_picker(TemplateOption)
        self.combo_input_type = self._make_picker(InputFileType)
        self.combo_output_type = self._make_picker(OutputFileType)
        form.addRow("Select Template:", self.combo_template)
        form.addRow("Input File Type:", self.combo_input_type)
        form.addRow("Output File Type:", self.combo_output_type)

        password_row = QHBoxLayout()
        self.edit_password = QLineEdit()
        self.edit_password.setEchoMode(QLineEdit.Password)
        self.edit_password.setFixedWidth(cfg.password_width)
        self.btn_clear_password = QPushButton()
        self.btn_clear_password.setIcon(self.style().standardIcon(QStyle.SP_DialogResetButton))
        self.btn_clear_password.setToolTip("Clear password")
        password_row.addWidget(self.edit_password)
        password_row.addWidget(self.btn_clear_password)
        password_row.addStretch(1)
        form.addRow("Password:", password_row)

        self.edit_repeat_password = QLineEdit()
        self.edit_repeat_password.setEchoMode(QLineEdit.Password)
        form.addRow("Repeat:", self.edit_repeat_password)

        self.chk_delete_original = QCheckBox("Delete Original File")
        form.addRow(self.chk_delete_original)

        form_widget = QWidget()
        form_widget.setLayout(form)
        form_widget.setFixedWidth(cfg.field_width)
        settings_layout.addWidget(form_widget)
        settings_layout.addStretch(1)
        root.addWidget(settings_widget, 0, Qt.AlignHCenter)

        divider = QFrame()
        divider.setFrameShape(QFrame.HLine)
        divider.setFrameShadow(QFrame.Sunken)
        divider.setFixedWidth(cfg.window_width)
        root.addWidget(divider, 0, Qt.AlignHCenter)

        bottom = QWidget()
        bottom_layout = QHBoxLayout(bottom)
        bottom_layout.setContentsMargins(cfg.padding, cfg.padding, cfg.padding, cfg.padding + 10)
        bottom_layout.setSpacing(cfg.spacing)
        self.btn_browse = QPushButton(BROWSE_TEXT)
        self.btn_browse.setFixedHeight(cfg.button_height + cfg.padding)
        bottom_layout.addWidget(self.btn_browse, 0, Qt.AlignCenter)
        bottom.setFixedWidth(cfg.window_width + 2 * cfg.padding)
        root.addWidget(bottom, 0, Qt.AlignHCenter)

        # Connections
        self.edit_filename.textChanged.connect(lambda text: self._state.set("filename", text))
        self.edit_password.textChanged.connect(lambda text: self._state.set("password", text))
        self.edit_repeat_password.textChanged.connect(lambda text: self._state.set("repeat_password", text))
        self.chk_delete_original.toggled.connect(lambda on: self._state.set("delete_original_file", on))
        self.combo_template.currentIndexChanged.connect(self._picker_handler("template", TemplateOption))
        self.combo_input_type.currentIndexChanged.connect(self._picker_handler("input_file_type", InputFileType))
        self.combo_output_type.currentIndexChanged.connect(self._picker_handler("output_file_type", OutputFileType))
        self.btn_clear_password.clicked.connect(self._state.clear_password)
        self.btn_browse.clicked.connect(self._on_browse)

    def _make_picker(self, enum_cls: Type[Enum]) -> QComboBox:
        combo = QComboBox()
        combo.addItems(option_labels(enum_cls))
        return combo

    def _picker_handler(self, name: str, enum_cls: Type[Enum]) -> Callable[[int], None]:
        members: List[Enum] = list(enum_cls)

        def on_index(index: int) -> None:
            if 0 <= index < len(members):
                self._state.set(name, members[index])

        return on_index

    # ---- Rendering ----

    def _widgets(self) -> Dict[str, QWidget]:
        return {
            "filename": self.edit_filename,
            "input_file_type": self.combo_input_type,
            "output_file_type": self.combo_output_type,
            "template": self.combo_template,
            "password": self.edit_password,
            "repeat_password": self.edit_repeat_password,
            "delete_original_file": self.chk_delete_original,
        }

    def _render_all(self) -> None:
        for name, value in self._state.snapshot().items():
            self._render(name, value)

    def _on_state_changed(self, name: str, value: Any) -> None:
        self._render(name, value)

    def _render(self, name: str, value: Any) -> None:
        widget = self._widgets()[name]
        blocked = widget.blockSignals(True)
        try:
            if isinstance(widget, QLineEdit):
                if widget.text() != value:
                    widget.setText(value)
            elif isinstance(widget, QComboBox):
                widget.setCurrentIndex(list(type(value)).index(value))
            elif isinstance(widget, QCheckBox):
                widget.setChecked(value)
        finally:
            widget.blockSignals(blocked)

    # ---- Placeholders ----

    def _on_browse(self) -> None:
        # No file browsing is wired up
        logger.info("Browse button pressed; no action is bound")

    def showEvent(self, event) -> None:  # noqa: N802
        # Closing only hides the window; resume rendering when shown again
        self._state.subscribe(self._on_state_changed)
        self._render_all()
        super().showEvent(event)

    def closeEvent(self, event) -> None:  # noqa: N802
        self._state.unsubscribe(self._on_state_changed)
        super().closeEvent(event)
