from __future__ import annotations

import logging

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QWidget,
    QFormLayout,
    QHBoxLayout,
    QLineEdit,
    QLabel,
    QPushButton,
    QMessageBox,
    QStackedWidget,
)

from home_address import config
from home_address.core import rules
from home_address.core.countries import DEFAULT_COUNTRY, country_iso
from home_address.data import address_repo
from home_address.ui.messages import field_messages, zip_format_hint
from home_address.ui.widgets.pickers import CountryPicker, StatePicker

logger = logging.getLogger(__name__)


class AddressPage(QWidget):
    """
    Home address form:
    - Address line 1 (required)
    - Address line 2 (optional)
    - City (required)
    - State (picker for state-constrained countries, free text otherwise)
    - Zip / Postcode (format depends on country)
    - Country (picker)
    """

    address_saved = Signal(str)  # user_id

    def __init__(self, user_id: str | None = None, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._user_id: str = str(user_id).strip() if user_id is not None else ""

        self.form = QFormLayout()
        self.setLayout(self.form)

        self.address_line1 = QLineEdit()
        self.address_line1.setMaxLength(config.FORM_CHARACTER_LIMIT)
        self.form.addRow("Address line 1", self.address_line1)

        self.address_line2 = QLineEdit()
        self.address_line2.setMaxLength(config.FORM_CHARACTER_LIMIT)
        self.form.addRow("Address line 2", self.address_line2)

        self.city = QLineEdit()
        self.city.setMaxLength(config.FORM_CHARACTER_LIMIT)
        self.form.addRow("City", self.city)

        # State: page 0 = picker (constrained), page 1 = free text
        self.state_picker = StatePicker()
        self.state_text = QLineEdit()
        self.state_text.setMaxLength(config.FORM_CHARACTER_LIMIT)
        self.state_text.setPlaceholderText("State / Province")

        self.state_stack = QStackedWidget()
        self.state_stack.addWidget(self.state_picker)
        self.state_stack.addWidget(self.state_text)
        self.form.addRow("State", self.state_stack)

        self.postal_code = QLineEdit()
        self.postal_code.setMaxLength(config.ZIP_CODE_MAX_LENGTH)
        self.form.addRow("Zip / Postcode", self.postal_code)

        self.postal_hint = QLabel("")
        self.postal_hint.setAlignment(Qt.AlignLeft)
        self.postal_hint.setStyleSheet("color: #aaaaaa;")
        self.form.addRow("", self.postal_hint)

        self.country = CountryPicker()
        self.form.addRow("Country", self.country)

        self.btn_save = QPushButton("Save")
        self.btn_save.clicked.connect(self._on_save_clicked)

        btn_row = QWidget()
        btn_layout = QHBoxLayout(btn_row)
        btn_layout.setContentsMargins(0, 0, 0, 0)
        btn_layout.setSpacing(8)
        btn_layout.addWidget(self.btn_save)
        btn_layout.addStretch(1)
        self.form.addRow("", btn_row)

        # Wire events
        self.postal_code.textEdited.connect(self._on_postal_code_edited)
        self.country.currentIndexChanged.connect(self._on_country_changed)

        self.country.set_code(DEFAULT_COUNTRY)
        self._apply_country_shape()

    # -------------------------
    # Country-driven field shape
    # -------------------------
    def _on_country_changed(self, _index: int) -> None:
        self._apply_country_shape()

    def _apply_country_shape(self) -> None:
        code = self.country.code()
        shape = rules.state_field_shape(code)

        if shape is rules.FieldShape.CONSTRAINED:
            self.state_stack.setCurrentWidget(self.state_picker)
        else:
            self.state_stack.setCurrentWidget(self.state_text)

        self.postal_hint.setText(zip_format_hint(code))

    def _on_postal_code_edited(self, _text: str) -> None:
        # Postal codes are entered uppercase
        upper = self.postal_code.text().upper()
        if upper != self.postal_code.text():
            cursor = self.postal_code.cursorPosition()
            self.postal_code.blockSignals(True)
            self.postal_code.setText(upper)
            self.postal_code.setCursorPosition(min(cursor, len(upper)))
            self.postal_code.blockSignals(False)

    # -------------------------
    # Load / save
    # -------------------------
    def set_user_id(self, user_id: str) -> None:
        self._user_id = str(user_id or "").strip()

    def load_from_repo(self) -> None:
        if not self._user_id:
            return

        try:
            stored = address_repo.get_address(self._user_id)
        except Exception as e:
            logger.exception("Failed to load address for user %s", self._user_id)
            QMessageBox.critical(self, "Error", f"Failed to load address.\n\nDetails:\n{e!r}")
            return

        if not stored:
            return

        line1, line2 = address_repo.split_street(stored.get("street"))
        self.address_line1.setText(line1)
        self.address_line2.setText(line2)
        self.city.setText(stored.get("city") or "")
        self.postal_code.setText((stored.get("zip") or "").upper())

        self.country.set_code(country_iso(stored.get("country")) or DEFAULT_COUNTRY)

        state = stored.get("state") or ""
        self.state_text.setText(state)
        self.state_picker.set_code(state)
        self._apply_country_shape()

    def collect_data(self) -> dict:
        code = self.country.code()
        if rules.state_field_shape(code) is rules.FieldShape.CONSTRAINED:
            state = self.state_picker.code()
        else:
            state = self.state_text.text()

        return {
            "address_line1": self.address_line1.text(),
            "address_line2": self.address_line2.text(),
            "city": self.city.text(),
            "state": state,
            "postal_code": self.postal_code.text(),
            "country": code,
        }

    def _validate(self) -> rules.ValidationResult:
        data = self.collect_data()
        result = rules.validate_address(rules.AddressInput.from_mapping(data))

        if result.ok:
            return result

        lines = [f"- {msg}" for msg in field_messages(result).values()]
        QMessageBox.warning(
            self,
            "Validation Error",
            "Please fix the following issues:\n\n" + "\n".join(lines),
        )
        return result

    def _on_save_clicked(self) -> None:
        result = self._validate()
        if not result.ok:
            return

        if not self._user_id:
            QMessageBox.warning(self, "Warning", "User is not set. Save was not applied.")
            return

        try:
            address_repo.save_address(self._user_id, self.collect_data())
        except Exception as e:
            logger.exception("Failed to save address for user %s", self._user_id)
            QMessageBox.critical(self, "Error", f"Failed to save address.\n\nDetails:\n{e!r}")
            return

        self.address_saved.emit(self._user_id)
        QMessageBox.information(self, "Information", "Home address saved.")
