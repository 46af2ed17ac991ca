# home_address/ui/widgets/pickers.py
from __future__ import annotations

from typing import Optional, Sequence, Tuple

from PySide6.QtWidgets import QComboBox, QWidget

from home_address.core.countries import country_choices, state_choices


class _CodePicker(QComboBox):
    """
    Non-editable combo over (code, name) pairs.

    - Item 0 is a disabled placeholder; selecting nothing means code "".
    - Display text is the name, item data is the code.
    """

    def __init__(
        self,
        placeholder: str,
        choices: Sequence[Tuple[str, str]],
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.setEditable(False)

        self.addItem(placeholder, "")
        self.model().item(0).setEnabled(False)
        for code, name in choices:
            self.addItem(name, code)
        self.setCurrentIndex(0)

    def code(self) -> str:
        value = self.currentData()
        return str(value) if value else ""

    def set_code(self, code: str) -> None:
        idx = self.findData((code or "").strip().upper())
        self.setCurrentIndex(idx if idx > 0 else 0)


class CountryPicker(_CodePicker):
    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__("Select a country", country_choices(), parent)


class StatePicker(_CodePicker):
    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__("Select a state", state_choices(), parent)
