import logging
import sys

from PySide6.QtWidgets import QApplication, QMainWindow

from home_address import config
from home_address.ui.address_page import AddressPage


def main() -> int:
    logging.basicConfig(
        level=getattr(logging, config.SETTINGS.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = QApplication(sys.argv)

    page = AddressPage(config.SETTINGS.user_id)
    page.load_from_repo()

    win = QMainWindow()
    win.setWindowTitle("Home address")
    win.setCentralWidget(page)
    win.resize(520, 420)
    win.show()
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
