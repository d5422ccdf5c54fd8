from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QMainWindow, QVBoxLayout, QWidget

from ..config import Config
from ..utils.logging import get_logger


class MainWindow(QMainWindow):
    """The demo window: a single greeting label."""

    def __init__(self, config: Config, parent: None = None):
        super().__init__(parent)
        self.config = config
        self.logger = get_logger(__name__)

        self._init_ui()
        self.logger.info("MainWindow initialized.")

    def _init_ui(self):
        self.setWindowTitle(self.config.ui.window_title)

        main_widget = QWidget(self)
        main_widget.setObjectName("centralWidget")
        layout = QVBoxLayout(main_widget)

        self.label = QLabel(self.config.ui.label_text, main_widget)
        self.label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.label)

        self.setCentralWidget(main_widget)
        self.resize(self.config.ui.window_width, self.config.ui.window_height)
