"""
Dark theme implementation.
"""

from ...core.models import StyleVariant
from .themes import Theme


class DarkTheme(Theme):
    """Dark style used when the platform prefers a dark appearance."""

    def get_name(self) -> str:
        return "Dark"

    def get_variant(self) -> StyleVariant:
        return StyleVariant.DARK

    def get_stylesheet(self) -> str:
        """Get dark theme stylesheet."""
        return """
        /* Window */
        QMainWindow, QWidget#centralWidget {
            background-color: #242424;
            color: #ffffff;
        }

        /* Greeting label */
        QLabel {
            color: #ffffff;
            background-color: transparent;
            font-size: 13pt;
        }

        /* Menu Bar */
        QMenuBar {
            background-color: #303030;
            color: #ffffff;
            border-bottom: 1px solid #1b1b1b;
        }

        QMenuBar::item:selected {
            background-color: #454545;
        }

        /* Tooltips */
        QToolTip {
            background-color: #383838;
            color: #ffffff;
            border: 1px solid #1b1b1b;
            padding: 4px;
        }
        """
