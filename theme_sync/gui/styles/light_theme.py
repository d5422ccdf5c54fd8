"""
Light theme implementation.
"""

from ...core.models import StyleVariant
from .themes import Theme


class LightTheme(Theme):
    """Light style used when the platform prefers a light appearance."""

    def get_name(self) -> str:
        return "Light"

    def get_variant(self) -> StyleVariant:
        return StyleVariant.LIGHT

    def get_stylesheet(self) -> str:
        """Get light theme stylesheet."""
        return """
        /* Window */
        QMainWindow, QWidget#centralWidget {
            background-color: #fafafa;
            color: #2e3436;
        }

        /* Greeting label */
        QLabel {
            color: #2e3436;
            background-color: transparent;
            font-size: 13pt;
        }

        /* Menu Bar */
        QMenuBar {
            background-color: #ebebeb;
            color: #2e3436;
            border-bottom: 1px solid #d6d6d6;
        }

        QMenuBar::item:selected {
            background-color: #dcdcdc;
        }

        /* Tooltips */
        QToolTip {
            background-color: #ffffff;
            color: #2e3436;
            border: 1px solid #cdc7c2;
            padding: 4px;
        }
        """
