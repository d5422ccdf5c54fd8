#!/usr/bin/env python3
"""
Theme Sync - Application Entry Point
====================================

Initializes logging and configuration, then runs the Qt application.
"""

import sys
import logging

from theme_sync import get_info
from theme_sync.app import ThemeSyncApp
from theme_sync.config import Config
from theme_sync.utils.logging import setup_logging


def main():
    """Main application entry point."""
    try:
        # Defaults first so config loading itself is logged
        setup_logging()
        logger = logging.getLogger(__name__)

        info = get_info()
        logger.info(f"Starting {info['name']} v{info['version']}...")

        config = Config.load_from_file()

        if not config.validate():
            logger.error("Configuration validation failed")
            return 1

        setup_logging(
            level=config.logging.level,
            log_file=config.logging.file_path,
            max_bytes=config.logging.max_file_size,
            backup_count=config.logging.backup_count,
            log_to_console=config.logging.log_to_console,
            force=True,
        )

        app = ThemeSyncApp(config)
        exit_code = app.run()

        logger.info("Application shutting down")
        return exit_code

    except KeyboardInterrupt:
        print("\nApplication interrupted by user")
        return 0


if __name__ == "__main__":
    sys.exit(main())
