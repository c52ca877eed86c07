#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Landlord Listings - Add Property wizard
Main entry point for the application
"""

import sys

from PyQt5.QtWidgets import QApplication
from PyQt5.QtCore import Qt

from app.config import Config
from ui.wizards.add_property import AddPropertyWizard
from utils.logger import setup_logger


def main():
    """Main application entry point."""

    # Set Qt attributes BEFORE creating QApplication
    QApplication.setAttribute(Qt.AA_EnableHighDpiScaling, True)
    QApplication.setAttribute(Qt.AA_UseHighDpiPixmaps, True)

    # Initialize logging
    logger = setup_logger()

    try:
        app = QApplication(sys.argv)
        app.setApplicationName(Config.APP_NAME)
        app.setOrganizationName(Config.ORGANIZATION)

        logger.info("=" * 80)
        logger.info(f"Starting {Config.APP_NAME} {Config.VERSION} (data mode: {Config.DATA_MODE})")
        logger.info("=" * 80)

        wizard = AddPropertyWizard()
        wizard.wizard_cancelled.connect(lambda: logger.info("Wizard cancelled by user"))
        wizard.view_properties_requested.connect(wizard.close)
        wizard.show()

        exit_code = app.exec_()
        logger.info(f"Application closed with exit code: {exit_code}")
        sys.exit(exit_code)

    except ImportError as e:
        error_msg = f"Import Error: {e}"
        print(f"\n[ERROR] {error_msg}")
        print("\nMissing dependencies - Run: pip install -e .")
        logger.exception(error_msg)
        sys.exit(1)

    except Exception as e:
        error_msg = f"Fatal error during application startup: {e}"
        print(f"\n[ERROR] {error_msg}")
        print(f"\nPlease check {Config.LOG_PATH} for details")
        logger.exception(error_msg)
        sys.exit(1)


if __name__ == "__main__":
    main()
