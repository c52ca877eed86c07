# -*- coding: utf-8 -*-
"""Centralized error handler for UI layer."""

from PyQt5.QtWidgets import QWidget, QMessageBox

from services.error_mapper import map_exception
from utils.logger import get_logger

logger = get_logger(__name__)


class ErrorHandler:
    """Centralized error handler that maps exceptions to user-friendly dialogs."""

    @staticmethod
    def handle(error: Exception, parent: QWidget = None,
               context: str = None, show_dialog: bool = True) -> str:
        """
        Handle any exception: log it, map it, optionally show dialog.

        Returns:
            User-friendly error message string
        """
        logger.error(f"Error in {context or 'unknown'}: {error}", exc_info=error)

        message = map_exception(error, context)

        if show_dialog and parent:
            ErrorHandler.show_error(parent, message)

        return message

    @staticmethod
    def show_error(parent: QWidget, message: str, title: str = "Error"):
        QMessageBox.critical(parent, title, message, QMessageBox.Ok)

    @staticmethod
    def show_warning(parent: QWidget, message: str, title: str = "Warning"):
        QMessageBox.warning(parent, title, message, QMessageBox.Ok)

    @staticmethod
    def confirm(parent: QWidget, message: str, title: str = "Confirm") -> bool:
        """Show confirmation dialog, return True if confirmed."""
        reply = QMessageBox.question(
            parent, title, message,
            QMessageBox.Yes | QMessageBox.No, QMessageBox.No
        )
        return reply == QMessageBox.Yes
