# -*- coding: utf-8 -*-
"""
Action Button Component - Reusable button with consistent styling.

Variants:
- primary: solid brand colour (Next, Add Unit, Submit)
- secondary: grey (Back, Cancel)
- outline: light background with brand border (Add Plan, Add Images)
- danger: red text, used for remove actions
"""

from PyQt5.QtWidgets import QPushButton
from PyQt5.QtCore import Qt

from app.config import Config

_VARIANT_STYLES = {
    "primary": f"""
        QPushButton {{
            background-color: {Config.PRIMARY_COLOR};
            color: white;
            border: none;
            padding: 8px 12px;
            border-radius: 6px;
            font-size: 13px;
        }}
        QPushButton:hover {{
            background-color: {Config.PRIMARY_DARK};
        }}
        QPushButton:disabled {{
            background-color: #9ec5fe;
        }}
    """,
    "secondary": f"""
        QPushButton {{
            background-color: {Config.SECONDARY_COLOR};
            color: white;
            border: none;
            padding: 8px 12px;
            border-radius: 6px;
            font-size: 13px;
        }}
        QPushButton:hover {{
            background-color: #5c636a;
        }}
        QPushButton:disabled {{
            background-color: #adb5bd;
        }}
    """,
    "outline": f"""
        QPushButton {{
            background-color: #F0F7FF;
            color: {Config.PRIMARY_COLOR};
            border: 1px solid {Config.PRIMARY_COLOR};
            padding: 6px 12px;
            border-radius: 6px;
            font-size: 12px;
        }}
        QPushButton:hover {{
            background-color: #E0EAFF;
        }}
        QPushButton:disabled {{
            background-color: {Config.BACKGROUND_COLOR};
            color: #ADB5BD;
            border-color: {Config.BORDER_COLOR};
        }}
    """,
    "danger": f"""
        QPushButton {{
            background-color: transparent;
            color: {Config.ERROR_COLOR};
            border: 1px solid transparent;
            padding: 4px 8px;
            border-radius: 6px;
            font-size: 12px;
        }}
        QPushButton:hover {{
            border-color: {Config.ERROR_COLOR};
        }}
        QPushButton:disabled {{
            color: #ADB5BD;
        }}
    """,
}


class ActionButton(QPushButton):
    """
    Reusable action button with consistent styling.

    Usage:
        btn = ActionButton("Next", variant="primary")
        btn = ActionButton("Back", variant="secondary", width=100)
    """

    def __init__(
        self,
        text: str,
        variant: str = "primary",
        width: int = None,
        height: int = 40,
        parent=None
    ):
        """
        Initialize action button.

        Args:
            text: Button text
            variant: "primary", "secondary", "outline" or "danger"
            width: Fixed width in pixels; None sizes to the text
            height: Button height in pixels
            parent: Parent widget
        """
        super().__init__(text, parent)
        if variant not in _VARIANT_STYLES:
            raise ValueError(f"Invalid variant: {variant}. Must be one of {sorted(_VARIANT_STYLES)}")

        self.variant = variant
        if width:
            self.setFixedSize(width, height)
        else:
            self.setFixedHeight(height)
        self.setCursor(Qt.PointingHandCursor)
        self.setStyleSheet(_VARIANT_STYLES[variant])
