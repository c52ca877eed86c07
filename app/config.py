# -*- coding: utf-8 -*-


from pathlib import Path
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional
import os

from dotenv import load_dotenv

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
load_dotenv()  # Load from .env file in project root

# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
# API Settings
_API_BASE_URL = os.getenv("API_BASE_URL", "https://real-est-beate-latest.onrender.com")
_API_TIMEOUT = int(os.getenv("API_TIMEOUT", "30"))
_API_TOKEN = os.getenv("API_TOKEN") or None

# Data Mode: "api" posts to the backend, "mock" simulates the round trip
_DATA_MODE = os.getenv("DATA_MODE", "mock").lower()
_MOCK_SUBMIT_DELAY = float(os.getenv("MOCK_SUBMIT_DELAY", "1.8"))

# Image previews
_PREVIEW_DIR = os.getenv("PREVIEW_DIR") or None

# Console verbosity; the log file always records DEBUG
_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


@dataclass
class Config:
    """Application configuration."""

    # Application Info
    APP_NAME: str = "Landlord Listings"
    VERSION: str = "1.0.0"
    ORGANIZATION: str = "Landlord Portal"

    # Data Mode: "api" or "mock"
    DATA_MODE: str = _DATA_MODE
    MOCK_SUBMIT_DELAY: float = _MOCK_SUBMIT_DELAY  # seconds

    # HTTP API Backend Settings
    API_BASE_URL: str = _API_BASE_URL
    API_TIMEOUT: int = _API_TIMEOUT
    API_TOKEN: Optional[str] = _API_TOKEN

    # Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    LOGS_DIR: Path = PROJECT_ROOT / "logs"

    # Logging
    LOG_FILE: str = "app.log"
    LOG_PATH: Path = LOGS_DIR / LOG_FILE
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT: int = 3
    LOG_LEVEL: str = _LOG_LEVEL

    # Image upload
    PREVIEW_DIR: Optional[str] = _PREVIEW_DIR  # None = system temp
    PREVIEW_THUMBNAIL_SIZE: int = 320
    MAX_IMAGE_SIZE_MB: int = 10
    IMAGE_FILE_FILTER: str = "Images (*.png *.jpg *.jpeg *.webp *.gif *.bmp)"

    # Booking quotes
    SERVICE_FEE_RATE: Decimal = Decimal("0.08")

    # UI Settings
    WINDOW_MIN_WIDTH: int = 960
    WINDOW_MIN_HEIGHT: int = 720

    # Brand Colors
    PRIMARY_COLOR: str = "#0d6efd"
    PRIMARY_DARK: str = "#0b5ed7"
    SECONDARY_COLOR: str = "#6c757d"
    SUCCESS_COLOR: str = "#198754"
    ERROR_COLOR: str = "#dc3545"
    BACKGROUND_COLOR: str = "#f8f9fa"
    BORDER_COLOR: str = "#dee2e6"
