# -*- coding: utf-8 -*-


from pathlib import Path
from dataclasses import dataclass
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
_API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:3000")
_API_TIMEOUT = int(os.getenv("API_TIMEOUT", "30"))
_API_TOKEN = os.getenv("API_TOKEN", "")
_API_VERIFY_SSL = os.getenv("API_VERIFY_SSL", "true").lower() in ("true", "1", "yes")

# Localisation
_APP_LANGUAGE = os.getenv("APP_LANGUAGE", "en")

# Wizard behaviour
_SEARCH_DEBOUNCE_MS = int(os.getenv("SEARCH_DEBOUNCE_MS", "300"))
_SEARCH_RESULT_LIMIT = int(os.getenv("SEARCH_RESULT_LIMIT", "50"))
_OPTION_PAGE_SIZE = int(os.getenv("OPTION_PAGE_SIZE", "100"))
_ENFORCE_DEPOSIT_EQUALS_TOTAL = os.getenv(
    "ENFORCE_DEPOSIT_EQUALS_TOTAL", "true"
).lower() in ("true", "1", "yes")

# Branch context (normally supplied by the signed-in session)
_DEFAULT_BRANCH_ID = os.getenv("DEFAULT_BRANCH_ID", "")

# Logging
_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
_LOG_TO_FILE = os.getenv("LOG_TO_FILE", "true").lower() in ("true", "1", "yes")


@dataclass
class Config:
    """Application configuration."""

    # Application Info
    APP_NAME: str = "FleetDesk"
    APP_TITLE: str = "Vehicle Rental Back Office"
    APP_TITLE_AR: str = "نظام إدارة تأجير المركبات"
    VERSION: str = "1.0.0"
    ORGANIZATION: str = "FleetDesk"

    # HTTP API Backend Settings
    # Reads from .env file (API_BASE_URL, API_TIMEOUT, API_TOKEN)
    API_BASE_URL: str = _API_BASE_URL
    API_TIMEOUT: int = _API_TIMEOUT
    API_TOKEN: str = _API_TOKEN
    API_VERIFY_SSL: bool = _API_VERIFY_SSL

    # Language: "en" or "ar"
    APP_LANGUAGE: str = _APP_LANGUAGE

    # Branch context
    DEFAULT_BRANCH_ID: str = _DEFAULT_BRANCH_ID

    # Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    LOGS_DIR: Path = PROJECT_ROOT / "logs"

    # Logging
    LOG_LEVEL: str = _LOG_LEVEL  # console level; the file always gets DEBUG
    LOG_TO_FILE: bool = _LOG_TO_FILE
    LOG_FILE: str = "fleetdesk.log"
    LOG_PATH: Path = LOGS_DIR / LOG_FILE
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT: int = 3

    # Search pickers and option lists
    SEARCH_DEBOUNCE_MS: int = _SEARCH_DEBOUNCE_MS
    SEARCH_RESULT_LIMIT: int = _SEARCH_RESULT_LIMIT
    OPTION_PAGE_SIZE: int = _OPTION_PAGE_SIZE

    # Contract pricing
    CURRENCY: str = "SAR"
    MAX_AMOUNT: float = 99999999.99
    MEMBERSHIP_DISCOUNT: float = 123.00
    ENFORCE_DEPOSIT_EQUALS_TOTAL: bool = _ENFORCE_DEPOSIT_EQUALS_TOTAL
    DEFAULT_PAYMENT_METHOD: str = "cash"
    PAYMENT_METHODS: tuple = ("cash", "card")
    DEFAULT_DURATION_TYPE: str = "duration"
    DURATION_TYPES: tuple = ("duration", "fees")

    # (add-on id, FieldSet key, translation key, flat price)
    CONTRACT_ADD_ONS: tuple = (
        ("car_delivery", "addOnCarDelivery", "addon.car_delivery", 40.00),
        ("child_seat", "addOnChildSeat", "addon.child_seat", 45.00),
        ("internet", "addOnInternet", "addon.internet", 35.00),
        ("gps", "addOnGps", "addon.gps", 20.00),
        ("special_aid", "addOnSpecialAid", "addon.special_aid", 40.00),
    )

    # Entity rules
    BLACKLISTED_CUSTOMER_STATUS: str = "Blacklisted"
    RENTABLE_VEHICLE_STATUSES: tuple = ("Available", "Active")
    DEFAULT_PLATE_REGISTRATION_TYPE: str = "Private"
    DEFAULT_VEHICLE_STATUS: str = "Available"

    # UI Settings
    WIZARD_MIN_WIDTH: int = 1000
    WIZARD_MIN_HEIGHT: int = 700
    PRIMARY_COLOR: str = "#0472AC"
    ERROR_COLOR: str = "#E74C3C"
    BORDER_COLOR: str = "#D5DCE6"
    BACKGROUND_COLOR: str = "#F8F9FA"

    # Date/Time Formats
    DATE_FORMAT: str = "%Y-%m-%d"
    DATETIME_FORMAT: str = "%Y-%m-%d %H:%M:%S"
    DATE_FORMAT_DISPLAY: str = "%d/%m/%Y"
