"""Configuration management for the BulkBasket service."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()

# Rate limiting (per caller)
RATE_LIMIT_MAX_REQUESTS: Final[int] = int(os.getenv('RATE_LIMIT_MAX_REQUESTS', '10'))
RATE_LIMIT_WINDOW_SECONDS: Final[int] = int(os.getenv('RATE_LIMIT_WINDOW_SECONDS', '3600'))
# Only enable behind an auth proxy that sets X-User-Id itself
TRUST_USER_ID_HEADER: Final[bool] = os.getenv('TRUST_USER_ID_HEADER', 'False').lower() == 'true'
