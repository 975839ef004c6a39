"""Configuration management for the Wine With Pete service."""
import os
from typing import Final, Optional
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
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'INFO').upper()

# Shared secrets checked on the webhook and admin endpoints.
# An empty value disables the endpoint (every request is rejected).
WEBHOOK_SECRET: Final[str] = os.getenv('WEBHOOK_SECRET', '')
ADMIN_TOKEN: Final[str] = os.getenv('ADMIN_TOKEN', '')

# Open Graph scraping
OG_FETCH_TIMEOUT: Final[float] = float(os.getenv('OG_FETCH_TIMEOUT', '10'))
SITE_USER_AGENT: Final[str] = os.getenv(
    'SITE_USER_AGENT',
    'Mozilla/5.0 (compatible; WineWithPete/1.0; +https://winewithpete.me)'
)

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
_data_override: Optional[str] = os.getenv('WWP_DATA_DIR')
DATA_DIR: Final[Path] = Path(_data_override).resolve() if _data_override else BASE_DIR / 'data'
