"""
Configuration for the paginator package.
"""

import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# === DEFAULTS ===
# Values used when neither an explicit nor a default config supplies a field
DEFAULT_PAGE = int(os.getenv("PAGINATOR_DEFAULT_PAGE", "1"))
DEFAULT_PER_PAGE = int(os.getenv("PAGINATOR_DEFAULT_PER_PAGE", "25"))
DEFAULT_PATH = os.getenv("PAGINATOR_DEFAULT_PATH", "")

# Upper bound for per_page values read from HTTP requests (0 = no limit)
MAX_PER_PAGE = int(os.getenv("PAGINATOR_MAX_PER_PAGE", "0"))

# Query string parameter names used when building and parsing page links
PAGE_PARAM = "page"
PER_PAGE_PARAM = "per_page"

__all__ = [
    'DEFAULT_PAGE',
    'DEFAULT_PER_PAGE',
    'DEFAULT_PATH',
    'MAX_PER_PAGE',
    'PAGE_PARAM',
    'PER_PAGE_PARAM',
]
