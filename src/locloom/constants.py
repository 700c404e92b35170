"""Constants used throughout the locloom library.

This module defines the API base URL, default client settings and the
literal query-parameter keys understood by the Library of Congress JSON API.
"""

# Base URL
LOC_API_BASE_URL = "https://www.loc.gov"

# Default settings
DEFAULT_TIMEOUT: float = 30.0  # Default request timeout in seconds
DEFAULT_RETRIES: int = 3  # Default number of retries on transient errors
DEFAULT_BACKOFF_FACTOR: float = 0.5

# --- Wire query-parameter keys --- #
# These must match the remote API exactly.
FORMAT_KEY = "fo"
ATTRIBUTES_INCLUDE_KEY = "at"
ATTRIBUTES_EXCLUDE_KEY = "at!"
QUERY_KEY = "q"
FACET_KEY = "fa"
PER_PAGE_KEY = "c"
PAGE_KEY = "sp"
SORT_KEY = "sb"

LOCLOOM_VERSION: str = "0.1.0"
DEFAULT_USER_AGENT: str = f"locloom/{LOCLOOM_VERSION}"
CLIENT_HEADERS: dict[str, str] = {
    "accept": "application/json",
    "User-Agent": DEFAULT_USER_AGENT,
}
