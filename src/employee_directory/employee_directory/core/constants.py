"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_PAYMENT_DAY = 25
DEFAULT_TOKENINFO_URL = "https://oauth2.googleapis.com/tokeninfo"
DEFAULT_TOKENINFO_TIMEOUT = 5.0
DEFAULT_TOKEN_PREFIX = "demo-token"
GUEST_TOKEN_MARKER = "guest"
