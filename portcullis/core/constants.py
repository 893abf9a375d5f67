"""Fixed onboarding constants (not configurable per environment)."""

# Source tag written into identity-platform metadata.
SOURCE_TAG = "discord_bot"

# Usage metric (table size) accepted by the registration form, inclusive.
USAGE_METRIC_MIN = 1
USAGE_METRIC_MAX = 1_000_000_000

# Billing
QUOTE_UNIT_PRICE = 250  # minor currency units per unit
QUOTE_VALIDITY_DAYS = 30
SUPPORTED_CURRENCIES: tuple[str, ...] = ("USD", "EUR", "GBP")

# Discord
DOMAIN_ROLE_COLOR = 0x030303
PORTAL_EMBED_COLOR = 0x0099FF
WELCOME_CHANNEL_SUFFIX = "-welcome"
CHANNEL_NAME_MAX_LENGTH = 100
# Longest organization whose welcome channel name still fits.
ORGANIZATION_MAX_LENGTH = CHANNEL_NAME_MAX_LENGTH - len(WELCOME_CHANNEL_SUFFIX)
DEFAULT_OPERATOR_USER_ID = 1300607564517474445

# Component custom ids (stable across restarts for persistent views)
REGISTER_BUTTON_ID = "register-client"
REGISTRATION_MODAL_ID = "client-registration-form"

# API keys: pk_<org>_<base64url of 32 random bytes>
API_KEY_PREFIX = "pk"
API_KEY_RANDOM_BYTES = 32
API_KEY_FALLBACK_SLUG = "org"
