"""Constants for the Crane Scale integration."""

DOMAIN = "crane_scale"

CONF_NAME = "name"

# Advertised name of the supported crane scale, also used for auto-discovery
DEFAULT_DEVICE_NAME = "IF_B7"

# Weight field sits in the 4 hex characters right before this marker
WEIGHT_MARKER = "01f4"
WEIGHT_HEX_LENGTH = 4
WEIGHT_DIVISOR = 100

# Session settings (kg)
DEFAULT_THRESHOLD = 5.0
DEFAULT_UPPER_LIMIT = 100.0

# Applied when an edit is not a positive number
FALLBACK_THRESHOLD = 10.0
FALLBACK_UPPER_LIMIT = 150.0

TICK_INTERVAL_SECONDS = 1
