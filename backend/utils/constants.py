"""Shared constants and defaults."""

# Recovery codes issued per batch; each one is usable once
RECOVERY_CODE_COUNT = 10
RECOVERY_CODE_BYTES = 5  # 10 hex chars, shown as "xxxxx-xxxxx"

# TOTP verification tolerates one adjacent 30s step on either side
TOTP_VALID_WINDOW = 1

SMS_CODE_LENGTH = 6

# BandwagonHost KiwiVM API
BANDWAGON_API_URL = "https://api.64clouds.com/v1"
BANDWAGON_SERVICE_INFO_URL = f"{BANDWAGON_API_URL}/getServiceInfo"
BANDWAGON_USAGE_STATS_URL = f"{BANDWAGON_API_URL}/getRawUsageStats"
BANDWAGON_TIMEOUT_SECONDS = 10
