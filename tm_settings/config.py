# ===== workbook config =====
DEFAULT_SHEET_URL = ""  # set SHEET_URL in secrets
SETTINGS_SHEET = "Settings"
SETTINGS_HEADER = ["Setting", "Value", "Description", "Type"]
SETTINGS_SHEET_ROWS = 200
SETTINGS_SHEET_COLS = len(SETTINGS_HEADER)

# sheet columns are 1-based
VALUE_COL = 2

# ===== caching =====
SETTINGS_CACHE_TTL_SEC = 5 * 60  # settings cache freshness window

# ===== seed rows (key, value, description, type) =====
DEFAULT_SETTINGS = [
    ["MIN_PROFIT_PERCENT", "25", "Minimum profit % to consider a deal", "number"],
    ["TARGET_PROFIT_PERCENT", "50", "Target profit % for good deals", "number"],
    ["EXCEPTIONAL_PROFIT_PERCENT", "100", "Exceptional deal profit threshold", "number"],
    ["CLAUDE_API_KEY", "", "Anthropic Claude API key", "secret"],
    ["SMSIT_API_KEY", "", "SMS-iT CRM API key", "secret"],
    ["ONEHASH_API_KEY", "", "OneHash CRM API key", "secret"],
    ["AUTO_CONTACT_THRESHOLD", "75", "Auto-contact deals above this confidence %", "number"],
    ["MAX_RADIUS_MILES", "50", "Maximum distance to travel for deals", "number"],
    ["AUTO_REJECT_BLACKLISTED", "TRUE", "Auto-reject blacklisted devices", "boolean"],
    ["AUTO_REJECT_ICLOUD_LOCKED", "TRUE", "Auto-reject iCloud locked devices", "boolean"],
    ["ENABLE_AI_ANALYSIS", "TRUE", "Enable AI-powered deal analysis", "boolean"],
    ["ENABLE_AUTO_MESSAGING", "FALSE", "Enable automatic seller contact", "boolean"],
    ["DATA_RETENTION_DAYS", "90", "Days to keep old deals in database", "number"],
]

# ===== bundle defaults =====
DEFAULT_CLAUDE_MODEL = "claude-3-5-sonnet-20241022"
DEFAULT_CLAUDE_MAX_TOKENS = 4096
