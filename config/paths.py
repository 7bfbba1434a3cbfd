"""
Application constants - Centralized names for token-count

Module nay dinh nghia cac hang so dung chung trong ung dung.
Tap trung o mot noi de tranh hardcode rai rac va dam bao consistency.
"""

import os


# =============================================================================
# Ten ung dung - Single source of truth cho naming
# =============================================================================
APP_NAME = "token-count"
APP_VERSION = "1.0.0"

# =============================================================================
# Tokenizer - encoding co dinh, khong cho user chon
# =============================================================================
TOKEN_ENCODING = "cl100k_base"

# =============================================================================
# Environment Variables - Ten bien moi truong cho debug mode
# =============================================================================
DEBUG_ENV_VAR = "TOKEN_COUNT_DEBUG"

# Kiem tra debug mode tu environment variable
DEBUG_MODE = os.environ.get(DEBUG_ENV_VAR, "").lower() in ("1", "true", "yes")
