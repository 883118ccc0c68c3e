"""
Logger Service Constants

Local constants for the logger service to avoid hardcoded values
and provide centralized configuration for logger-specific settings.
"""

# ====================================================================
# CONSOLE HANDLER CONSTANTS
# ====================================================================

CONSOLE_FORMAT = (
    "<dim>[{time:YYYY-MM-DD HH:mm:ss}]</dim> "
    "<level>{level: ^8}</level> "
    "<cyan>[{extra[source]}:{extra[logger_name]}]</cyan> "
    "{message}{extra[context]}"
)

# Context rendering
CONSOLE_MAX_CONTEXT_ITEMS = 5
CONSOLE_CONTEXT_INDENTATION = "  ↳ "

# ====================================================================
# FILE HANDLER CONSTANTS
# ====================================================================

FILE_FORMAT = (
    "{time:YYYY-MM-DDTHH:mm:ss.SSSZ} | {level: <8} | "
    "{extra[source]}:{extra[logger_name]} | {message}{extra[context]}"
)
LOG_FILE_ROTATION = "10 MB"
LOG_FILE_RETENTION = "14 days"
LOG_FILE_COMPRESSION = "gz"

# ====================================================================
# RECORD DEFAULTS
# ====================================================================

# Bound on every record so sink formats never miss a key
DEFAULT_RECORD_EXTRA = {
    "source": "system",
    "logger_name": "root",
    "context": "",
}
