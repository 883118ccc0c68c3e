# backend/thumbnail_api/utils/log_utils.py
"""
Helpers for safe logging of user-supplied values.
"""

import re
from typing import Optional

_LINE_BREAKS = re.compile(r"[\r\n]")


def sanitize_for_log(value: Optional[str]) -> str:
    """
    Make a user-supplied string safe to embed in a log line.

    Newline and carriage-return characters are replaced so a crafted
    filename or size spec cannot forge additional log entries.

    Args:
        value: String to sanitize; may be None

    Returns:
        Sanitized string, never None
    """
    if value is None:
        return "(null)"
    return _LINE_BREAKS.sub("_", value)
