"""
Fixed data-format rules.

This file exists to keep the parsing contract in one place.
"""

TIME_ATTRIBUTE = "data-time"
TIME_SELECTOR = f"[{TIME_ATTRIBUTE}]"
TIME_SEPARATOR = ":"
SECONDS_PER_MINUTE = 60

GRAVATAR_BASE_URL = "https://www.gravatar.com/avatar"
HTML_EXTENSIONS = (".html", ".htm")
