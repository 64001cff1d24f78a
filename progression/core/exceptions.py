from typing import Optional, Dict, Any


class ProgressionError(Exception):
    """Base exception for all export errors."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


# Extractor Exceptions
class FrameworkParseError(ProgressionError):
    """Front matter is missing, malformed, or lacks required fields."""

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        details = dict(details or {})
        if source is not None:
            details["source"] = source
        super().__init__(message, details=details)
