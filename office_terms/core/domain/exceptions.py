# office_terms/core/domain/exceptions.py
from typing import Optional


class DomainError(Exception):
    """Base class for all domain-level exceptions."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

# --- Registry Errors ---

class UnknownLocaleError(DomainError):
    """Raised when date rules are requested for a locale that is not in the registry."""
    def __init__(self, locale: str):
        self.locale = locale
        super().__init__(f"Locale '{locale}' has no date rules in the registry.")

# --- Date Errors ---

class DateError(DomainError):
    """
    Base class for date normalization failures.

    A DateError is a hard stop for one date value; it is never the same
    thing as "no date present", which normalizers report as None.
    """
    def __init__(self, message: str, raw: str = "", locale: Optional[str] = None):
        self.raw = raw
        self.locale = locale
        super().__init__(message)

class UnrecognizedDateShape(DateError):
    """Raised when a translated date string matches none of the recognized shapes."""
    def __init__(self, raw: str, translated: str = "", locale: Optional[str] = None):
        self.translated = translated
        shown = translated or raw
        super().__init__(f"Unknown date format: '{shown}' (from '{raw}')", raw=raw, locale=locale)

class MissingRequiredLocaleToken(DateError):
    """Raised when a shape implies a month name that is absent from the month table."""
    def __init__(self, token: str, raw: str = "", locale: Optional[str] = None):
        self.token = token
        super().__init__(
            f"Month token '{token}' in '{raw}' is not a known month; "
            f"the date rules for locale '{locale}' are incomplete.",
            raw=raw,
            locale=locale,
        )

class InvalidCalendarDate(DateError):
    """Raised when recognized components do not form a real calendar date."""
    def __init__(self, raw: str, reason: str, locale: Optional[str] = None):
        self.reason = reason
        super().__init__(f"Invalid calendar date '{raw}': {reason}", raw=raw, locale=locale)

# --- Input Errors ---

class MalformedFieldFrame(DomainError):
    """Raised when upstream infobox fields cannot be grouped into numbered blocks."""
    def __init__(self, field_name: object, reason: str):
        self.field_name = field_name
        super().__init__(f"Malformed infobox field {field_name!r}: {reason}")

class MalformedPageError(DomainError):
    """Raised when a parsed page document does not have the expected section/infobox layout."""
    def __init__(self, reason: str, source: Optional[str] = None):
        self.reason = reason
        self.source = source
        where = f" in '{source}'" if source else ""
        super().__init__(f"Malformed page document{where}: {reason}")

# --- Source Errors ---

class PageNotFoundError(DomainError):
    """Raised when an infobox source has no document under the requested name."""
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Page '{name}' not found.")
