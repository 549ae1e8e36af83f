"""
Contains the exceptions raised on misconfiguration. Note that a failed validation is never an exception - it is
represented by the returned message string.
"""


class LocaleResolutionError(ValueError):
    """
    Raised when a validator chain is constructed but no locale could be resolved. This is a contract violation and
    is raised immediately instead of being deferred to validation time.
    """

    def __init__(self, locale_name: str | None = None):
        self.locale_name = locale_name
        if locale_name is None:
            super().__init__("locale must not be None")
        else:
            super().__init__(f"Could not resolve a locale for '{locale_name}'")


class UnknownLocaleError(ValueError):
    """
    Raised if a locale name is not found in the locale registry where a result is mandatory (e.g. `set_locale`).
    """

    def __init__(self, locale_name: str, available: list[str]):
        self.locale_name = locale_name
        self.available = available
        super().__init__(f"Unknown locale '{locale_name}'. Available locales: {', '.join(available)}")
