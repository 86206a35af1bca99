from ._base import BeanError


class BundleNotFoundError(BeanError, FileNotFoundError):
    """Raised when no file at all exists for a resource bundle and locale."""

    def __init__(self, bundle_id: str, locale: str | None, candidates: list):
        tried = ", ".join(str(c) for c in candidates) or "<none>"
        super().__init__(
            f"No resource bundle {bundle_id!r} found for locale {locale!r}. "
            f"Tried: {tried}"
        )
        self.bundle_id = bundle_id
        self.locale = locale
