from __future__ import annotations


class CatalogError(Exception):
    """Base class for catalog failures."""


class CatalogUnavailableError(CatalogError):
    """The store could not answer (connectivity, timeout, exhausted pool).

    Transient: callers may retry, possibly with a smaller page size.
    """

    def __init__(self, operation: str, reason: str | None = None):
        self.operation = operation
        self.reason = reason
        msg = f"Catalog store unavailable during {operation}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)
