# portal/exceptions.py


class PortalError(Exception):
    """Base class for portal errors."""


class StorageError(PortalError):
    """Raised when the local store cannot be accessed on disk.

    Saving propagates it to the page. ContactLog.load() treats it as an
    empty store.
    """
