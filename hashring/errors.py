# hashring/errors.py


class HashRingError(Exception):
    """Error dasar untuk hash ring."""


class EmptyRingError(HashRingError, LookupError):
    """Lookup dilakukan saat belum ada node yang terdaftar di ring."""

    def __init__(self, message="No nodes registered in the hash ring"):
        super().__init__(message)
