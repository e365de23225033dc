class RoundStoreError(Exception):
    """Base for all round store errors."""


class StorageError(RoundStoreError):
    """Key-value backend could not read or write."""


class InvalidBlobError(RoundStoreError):
    """Stored blob is not a round this version understands."""


class InvalidUpdateError(RoundStoreError):
    """Mutation rejected: unknown field, bad hole number or invalid value."""
