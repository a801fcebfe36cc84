"""Error kinds raised by the recognition store."""


class NotFound(LookupError):
    """The requested event or day bucket has no record."""


class StoreUnavailable(RuntimeError):
    """The Redis store did not respond."""


class CorruptRecord(ValueError):
    """A stored hash is missing a field or holds an undecodable value."""

    def __init__(self, key: str, reason: str):
        super().__init__(f"Corrupt record {key}: {reason}")
        self.key = key
        self.reason = reason
