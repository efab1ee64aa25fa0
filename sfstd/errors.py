"""Error type raised by the library's fallible operations."""


class SfError(Exception):
    """An operation failed; ``reason`` says why."""

    def __init__(self, reason):
        super().__init__(reason)
        self.reason = str(reason)

    def __str__(self):
        return self.reason