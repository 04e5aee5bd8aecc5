"""Errors raised by the rate tracker."""


class InvalidWindowLength(ValueError):
    """Raised when a tracker is constructed with a window that cannot hold a sample."""

    def __init__(self, window_len):
        self.window_len = window_len
        super().__init__(
            f"window length must be a positive integer, got {window_len!r}"
        )
