"""Exceptions raised by the proxy signature scheme."""


class RandomnessFailure(RuntimeError):
    """
    Raised when the secure entropy source cannot supply a random scalar.

    The failure is surfaced to the caller as-is; no retry is attempted.
    """
