"""
Error taxonomy for the engine.

Both errors are usage errors: the engine never retries or repairs input, it
raises and lets the caller decide (re-prompt, abort the session, ...).
"""


class AbsurdleError(ValueError):
    """Base class for every error raised by the engine."""


class InvalidConfiguration(AbsurdleError):
    """Session setup is impossible (e.g. word length < 1)."""


class InvalidGuess(AbsurdleError):
    """A round cannot be played (wrong guess length, no candidates left)."""
