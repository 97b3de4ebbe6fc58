"""
Exception types for the memoria engine.

Wrong answers are never exceptions: they come back as results with
``correct=False``. These types mark data-quality and programming errors.
"""


class MemoriaError(Exception):
    """Base class for engine errors."""
    pass


class InvalidVerse(MemoriaError):
    """Raised when a verse (or pool of verses) has nothing to practice on."""
    pass


class InvalidTransition(MemoriaError):
    """Raised when a session action is not allowed in its current state."""

    def __init__(self, action: str, state: str):
        super().__init__(f"Cannot {action} while session is in state '{state}'")
        self.action = action
        self.state = state


class VerseNotFound(MemoriaError, LookupError):
    """Raised when a reference is missing from the corpus."""

    def __init__(self, reference: str):
        super().__init__(f"Verse not found in corpus: {reference}")
        self.reference = reference
