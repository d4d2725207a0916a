class SlugError(Exception):
    """Base exception for slug-related errors."""
    pass

class SlugCollisionError(SlugError):
    """Raised when no collision-free slug could be issued."""

    def __init__(self, text: str, attempts: int):
        self.text = text
        self.attempts = attempts
        super().__init__(f"Could not issue a unique slug for '{text}' after {attempts} attempts.")
