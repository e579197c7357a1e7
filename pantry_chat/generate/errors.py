"""
Exceptions raised by model backends.

The GenerationClient catches these (and any library error) and turns them
into failure results, so nothing here reaches the chat session.
"""


class GenerationError(Exception):
    """Raised when a backend answers but the answer is unusable."""

    def __init__(self, engine, details=None):
        self.engine = engine
        self.details = details or "Empty response from model."
        super().__init__(f"[{engine}] {self.details}")
