"""
Error types raised inside the request pipeline
"""


class SevaLinkError(Exception):
    """Base class for pipeline errors"""


class InputError(SevaLinkError, ValueError):
    """Message is empty, too long or otherwise unusable"""


class AugmentationUnavailable(SevaLinkError):
    """AI augmentation call failed, timed out or returned garbage"""

    def __init__(self, operation: str, reason: str = ""):
        self.operation = operation
        self.reason = reason
        super().__init__(f"AI augmentation '{operation}' unavailable: {reason}" if reason
                         else f"AI augmentation '{operation}' unavailable")


class ValidationError(SevaLinkError):
    """A category precondition failed right before finalizing a request"""

    def __init__(self, category: str, field: str, message: str):
        self.category = category
        self.field = field
        super().__init__(message)


class PersistenceError(SevaLinkError):
    """Creating the request entity or loading the requester failed"""
