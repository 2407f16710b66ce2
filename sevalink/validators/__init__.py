"""
Validators Package - Request validation
"""

from .request_validator import RequestValidator

__all__ = [
    'RequestValidator'
]
