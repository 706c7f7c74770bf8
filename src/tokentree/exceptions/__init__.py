"""
tokentree exception classes.

This package provides all exception types used throughout tokentree for
consistent error handling and reporting.
"""

from tokentree.exceptions.core import (
    CyclicReferenceError,
    DtcgFormatError,
    DuplicateChildError,
    InvalidParentError,
    NameValidationError,
    NotATokenError,
    PathNotFoundError,
    PathValidationError,
    PendingValueError,
    TokenTreeError,
    TypeMismatchError,
    UnsupportedTypeError,
)

__all__ = [
    "TokenTreeError",
    "PendingValueError",
    "TypeMismatchError",
    "UnsupportedTypeError",
    "NotATokenError",
    "PathNotFoundError",
    "CyclicReferenceError",
    "PathValidationError",
    "NameValidationError",
    "DuplicateChildError",
    "InvalidParentError",
    "DtcgFormatError",
]
