"""Configuration and error types shared by the models and the codec."""

from src.core.config import CodecConfig
from src.core.errors import (
    CyclicReferenceError,
    DecodeError,
    MalformedDocumentError,
    MissingFieldError,
    ReferenceDepthError,
    TypeMismatchError,
    UnrecognizedCodeError,
)

__all__ = [
    "CodecConfig",
    # Errors
    "DecodeError",
    "MissingFieldError",
    "TypeMismatchError",
    "UnrecognizedCodeError",
    "MalformedDocumentError",
    "CyclicReferenceError",
    "ReferenceDepthError",
]
