"""Response envelopes."""

from .collection import CollectionPage
from .error import ErrorDetail, ErrorDetails, ErrorResponse, StructuralError

__all__ = [
    "CollectionPage",
    "ErrorDetail",
    "ErrorDetails",
    "ErrorResponse",
    "StructuralError",
]
