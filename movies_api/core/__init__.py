"""
Core request policies: origin allow-list and movie payload validation.
"""

from movies_api.core.origin_policy import (
    DEFAULT_ALLOWED_ORIGINS,
    AllowListCORSMiddleware,
    OriginPolicyMiddleware,
    is_origin_allowed,
)
from movies_api.core.validation import ValidationResult, validate_full, validate_partial

__all__ = [
    "DEFAULT_ALLOWED_ORIGINS",
    "AllowListCORSMiddleware",
    "OriginPolicyMiddleware",
    "is_origin_allowed",
    "ValidationResult",
    "validate_full",
    "validate_partial",
]
