"""Utility modules for the Neutrino API client."""

from .sanitizer import (
    mask_sensitive_data,
    mask_url,
    mask_headers,
    is_sensitive_key,
)

__all__ = [
    'mask_sensitive_data',
    'mask_url',
    'mask_headers',
    'is_sensitive_key',
]
