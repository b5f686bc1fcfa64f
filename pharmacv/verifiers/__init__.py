"""
CV verification interfaces and implementations.

This module provides pluggable CV verifiers, selectable by name through the
verifier registry.
"""

from .base import CVVerifier
from .conformance_verifier import ConformanceVerifier
from .structured_cv_verifier import StructuredCVVerifier
from .verifier_registry import get_verifier, list_verifiers, register_verifier, unregister_verifier

# Register built-in verifiers
register_verifier("structured-cv", StructuredCVVerifier)
register_verifier("conformance", ConformanceVerifier)

__all__ = [
    "CVVerifier",
    "ConformanceVerifier",
    "StructuredCVVerifier",
    "register_verifier",
    "get_verifier",
    "list_verifiers",
    "unregister_verifier",
]
