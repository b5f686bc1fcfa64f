"""
Base interface for CV verifiers.

Defines the contract for pluggable CV verification implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from ..shared import VerificationResult


class CVVerifier(ABC):
    """
    Abstract base class for CV verifiers.

    Implementations check CV data in different ways, such as shape
    validation or agreement between the preview and the document export.
    """

    @abstractmethod
    def verify(self, data: Any, **kwargs) -> VerificationResult:
        """
        Verify CV data.

        Args:
            data: Structured CV as a dict (or model instance where supported)
            **kwargs: Verifier-specific options

        Returns:
            VerificationResult with errors and warnings
        """
        ...
