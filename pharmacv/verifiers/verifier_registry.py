"""
Named CV verifiers, as used by ``--verify`` and ``--list verifiers``.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Type

from ..registry import Registry
from .base import CVVerifier

VERIFIERS: Registry[CVVerifier] = Registry("verifier")


def register_verifier(name: str, verifier_class: Type[CVVerifier]) -> None:
    VERIFIERS.add(name, verifier_class)


def get_verifier(name: str, **kwargs) -> Optional[CVVerifier]:
    """New instance of the verifier registered as ``name``; None when unknown."""
    return VERIFIERS.create(name, **kwargs)


def list_verifiers() -> List[Dict[str, str]]:
    return VERIFIERS.describe()


def unregister_verifier(name: str) -> None:
    VERIFIERS.remove(name)


__all__ = [
    "VERIFIERS",
    "register_verifier",
    "get_verifier",
    "list_verifiers",
    "unregister_verifier",
]
