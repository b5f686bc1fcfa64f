"""
Best-effort removal of personal information from free text.

The rule set targets pharmacy names, postal codes, French phone numbers,
emails and street addresses. It is NOT a complete redaction: uncapitalized
names, hyphenated names and foreign address formats go through untouched.

Digit classes are ASCII ``[0-9]``. Word boundaries and the email local part
use Python's Unicode ``\\b``/``\\w``, so an address such as ``josé@exemple.fr``
is masked as a whole.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Optional, Pattern, Tuple

_LOWER = "a-zéèêëàâäîïôöùûü"
_LETTERS = "A-Za-zéèêëàâäîïôöùûü"

# Ordered; each rule runs over the whole string
SCRUB_RULES: List[Tuple[Pattern[str], str]] = [
    # Named pharmacies
    (re.compile(rf"\bPharmacie\s+[A-Z][{_LOWER}]+(?:\s+[A-Z][{_LOWER}]+)*"), "Pharmacie [confidentiel]"),
    (re.compile(rf"\b[A-Z][{_LOWER}]+\s+Pharma(?:cie)?\b"), "[confidentiel]"),
    # Postal codes
    (re.compile(r"\b[0-9]{5}\b"), ""),
    # Phone numbers
    (re.compile(r"\b0[1-9](?:[\s.-]?[0-9]{2}){4}\b"), "[téléphone masqué]"),
    (re.compile(r"\+33\s?[0-9](?:[\s.-]?[0-9]{2}){4}"), "[téléphone masqué]"),
    # Emails
    (re.compile(r"\b[\w.-]+@[\w.-]+\.\w{2,}\b", re.IGNORECASE), "[email masqué]"),
    # Street addresses
    (
        re.compile(
            rf"\b[0-9]{{1,4}}(?:bis|ter)?\s+(?:rue|avenue|boulevard|place|allée|impasse|chemin)\s+[{_LETTERS}\s-]+",
            re.IGNORECASE,
        ),
        "",
    ),
]

CONFIDENTIAL = "[confidentiel]"

_WS_RE = re.compile(r"\s+")

# Removals can glue fragments into a new match; passes stop once stable
_MAX_PASSES = 5


def _collapse(text: str) -> str:
    return _WS_RE.sub(" ", text).strip()


def _apply_rules(text: str) -> str:
    for pattern, replacement in SCRUB_RULES:
        text = pattern.sub(replacement, text)
    return _collapse(text)


def scrub_personal_info(text: Optional[str]) -> str:
    if not text:
        return ""
    cleaned = _apply_rules(text)
    for _ in range(_MAX_PASSES):
        again = _apply_rules(cleaned)
        if again == cleaned:
            break
        cleaned = again
    return cleaned


def mask_terms(text: Optional[str], terms: Iterable[str], replacement: str = CONFIDENTIAL) -> str:
    """
    Replace known names (e.g. the CV's own employers) in free text.

    Exact occurrences are replaced, then case-insensitive whole-word ones.
    Terms shorter than two characters are ignored.
    """
    if not text:
        return ""
    unique = sorted({t.strip() for t in terms if t and len(t.strip()) >= 2}, key=len, reverse=True)
    for term in unique:
        text = text.replace(term, replacement)
        text = re.sub(rf"(?<!\w){re.escape(term)}(?!\w)", replacement, text, flags=re.IGNORECASE)
    return text
