"""Validation gate: independent PII re-detection over scrubbed text.

The gate never trusts the scrubber's own report. It folds the text to
Latin-ASCII lowercase (NFKC, ASCII digits, then ICU transliteration so
lookalike letters from other scripts collapse onto their Latin forms), runs
``GATE_RULES`` and blocks on any match. It never returns or logs the matched
span, only the category.
"""

import unicodedata
from typing import ClassVar

import icu  # type: ignore[import-untyped]

from advisor.privacy.models import PiiKind, ValidationResult
from advisor.privacy.patterns import GATE_RULES, PiiRule


class ValidationGate:
    """Pure pass/block predicate over redacted text."""

    _ICU_TRANSFORM: ClassVar[str] = "Any-Latin; Latin-ASCII; Lower"

    def __init__(self, rules: tuple[PiiRule, ...] = GATE_RULES) -> None:
        self._rules = rules
        self._transliterator: icu.Transliterator = icu.Transliterator.createInstance(
            self._ICU_TRANSFORM
        )

    def check(self, text: str) -> ValidationResult:
        folded = self.fold(text)
        triggered: list[PiiKind] = []
        for rule in self._rules:
            if rule.kind in triggered:
                continue
            if rule.pattern.search(folded):
                triggered.append(rule.kind)
        if triggered:
            return ValidationResult(passed=False, triggered_kinds=tuple(triggered), text=text)
        return ValidationResult(passed=True, text=text)

    def fold(self, text: str) -> str:
        """NFKC-normalize, map decimal digits to ASCII, transliterate to Latin-ASCII lowercase."""
        normalized = unicodedata.normalize("NFKC", text or "")
        digits = "".join(_ascii_digit(ch) for ch in normalized)
        return str(self._transliterator.transliterate(digits))


def _ascii_digit(ch: str) -> str:
    if ch.isascii() or not ch.isdecimal():
        return ch
    return str(unicodedata.decimal(ch))
