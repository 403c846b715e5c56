"""Deterministic, regex-driven PII scrubber.

Processing flow:
1. Apply each rule of ``SCRUB_RULES`` in order.
2. Each rule runs over the output of the previous one, so a span replaced
   by a narrow rule cannot be re-matched by a broader one.
3. Repeat the pass until the text stops changing: a placeholder adds a word
   boundary that can expose a new match, and scrubbing must be idempotent.
4. Return the redacted text plus one ``Redaction`` per replacement.

No network, no randomness, no model calls: the same input always yields the
same output.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from advisor.privacy.base import BaseScrubber
from advisor.privacy.exceptions import ScrubError
from advisor.privacy.models import Redaction, ScrubResult
from advisor.privacy.patterns import SCRUB_RULES, PiiRule


class PiiScrubber(BaseScrubber):
    """Regex scrubber over a fixed, ordered rule table."""

    def __init__(self, rules: tuple[PiiRule, ...] = SCRUB_RULES) -> None:
        self._rules = rules

    def scrub(self, text: str) -> ScrubResult:
        """Replace every PII match with its placeholder.

        Empty input is returned unchanged.
        """
        if not text:
            return ScrubResult(redacted_text=text)
        try:
            return self._run(text)
        except ScrubError:
            raise
        except Exception as exc:
            raise ScrubError(f"Scrubbing failed: {type(exc).__name__}") from exc

    def _run(self, text: str) -> ScrubResult:
        redactions: list[Redaction] = []
        redacted = text
        # No rule matches inside a placeholder, so every pass that changes the
        # text shrinks its unredacted part and the loop ends.
        while True:
            previous = redacted
            for rule in self._rules:
                redacted = rule.pattern.sub(self._replacer(rule, redactions), redacted)
            if redacted == previous:
                break
        return ScrubResult(redacted_text=redacted, redactions=redactions)

    @staticmethod
    def _replacer(
        rule: PiiRule, redactions: list[Redaction]
    ) -> Callable[[re.Match[str]], str]:
        def replace(match: re.Match[str]) -> str:
            redactions.append(Redaction(kind=rule.kind, placeholder=rule.kind.placeholder))
            return match.expand(rule.template)

        return replace


_DEFAULT_SCRUBBER = PiiScrubber()


def redact_pii(text: str | None) -> str | None:
    """Return *text* with PII replaced; ``None`` and ``""`` pass through."""
    if not text:
        return text
    return _DEFAULT_SCRUBBER.scrub(text).redacted_text
