from dataclasses import dataclass, field
from enum import StrEnum

from advisor.privacy.exceptions import PiiLeakError


class PiiKind(StrEnum):
    """Categories of personal data the scrubber redacts."""

    IBAN = "IBAN"
    PASSPORT = "PASSPORT"
    EMIRATES_ID = "EMIRATES_ID"
    EMAIL = "EMAIL"
    PHONE = "PHONE"
    NAME = "NAME"

    @property
    def placeholder(self) -> str:
        return f"[REDACTED_{self.value}]"


@dataclass(frozen=True)
class Redaction:
    """Single replacement record. The original value is deliberately not kept."""

    kind: PiiKind
    placeholder: str


@dataclass
class ScrubResult:
    """Output of the scrubber."""

    redacted_text: str
    redactions: list[Redaction] = field(default_factory=list)

    def count_by_kind(self) -> dict[str, int]:
        counts: dict[str, int] = {}
        for redaction in self.redactions:
            counts[redaction.kind.value] = counts.get(redaction.kind.value, 0) + 1
        return counts


@dataclass(frozen=True)
class ClearedText:
    """Redacted text that has passed the validation gate.

    The structured-extraction stage accepts only this type.
    """

    text: str


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of the validation gate."""

    passed: bool
    triggered_kinds: tuple[PiiKind, ...] = ()
    text: str = field(default="", repr=False)

    @property
    def blocked(self) -> bool:
        return not self.passed

    @property
    def cleared_text(self) -> ClearedText:
        """Return the gate-cleared text.

        Raises:
            PiiLeakError: if the gate blocked the text.
        """
        if not self.passed:
            raise PiiLeakError(
                "Text did not pass the validation gate: "
                + ", ".join(kind.value for kind in self.triggered_kinds)
            )
        return ClearedText(text=self.text)
