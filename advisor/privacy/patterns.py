"""PII pattern tables for the scrubber and the validation gate.

The gate table is written independently of the scrubber table.
Both tables are module-level tuples built once at import and never mutated.
"""

import re
from dataclasses import dataclass

from advisor.privacy.models import PiiKind


@dataclass(frozen=True)
class PiiRule:
    """One (kind, pattern) entry of a pattern set.

    ``replacement`` is a ``re.sub`` template; it defaults to the kind's
    placeholder. Rules that keep a label reference the ``label`` group.
    """

    kind: PiiKind
    pattern: re.Pattern[str]
    replacement: str = ""

    @property
    def template(self) -> str:
        return self.replacement or self.kind.placeholder


_NAME_WORD = r"[A-Z][A-Za-z]+(?:['-][A-Za-z]+)*"
_NAME_SEQUENCE = rf"{_NAME_WORD}(?:[ \t]+{_NAME_WORD})*"

# Order matters: narrower rules run first so broader ones cannot consume
# their matches. Each rule runs over the output of the previous one.
SCRUB_RULES: tuple[PiiRule, ...] = (
    # UAE IBAN: AE + 2 check digits + account digits, optionally space-grouped.
    PiiRule(
        PiiKind.IBAN,
        re.compile(r"\bAE\d{2}(?: ?\d){16,19}\b", re.IGNORECASE),
    ),
    # Other country IBANs written contiguously or in groups of four.
    PiiRule(
        PiiKind.IBAN,
        re.compile(
            r"\b[A-Z]{2}\d{2}(?: ?[A-Z0-9]{4}){3,7}(?: ?[A-Z0-9]{1,3})?\b", re.IGNORECASE
        ),
    ),
    # Explicitly labelled IBAN; the label stays readable.
    PiiRule(
        PiiKind.IBAN,
        re.compile(
            r"\b(?P<label>IBAN[: \t]*)"
            r"[A-Z]{2}\d{2}(?: ?[A-Z0-9]{4}){1,7}(?: ?[A-Z0-9]{1,3})?\b",
            re.IGNORECASE,
        ),
        replacement=r"\g<label>" + PiiKind.IBAN.placeholder,
    ),
    # Passport-shaped tokens. Also hits unrelated reference codes.
    PiiRule(
        PiiKind.PASSPORT,
        re.compile(r"\b[A-Z]{1,2}\d{6,9}\b"),
    ),
    # Emirates ID: 784-YYYY-NNNNNNN-N.
    PiiRule(
        PiiKind.EMIRATES_ID,
        re.compile(r"\b784[- ]?\d{4}[- ]?\d{7}[- ]?\d\b"),
    ),
    PiiRule(
        PiiKind.EMAIL,
        re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b"),
    ),
    # UAE mobile: optional +971 / 00971 / 971 / 0 prefix, then 5 and 8 digits.
    PiiRule(
        PiiKind.PHONE,
        re.compile(r"(?:(?:\+|\b00)971[ -]?|\b971[ -]?|\b0|\b)5\d(?:[ -]?\d){7}\b"),
    ),
    # International numbers with an explicit +cc or 00cc prefix.
    PiiRule(
        PiiKind.PHONE,
        re.compile(r"(?:\+|(?<![\w,.])00)[1-9]\d{0,2}(?:[-. ]?\(?\d{1,4}\)?){2,5}(?!\d)"),
    ),
    # ddd-ddd-dddd shapes with an optional country code.
    PiiRule(
        PiiKind.PHONE,
        re.compile(
            r"(?<![\w+])(?:\+\d{1,3}[-. ]?)?\(?\d{3}\)?[-. ]?\d{3}[-. ]?\d{4}\b"
        ),
    ),
    # Honorific followed by capitalised words on the same line.
    PiiRule(
        PiiKind.NAME,
        re.compile(rf"\b(?i:Mrs|Miss|Mr|Ms|Dr)\.?[ \t]+{_NAME_SEQUENCE}\b"),
    ),
    # "Name: John Smith" style fields; the label stays readable.
    PiiRule(
        PiiKind.NAME,
        re.compile(
            r"\b(?P<label>(?i:Employee[ \t]*Name|Full[ \t]*Name|Name)[: \t]+"
            r"|(?i:Employee)[ \t]*:[ \t]*)"
            rf"{_NAME_SEQUENCE}"
        ),
        replacement=r"\g<label>" + PiiKind.NAME.placeholder,
    ),
)

# High-confidence subset re-derived for the gate. Matched against text folded
# to Latin-ASCII lowercase, so every letter class is case-insensitive.
GATE_RULES: tuple[PiiRule, ...] = (
    PiiRule(
        PiiKind.IBAN,
        re.compile(r"\b[A-Z]{2}\d{2}(?:[ -]?[A-Z0-9]){11,30}\b", re.IGNORECASE),
    ),
    PiiRule(
        PiiKind.IBAN,
        re.compile(r"\bAE\d{2}[ -]?\d{4}", re.IGNORECASE),
    ),
    PiiRule(
        PiiKind.EMIRATES_ID,
        re.compile(r"\b784(?:[ -]?\d){12}\b"),
    ),
    PiiRule(
        PiiKind.PHONE,
        re.compile(r"\+971|\b00971|\b05\d(?:[ -]?\d){7}\b"),
    ),
    PiiRule(
        PiiKind.EMAIL,
        re.compile(r"[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}", re.IGNORECASE),
    ),
)
