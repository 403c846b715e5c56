import random
from unittest.mock import MagicMock

import pytest

from advisor.privacy.exceptions import ScrubError
from advisor.privacy.models import PiiKind
from advisor.privacy.patterns import PiiRule
from advisor.privacy.scrubber import PiiScrubber, redact_pii

SAMPLE_LINE = "Name: John Smith, IBAN: AE070331234567890123456, salary AED 15,000"

FRAGMENTS = (
    "+971", "00971", "GB29", "AE07", "784", "500", "AB", "03319012", "1234", " ", "-",
    "Name: ", "Mr ", "John", "Smith", "jane@x.io", "\n", "N1234567", "(212) 555-0199",
)


def _scrub(text: str) -> str:
    return PiiScrubber().scrub(text).redacted_text


class TestScrubberEndToEnd:
    def test_redacts_name_and_iban_keeps_amount(self) -> None:
        assert _scrub(SAMPLE_LINE) == (
            "Name: [REDACTED_NAME], IBAN: [REDACTED_IBAN], salary AED 15,000"
        )

    def test_reports_one_redaction_per_match(self) -> None:
        result = PiiScrubber().scrub(SAMPLE_LINE)
        assert result.count_by_kind() == {"IBAN": 1, "NAME": 1}

    def test_redactions_do_not_keep_original_values(self) -> None:
        result = PiiScrubber().scrub(SAMPLE_LINE)
        dumped = repr(result.redactions)
        assert "John" not in dumped
        assert "AE07" not in dumped

    @pytest.mark.parametrize(
        "text",
        [
            "SALARY CERTIFICATE\nEmployee Name: Jane Doe\nDear Mr. Ahmed Khan,\n"
            "IBAN: AE070331234567890123456\nMobile: +971 50 123 4567\n"
            "Email: jane.doe@example.com\nBasic Salary: AED 12,000\n",
            "+971GB29784AE07784500",
            "+971AB03319012",
            "IBAN: gb29 nwbk 6016 1331 9268 19",
        ],
    )
    def test_is_idempotent(self, text: str) -> None:
        once = _scrub(text)
        assert _scrub(once) == once

    def test_is_idempotent_over_mixed_fragments(self) -> None:
        rng = random.Random(20240601)
        for _ in range(2000):
            text = "".join(rng.choice(FRAGMENTS) for _ in range(rng.randint(1, 8)))
            once = _scrub(text)
            assert _scrub(once) == once, text

    def test_second_pass_reports_no_redactions(self) -> None:
        once = _scrub("+971GB29784AE07784500")
        assert PiiScrubber().scrub(once).redactions == []

    def test_salary_lines_are_untouched(self) -> None:
        text = "Basic Salary: AED 12,000\nHousing Allowance: AED 5,000\nNet Salary: AED 18,500"
        assert _scrub(text) == text


class TestScrubberCategories:
    def test_uae_iban_contiguous(self) -> None:
        assert _scrub("Account AE070331234567890123456") == "Account [REDACTED_IBAN]"

    def test_uae_iban_space_grouped(self) -> None:
        assert _scrub("AE07 0331 2345 6789 0123 456 is mine") == "[REDACTED_IBAN] is mine"

    def test_foreign_iban_grouped(self) -> None:
        assert _scrub("Paid to GB29 NWBK 6016 1331 9268 19") == "Paid to [REDACTED_IBAN]"

    def test_labelled_iban_keeps_label(self) -> None:
        assert _scrub("IBAN: SA0380000000608010167519") == "IBAN: [REDACTED_IBAN]"

    def test_lowercase_labelled_iban(self) -> None:
        assert (
            _scrub("IBAN: gb29 nwbk 6016 1331 9268 19\nNet Salary AED 9,000")
            == "IBAN: [REDACTED_IBAN]\nNet Salary AED 9,000"
        )

    def test_mixed_case_foreign_iban(self) -> None:
        assert _scrub("Paid to Gb29 NwBk 6016 1331 9268 19") == "Paid to [REDACTED_IBAN]"

    def test_passport(self) -> None:
        assert _scrub("Passport No: N1234567") == "Passport No: [REDACTED_PASSPORT]"

    def test_passport_pattern_over_redacts_reference_codes(self) -> None:
        assert _scrub("Reference: AB1234567") == "Reference: [REDACTED_PASSPORT]"

    def test_emirates_id_hyphenated(self) -> None:
        assert (
            _scrub("Emirates ID: 784-1990-1234567-1")
            == "Emirates ID: [REDACTED_EMIRATES_ID]"
        )

    def test_emirates_id_contiguous(self) -> None:
        assert _scrub("ID 784199012345671") == "ID [REDACTED_EMIRATES_ID]"

    def test_email(self) -> None:
        assert _scrub("Contact: jane.doe@example.com") == "Contact: [REDACTED_EMAIL]"

    def test_uae_mobile_international_prefix(self) -> None:
        assert _scrub("Mobile: +971 50 123 4567") == "Mobile: [REDACTED_PHONE]"

    def test_uae_mobile_local_prefix(self) -> None:
        assert _scrub("Call 050-123-4567 today") == "Call [REDACTED_PHONE] today"

    def test_uae_mobile_double_zero_prefix(self) -> None:
        assert _scrub("Tel 00971501234567") == "Tel [REDACTED_PHONE]"

    def test_international_landline(self) -> None:
        assert _scrub("Office: +971 4 123 4567") == "Office: [REDACTED_PHONE]"

    def test_nanp_style_phone(self) -> None:
        assert _scrub("HR desk (212) 555-0199") == "HR desk [REDACTED_PHONE]"

    def test_honorific_name(self) -> None:
        assert _scrub("Dear Mr. Ahmed Khan, welcome") == "Dear [REDACTED_NAME], welcome"

    def test_honorific_name_stays_on_one_line(self) -> None:
        assert _scrub("Dr Sara Ali\nBasic Salary") == "[REDACTED_NAME]\nBasic Salary"

    def test_labelled_name_keeps_label(self) -> None:
        assert (
            _scrub("Employee Name: Jane Doe\nBasic Salary: AED 12,000")
            == "Employee Name: [REDACTED_NAME]\nBasic Salary: AED 12,000"
        )

    def test_full_name_label(self) -> None:
        assert _scrub("Full Name: Maria Lopez") == "Full Name: [REDACTED_NAME]"

    def test_employee_label_with_colon(self) -> None:
        assert _scrub("Employee: Omar Farouk") == "Employee: [REDACTED_NAME]"

    def test_label_is_case_insensitive(self) -> None:
        assert _scrub("NAME: John Smith") == "NAME: [REDACTED_NAME]"


class TestScrubberEdgeCases:
    def test_empty_string_returned_unchanged(self) -> None:
        result = PiiScrubber().scrub("")
        assert result.redacted_text == ""
        assert result.redactions == []

    def test_redact_pii_passes_none_through(self) -> None:
        assert redact_pii(None) is None

    def test_redact_pii_passes_empty_through(self) -> None:
        assert redact_pii("") == ""

    def test_redact_pii_returns_redacted_text(self) -> None:
        assert redact_pii("mail me at a.b@c.io") == "mail me at [REDACTED_EMAIL]"

    def test_unexpected_failure_is_wrapped(self) -> None:
        pattern = MagicMock()
        pattern.sub.side_effect = RuntimeError("boom")
        scrubber = PiiScrubber(rules=(PiiRule(PiiKind.EMAIL, pattern),))
        with pytest.raises(ScrubError, match="RuntimeError"):
            scrubber.scrub("anything")
