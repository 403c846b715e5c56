"""LLM-backed salary extractor over gate-cleared text."""

import json
from pathlib import Path
from typing import Any

from advisor.extraction.base import BaseSalaryExtractor
from advisor.extraction.exceptions import ExtractionValidationError
from advisor.extraction.models import SalaryExtraction
from advisor.extraction.prompt_loader import load_json_schema, load_prompt_template
from advisor.extraction.validator import validate_and_build
from advisor.llm.client_base import BaseLLMClient
from advisor.llm.exceptions import LLMResponseError
from advisor.logging.logger import Log
from advisor.privacy.models import ClearedText

# Integers decode as floats: amounts are floats anyway, and an oversized
# integer becomes inf instead of hitting the int digit limit.
_DECODER = json.JSONDecoder(parse_int=float)

SYSTEM_PROMPT = (
    "You extract monthly salary figures from redacted payroll documents "
    "and answer with a single JSON object."
)


class SalaryExtractor(BaseSalaryExtractor):
    """Extracts structured salary data from redacted text using an AI provider."""

    def __init__(
        self,
        *,
        client: BaseLLMClient,
        model: str,
        temperature: float = 0.0,
        timeout_seconds: float | None = None,
        prompt_template_path: Path | None = None,
        json_schema_path: Path | None = None,
        system_prompt: str = SYSTEM_PROMPT,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(0.2, temperature))
        self._timeout_seconds = timeout_seconds
        self._system_prompt = system_prompt
        self._prompt_template = load_prompt_template(prompt_template_path)
        self._json_schema = load_json_schema(json_schema_path)

    def extract(self, cleared: ClearedText) -> SalaryExtraction:
        if not isinstance(cleared, ClearedText):
            raise TypeError("SalaryExtractor only accepts gate-cleared text")
        prompt = self._build_prompt(cleared.text)
        Log.debug(f"Extraction prompt built: {len(prompt)} chars")

        raw_response = self._call_ai(prompt)
        Log.debug(f"AI raw response: {len(raw_response)} chars")

        parsed = find_first_json_object(raw_response)
        if parsed is None:
            raise ExtractionValidationError("No JSON object found in model response")
        result = validate_and_build(parsed)

        Log.info(
            f"Salary extraction complete: {len(result.other_allowances)} other allowances, "
            f"currency {result.currency}"
        )
        return result

    def _build_prompt(self, text: str) -> str:
        return self._prompt_template.format(
            redacted_text=text,
            json_schema=self._json_schema,
        )

    def _call_ai(self, prompt: str) -> str:
        try:
            return self._client.create_chat_completion(
                model=self._model,
                temperature=self._temperature,
                system_prompt=self._system_prompt,
                user_prompt=prompt,
                json_mode=True,
                timeout_seconds=self._timeout_seconds,
            )
        except LLMResponseError as exc:
            raise ExtractionValidationError(str(exc)) from exc


def find_first_json_object(raw: str) -> dict[str, Any] | None:
    """Return the first decodable JSON object embedded in *raw*.

    Surrounding prose and markdown code fences are skipped.
    """
    start = raw.find("{")
    while start != -1:
        try:
            value, _ = _DECODER.raw_decode(raw, start)
        except ValueError:
            start = raw.find("{", start + 1)
            continue
        if isinstance(value, dict):
            return value
        start = raw.find("{", start + 1)
    return None
