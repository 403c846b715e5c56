from pathlib import Path

from advisor.chat.exceptions import ChatError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_system_prompt(path: Path | None = None) -> str:
    """Load the advisor system prompt.

    Raises:
        ChatError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "system_prompt.txt"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ChatError(f"Failed to load system prompt: {exc}") from exc


def load_summary_template(path: Path | None = None) -> str:
    """Load the calculation summary template handed to the model after a tool call.

    Raises:
        ChatError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "calculation_summary.txt"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ChatError(f"Failed to load summary template: {exc}") from exc
