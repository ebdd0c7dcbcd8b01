from pathlib import Path

from policy_compare.comparison.exceptions import ComparisonError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def _read(path: Path, what: str) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ComparisonError(f"Failed to load {what}: {exc}") from exc


def load_prompt_template(path: Path | None = None) -> str:
    """Load the extraction instruction template.

    Args:
        path: Path to the prompt template file.
              Defaults to the bundled comparison_prompt.txt.

    Returns:
        The raw template string with an ``{unspecified}`` placeholder.

    Raises:
        ComparisonError: if the file cannot be read.
    """
    return _read(path or _DEFAULT_PROMPT_DIR / "comparison_prompt.txt", "prompt template")


def load_json_schema(path: Path | None = None) -> str:
    """Load the structured-output schema as raw JSON text.

    Raises:
        ComparisonError: if the file cannot be read.
    """
    return _read(path or _DEFAULT_PROMPT_DIR / "comparison_schema.json", "JSON schema")


def load_system_prompt(path: Path | None = None) -> str:
    return _read(path or _DEFAULT_PROMPT_DIR / "system_prompt.txt", "system prompt").strip()


def load_tabular_note(path: Path | None = None) -> str:
    return _read(path or _DEFAULT_PROMPT_DIR / "tabular_note.txt", "tabular note").strip()
