from pathlib import Path

from docextract.invocation.exceptions import InvocationError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_instruction(path: Path | None = None) -> str:
    """Load the extraction instruction sent alongside every image.

    Args:
        path: Path to the instruction file.
              Defaults to the bundled extraction_prompt.txt.

    Returns:
        The instruction text without its trailing newline.

    Raises:
        InvocationError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "extraction_prompt.txt"
    try:
        return path.read_text(encoding="utf-8").rstrip("\n")
    except OSError as exc:
        raise InvocationError(f"Failed to load extraction prompt: {exc}") from exc
