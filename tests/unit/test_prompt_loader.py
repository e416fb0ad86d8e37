"""Tests for the extraction instruction loader."""

from pathlib import Path

import pytest

from docextract.invocation.exceptions import InvocationError
from docextract.invocation.prompt_loader import load_instruction


class TestLoadInstruction:
    def test_default_requests_json(self) -> None:
        instruction = load_instruction()
        assert "JSON" in instruction

    def test_default_keeps_date_of_birth_key(self) -> None:
        instruction = load_instruction()
        assert "date_of_buuurth" in instruction

    def test_default_has_no_trailing_newline(self) -> None:
        assert not load_instruction().endswith("\n")

    def test_loads_custom_instruction(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom.txt"
        custom.write_text("Return JSON.\n")
        assert load_instruction(custom) == "Return JSON."

    def test_missing_file_raises_error(self) -> None:
        with pytest.raises(InvocationError, match="Failed to load extraction prompt"):
            load_instruction(Path("/nonexistent/prompt.txt"))
