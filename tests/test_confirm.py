"""Tests for the Confirm prompt."""

from __future__ import annotations

import pytest

from pi.prompt.errors import EndOfInputError
from pi.prompt.prompts.confirm import DEFAULT_ERROR_MESSAGE, Confirm, default_parser

from .virtual_terminal import VirtualTerminal, press, type_text


class TestDefaultParser:
    @pytest.mark.parametrize("text", ["y", "Y", "yes", "YES", " yes "])
    def test_yes(self, text: str) -> None:
        assert default_parser(text) is True

    @pytest.mark.parametrize("text", ["n", "N", "no", "No"])
    def test_no(self, text: str) -> None:
        assert default_parser(text) is False

    @pytest.mark.parametrize("text", ["", "maybe", "yep", "nope"])
    def test_unrecognised(self, text: str) -> None:
        assert default_parser(text) is None


class TestConfirmPrompt:
    def test_yes(self) -> None:
        vt = VirtualTerminal(type_text("y") + press("enter"))
        assert Confirm("Continue?").prompt(vt) is True
        assert vt.screen == ["? Continue? Yes"]

    def test_no(self) -> None:
        vt = VirtualTerminal(type_text("no") + press("enter"))
        assert Confirm("Continue?").prompt(vt) is False
        assert vt.screen == ["? Continue? No"]

    def test_default_on_empty_input(self) -> None:
        vt = VirtualTerminal(press("enter"))
        assert Confirm("Continue?").with_default(True).prompt(vt) is True

    def test_default_hint(self) -> None:
        vt = VirtualTerminal()
        with pytest.raises(EndOfInputError):
            Confirm("Continue?").with_default(False).prompt(vt)
        assert vt.screen[0].startswith("? Continue? (y/N)")

    def test_empty_input_without_default_is_rejected(self) -> None:
        vt = VirtualTerminal(press("enter"))
        with pytest.raises(EndOfInputError):
            Confirm("Continue?").prompt(vt)
        assert vt.screen[0] == f"# {DEFAULT_ERROR_MESSAGE}"

    def test_invalid_answer_can_be_corrected(self) -> None:
        keys = (
            type_text("maybe")
            + press("enter", "ctrl+w")
            + type_text("yes")
            + press("enter")
        )
        vt = VirtualTerminal(keys)
        assert Confirm("Continue?").prompt(vt) is True

    def test_custom_error_message(self) -> None:
        vt = VirtualTerminal(type_text("x") + press("enter"))
        with pytest.raises(EndOfInputError):
            Confirm("Continue?").with_error_message("y or n please").prompt(vt)
        assert vt.screen[0] == "# y or n please"

    def test_custom_parser_and_formatter(self) -> None:
        vt = VirtualTerminal(type_text("si") + press("enter"))
        answer = (
            Confirm("Continuar?")
            .with_parser(lambda text: {"si": True, "no": False}.get(text))
            .with_formatter(lambda value: "si" if value else "no")
            .prompt(vt)
        )
        assert answer is True
        assert vt.screen == ["? Continuar? si"]
