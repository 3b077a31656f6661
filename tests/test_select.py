"""Tests for the Select prompt."""

from __future__ import annotations

import pytest

from pi.prompt.config import PromptConfig
from pi.prompt.errors import EndOfInputError, InvalidConfigurationError
from pi.prompt.prompts.options import ListOption
from pi.prompt.prompts.select import Select

from .virtual_terminal import VirtualTerminal, press, type_text

FRUITS = ["apple", "banana", "cherry", "durian", "elderberry"]


class TestSelectNavigation:
    def test_enter_picks_first_option(self) -> None:
        vt = VirtualTerminal(press("enter"))
        assert Select("Fruit", FRUITS).prompt(vt) == "apple"
        assert vt.screen == ["? Fruit apple"]

    def test_move_down(self) -> None:
        vt = VirtualTerminal(press("down", "down", "enter"))
        assert Select("Fruit", FRUITS).prompt(vt) == "cherry"

    def test_up_wraps_to_last(self) -> None:
        vt = VirtualTerminal(press("up", "enter"))
        assert Select("Fruit", FRUITS).prompt(vt) == "elderberry"

    def test_down_wraps_to_first(self) -> None:
        vt = VirtualTerminal(press("end", "down", "enter"))
        assert Select("Fruit", FRUITS).prompt(vt) == "apple"

    def test_page_down_clamps(self) -> None:
        config = PromptConfig(page_size=3)
        vt = VirtualTerminal(press("pageDown", "pageDown", "enter"))
        assert Select("Fruit", FRUITS, config).prompt(vt) == "elderberry"

    def test_starting_cursor(self) -> None:
        vt = VirtualTerminal(press("enter"))
        assert Select("Fruit", FRUITS).with_starting_cursor(3).prompt(vt) == "durian"

    def test_vim_mode(self) -> None:
        config = PromptConfig(vim_mode=True)
        vt = VirtualTerminal(type_text("jjk") + press("enter"))
        assert Select("Fruit", FRUITS, config).prompt(vt) == "banana"

    def test_raw_prompt_returns_index(self) -> None:
        vt = VirtualTerminal(press("down", "enter"))
        assert Select("Fruit", FRUITS).raw_prompt(vt) == ListOption(1, "banana")


class TestSelectFilter:
    def test_filter_narrows_options(self) -> None:
        vt = VirtualTerminal(type_text("err") + press("down", "enter"))
        assert Select("Fruit", FRUITS).prompt(vt) == "elderberry"

    def test_filter_is_case_insensitive(self) -> None:
        vt = VirtualTerminal(type_text("DUR") + press("enter"))
        assert Select("Fruit", FRUITS).prompt(vt) == "durian"

    def test_filter_keeps_highlighted_option(self) -> None:
        vt = VirtualTerminal(press("down") + type_text("an") + press("enter"))
        assert Select("Fruit", FRUITS).prompt(vt) == "banana"

    def test_filter_shown_on_prompt_line(self) -> None:
        vt = VirtualTerminal(type_text("ch"))
        with pytest.raises(EndOfInputError):
            Select("Fruit", FRUITS).without_help_message().prompt(vt)
        assert vt.screen == ["? Fruit ch", " > cherry"]

    def test_no_match_rejects_submit(self) -> None:
        vt = VirtualTerminal(type_text("zz") + press("enter"))
        with pytest.raises(EndOfInputError):
            Select("Fruit", FRUITS).without_help_message().prompt(vt)
        assert vt.screen == ["# No option matches the filter", "? Fruit zz"]

    def test_recover_after_no_match(self) -> None:
        vt = VirtualTerminal(type_text("zz") + press("enter", "ctrl+w", "enter"))
        assert Select("Fruit", FRUITS).prompt(vt) == "apple"

    def test_custom_filter(self) -> None:
        vt = VirtualTerminal(type_text("c") + press("enter"))
        prompt = Select("Fruit", FRUITS).with_filter(
            lambda text, option, value, index: value.startswith(text)
        )
        assert prompt.prompt(vt) == "cherry"


class TestSelectRendering:
    def test_page_with_scroll_marker(self) -> None:
        vt = VirtualTerminal()
        config = PromptConfig(page_size=3)
        with pytest.raises(EndOfInputError):
            Select("Fruit", FRUITS, config).without_help_message().prompt(vt)
        assert vt.screen == ["? Fruit", " > apple", "   banana", "v  cherry"]

    def test_help_message(self) -> None:
        vt = VirtualTerminal()
        with pytest.raises(EndOfInputError):
            Select("Fruit", FRUITS).with_help_message("pick one").prompt(vt)
        assert vt.screen[-1] == "[pick one]"

    def test_formatter(self) -> None:
        vt = VirtualTerminal(press("enter"))
        Select("Fruit", FRUITS).with_formatter(
            lambda option: f"{option.index}: {option.value}"
        ).prompt(vt)
        assert vt.screen == ["? Fruit 0: apple"]


class TestSelectConfiguration:
    def test_empty_options(self) -> None:
        vt = VirtualTerminal(press("enter"))
        with pytest.raises(InvalidConfigurationError):
            Select("Fruit", []).prompt(vt)
        assert vt.start_count == 0

    def test_starting_cursor_out_of_range(self) -> None:
        vt = VirtualTerminal(press("enter"))
        with pytest.raises(InvalidConfigurationError):
            Select("Fruit", FRUITS).with_starting_cursor(5).prompt(vt)
        assert vt.output == ""


class TestSelectMultilineOptions:
    def test_option_with_newline_leaves_no_stale_rows(self) -> None:
        vt = VirtualTerminal(press("down", "enter"))
        vt.write("previous output\n")
        assert Select("Pick", ["a\nb", "c"]).prompt(vt) == "c"
        assert vt.screen == ["previous output", "? Pick c"]

    def test_option_with_newline_drawn_on_one_row(self) -> None:
        vt = VirtualTerminal()
        with pytest.raises(EndOfInputError):
            Select("Pick", ["a\nb", "c"]).without_help_message().prompt(vt)
        assert vt.screen == ["? Pick", " > a b", "   c"]
