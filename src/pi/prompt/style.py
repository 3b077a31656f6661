"""Colors, text attributes and the render configuration of prompts."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum, IntFlag


class Color(Enum):
    """Terminal colors, valued by their SGR foreground code."""

    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    GREY = 37
    DARK_GREY = 90
    LIGHT_RED = 91
    LIGHT_GREEN = 92
    LIGHT_YELLOW = 93
    LIGHT_BLUE = 94
    LIGHT_MAGENTA = 95
    LIGHT_CYAN = 96
    WHITE = 97

    @property
    def fg_code(self) -> int:
        return self.value

    @property
    def bg_code(self) -> int:
        return self.value + 10


class Attributes(IntFlag):
    NONE = 0
    BOLD = 1
    DIM = 2
    ITALIC = 4
    UNDERLINE = 8
    REVERSE = 16

    def sgr_codes(self) -> list[int]:
        codes = []
        for flag, code in _ATTRIBUTE_CODES:
            if self & flag:
                codes.append(code)
        return codes


_ATTRIBUTE_CODES: list[tuple[Attributes, int]] = [
    (Attributes.BOLD, 1),
    (Attributes.DIM, 2),
    (Attributes.ITALIC, 3),
    (Attributes.UNDERLINE, 4),
    (Attributes.REVERSE, 7),
]


@dataclass(frozen=True)
class StyleSheet:
    """Foreground, background and attributes applied to a piece of text."""

    fg: Color | None = None
    bg: Color | None = None
    att: Attributes = Attributes.NONE

    def with_fg(self, fg: Color) -> StyleSheet:
        return replace(self, fg=fg)

    def with_bg(self, bg: Color) -> StyleSheet:
        return replace(self, bg=bg)

    def with_attr(self, att: Attributes) -> StyleSheet:
        return replace(self, att=att)

    def is_empty(self) -> bool:
        return self.fg is None and self.bg is None and not self.att


@dataclass(frozen=True)
class Styled:
    """A fixed piece of text plus the style it is printed with."""

    content: str
    style: StyleSheet = field(default_factory=StyleSheet)

    def with_fg(self, fg: Color) -> Styled:
        return replace(self, style=self.style.with_fg(fg))


@dataclass(frozen=True)
class CalendarRenderConfig:
    prefix: Styled = field(default_factory=lambda: Styled(">", StyleSheet(fg=Color.GREEN)))
    header: StyleSheet = field(default_factory=StyleSheet)
    week_header: StyleSheet = field(default_factory=StyleSheet)
    selected_date: StyleSheet = field(
        default_factory=lambda: StyleSheet(fg=Color.BLACK, bg=Color.GREY)
    )
    today_date: StyleSheet = field(default_factory=lambda: StyleSheet(fg=Color.GREEN))
    different_month_date: StyleSheet = field(
        default_factory=lambda: StyleSheet(fg=Color.DARK_GREY)
    )
    unavailable_date: StyleSheet = field(
        default_factory=lambda: StyleSheet(fg=Color.DARK_GREY)
    )


@dataclass(frozen=True)
class RenderConfig:
    """Glyphs and styles used by the renderer.

    ``RenderConfig()`` is the colored default; :meth:`empty` keeps the glyphs
    and drops every color.
    """

    prompt_prefix: Styled = field(default_factory=lambda: Styled("?", StyleSheet(fg=Color.GREEN)))
    answered_prompt_prefix: Styled = field(
        default_factory=lambda: Styled("?", StyleSheet(fg=Color.GREEN))
    )
    prompt: StyleSheet = field(default_factory=StyleSheet)
    default_value: StyleSheet = field(default_factory=StyleSheet)
    placeholder: StyleSheet = field(default_factory=lambda: StyleSheet(fg=Color.DARK_GREY))
    help_message: StyleSheet = field(default_factory=lambda: StyleSheet(fg=Color.CYAN))
    text_input: StyleSheet = field(default_factory=StyleSheet)
    text_cursor: StyleSheet = field(
        default_factory=lambda: StyleSheet(fg=Color.BLACK, bg=Color.GREY)
    )
    error_prefix: Styled = field(default_factory=lambda: Styled("#", StyleSheet(fg=Color.RED)))
    error_message: StyleSheet = field(default_factory=lambda: StyleSheet(fg=Color.RED))
    answer: StyleSheet = field(default_factory=lambda: StyleSheet(fg=Color.CYAN))
    canceled_prompt_indicator: Styled = field(
        default_factory=lambda: Styled("<canceled>", StyleSheet(fg=Color.DARK_GREY))
    )
    password_mask: str = "*"
    highlighted_option_prefix: Styled = field(
        default_factory=lambda: Styled(">", StyleSheet(fg=Color.CYAN))
    )
    scroll_up_prefix: Styled = field(default_factory=lambda: Styled("^"))
    scroll_down_prefix: Styled = field(default_factory=lambda: Styled("v"))
    selected_checkbox: Styled = field(
        default_factory=lambda: Styled("[x]", StyleSheet(fg=Color.GREEN))
    )
    unselected_checkbox: Styled = field(default_factory=lambda: Styled("[ ]"))
    option: StyleSheet = field(default_factory=StyleSheet)
    selected_option: StyleSheet = field(default_factory=lambda: StyleSheet(fg=Color.CYAN))
    calendar: CalendarRenderConfig = field(default_factory=CalendarRenderConfig)

    @classmethod
    def default(cls) -> RenderConfig:
        return cls()

    @classmethod
    def empty(cls) -> RenderConfig:
        """Same glyphs as the default, no colors or attributes."""
        plain = StyleSheet()
        return cls(
            prompt_prefix=Styled("?"),
            answered_prompt_prefix=Styled("?"),
            placeholder=plain,
            help_message=plain,
            text_cursor=StyleSheet(att=Attributes.REVERSE),
            error_prefix=Styled("#"),
            error_message=plain,
            answer=plain,
            canceled_prompt_indicator=Styled("<canceled>"),
            highlighted_option_prefix=Styled(">"),
            selected_checkbox=Styled("[x]"),
            selected_option=plain,
            calendar=CalendarRenderConfig(
                prefix=Styled(">"),
                selected_date=StyleSheet(att=Attributes.REVERSE),
                today_date=plain,
                different_month_date=plain,
                unavailable_date=plain,
            ),
        )
