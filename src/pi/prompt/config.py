"""Prompt configuration shared by every prompt type.

Configuration is an explicit value handed to each prompt. There is no
process-wide setting; :meth:`PromptConfig.from_env` reads the environment
once when asked to.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from typing import Mapping

from pi.prompt.errors import InvalidConfigurationError
from pi.prompt.style import RenderConfig

DEFAULT_PAGE_SIZE = 7
DEFAULT_VIM_MODE = False

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class PromptConfig:
    """Page size, vim mode and render configuration of a prompt."""

    page_size: int = DEFAULT_PAGE_SIZE
    vim_mode: bool = DEFAULT_VIM_MODE
    render_config: RenderConfig = field(default_factory=RenderConfig)

    def __post_init__(self) -> None:
        if self.page_size < 1:
            raise InvalidConfigurationError(
                f"page_size must be at least 1, got {self.page_size}"
            )

    def with_page_size(self, page_size: int) -> PromptConfig:
        return replace(self, page_size=page_size)

    def with_vim_mode(self, vim_mode: bool) -> PromptConfig:
        return replace(self, vim_mode=vim_mode)

    def with_render_config(self, render_config: RenderConfig) -> PromptConfig:
        return replace(self, render_config=render_config)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> PromptConfig:
        """Build a config from ``NO_COLOR``, ``PI_PROMPT_PAGE_SIZE`` and
        ``PI_PROMPT_VIM_MODE``.
        """
        env = os.environ if environ is None else environ

        render_config = RenderConfig.empty() if env.get("NO_COLOR") else RenderConfig()

        page_size = DEFAULT_PAGE_SIZE
        raw_page_size = env.get("PI_PROMPT_PAGE_SIZE")
        if raw_page_size:
            try:
                page_size = int(raw_page_size)
            except ValueError:
                raise InvalidConfigurationError(
                    f"PI_PROMPT_PAGE_SIZE must be an integer, got {raw_page_size!r}"
                ) from None

        vim_mode = DEFAULT_VIM_MODE
        raw_vim_mode = env.get("PI_PROMPT_VIM_MODE")
        if raw_vim_mode is not None:
            value = raw_vim_mode.strip().lower()
            if value in _TRUE_VALUES:
                vim_mode = True
            elif value not in _FALSE_VALUES:
                raise InvalidConfigurationError(
                    f"PI_PROMPT_VIM_MODE must be a boolean, got {raw_vim_mode!r}"
                )

        return cls(page_size=page_size, vim_mode=vim_mode, render_config=render_config)
