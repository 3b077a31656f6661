"""pi-prompt: interactive terminal prompts with in-place redraw."""

# Configuration and styling
from pi.prompt.config import PromptConfig
from pi.prompt.style import Attributes, Color, RenderConfig, StyleSheet, Styled

# Errors
from pi.prompt.errors import (
    BackendError,
    ConfirmationMismatchError,
    EndOfInputError,
    InvalidConfigurationError,
    OperationCanceledError,
    OperationInterruptedError,
    PromptError,
)

# Core machinery
from pi.prompt.driver import Prompt, PromptState, run_prompt
from pi.prompt.input import Input
from pi.prompt.keys import Key, KeyModifiers, key_from_id, parse_key
from pi.prompt.pager import Page, paginate
from pi.prompt.renderer import Renderer, Token
from pi.prompt.terminal import Backend, ProcessTerminal

# Validation
from pi.prompt.validator import Invalid, Valid, Validation, Validator

# Prompt types
from pi.prompt.prompts import (
    Confirm,
    DateSelect,
    ListOption,
    MultiSelect,
    Password,
    Select,
    Text,
)

__all__ = [
    # Configuration and styling
    "Attributes",
    "Color",
    "PromptConfig",
    "RenderConfig",
    "StyleSheet",
    "Styled",
    # Errors
    "BackendError",
    "ConfirmationMismatchError",
    "EndOfInputError",
    "InvalidConfigurationError",
    "OperationCanceledError",
    "OperationInterruptedError",
    "PromptError",
    # Core
    "Backend",
    "Input",
    "Key",
    "KeyModifiers",
    "Page",
    "ProcessTerminal",
    "Prompt",
    "PromptState",
    "Renderer",
    "Token",
    "key_from_id",
    "paginate",
    "parse_key",
    "run_prompt",
    # Validation
    "Invalid",
    "Valid",
    "Validation",
    "Validator",
    # Prompt types
    "Confirm",
    "DateSelect",
    "ListOption",
    "MultiSelect",
    "Password",
    "Select",
    "Text",
]
