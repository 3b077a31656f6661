"""Concrete prompt types."""

from pi.prompt.prompts.confirm import Confirm
from pi.prompt.prompts.date_select import DateSelect
from pi.prompt.prompts.multiselect import MultiSelect
from pi.prompt.prompts.options import ListOption, default_filter
from pi.prompt.prompts.password import DisplayMode, Password
from pi.prompt.prompts.select import Select
from pi.prompt.prompts.text import Text

__all__ = [
    "Confirm",
    "DateSelect",
    "DisplayMode",
    "ListOption",
    "MultiSelect",
    "Password",
    "Select",
    "Text",
    "default_filter",
]
