"""TypeScript type translation for host module metadata."""
from .aliases import TYPE_ALIASES
from .reserved import RESERVED_WORDS, clean_reserved
from .translator import translate, gen_generic
from .imports import ImportSession, is_imported
from .overrides import OverrideRegistry

__all__ = [
    "TYPE_ALIASES",
    "RESERVED_WORDS",
    "clean_reserved",
    "translate",
    "gen_generic",
    "ImportSession",
    "is_imported",
    "OverrideRegistry",
]
