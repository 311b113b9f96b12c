"""
passcraft.options
Option records for both generators, their defaults and normalization.

The browser extension hands over a loose settings dict (camelCase keys,
numbers that may arrive as strings); ``from_dict`` accepts that shape as well
as the snake_case field names.
"""

import math
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping, Union

MIN_PASSWORD_LENGTH = 1
MAX_PASSWORD_LENGTH = 128
DEFAULT_PASSWORD_LENGTH = 16

MIN_WORDS = 3
MAX_WORDS = 12
DEFAULT_WORD_COUNT = 4
DEFAULT_DELIMITER = "-"
MAX_DELIMITER_LENGTH = 2

# extension setting name -> field name
_ALIASES = {
    "excludeSimilar": "exclude_similar",
    "noAmbiguous": "no_ambiguous",
    "noRepeat": "no_repeat",
    "wordCount": "word_count",
    "capitalizeWords": "capitalize_words",
    "includeNumberWord": "include_number_word",
    "includeSymbolWord": "include_symbol_word",
}


def normalize_length(value: Any, minimum: int, maximum: int, fallback: int) -> int:
    """
    Floor ``value`` and clamp it into [minimum, maximum]. Anything that is not
    a finite number (None, "abc", nan, inf) yields ``fallback``.
    """
    try:
        parsed = float(value)
    except (TypeError, ValueError, OverflowError):
        return fallback
    if not math.isfinite(parsed):
        return fallback
    return min(max(math.floor(parsed), minimum), maximum)


def normalize_delimiter(value: Any) -> str:
    if not isinstance(value, str) or not value:
        return DEFAULT_DELIMITER
    return value[:MAX_DELIMITER_LENGTH]


def _collect(cls, data: Mapping[str, Any]) -> Dict[str, Any]:
    names = {f.name for f in fields(cls)}
    out: Dict[str, Any] = {}
    for key, value in data.items():
        name = _ALIASES.get(key, key)
        if name in names:
            out[name] = value
    return out


@dataclass(frozen=True)
class PasswordOptions:
    length: int = DEFAULT_PASSWORD_LENGTH
    lower: bool = True
    upper: bool = True
    digits: bool = True
    symbols: bool = False
    exclude_similar: bool = False
    no_ambiguous: bool = False
    no_repeat: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PasswordOptions":
        return cls(**_collect(cls, data))

    def normalized(self) -> "PasswordOptions":
        return replace(
            self,
            length=normalize_length(
                self.length, MIN_PASSWORD_LENGTH, MAX_PASSWORD_LENGTH, DEFAULT_PASSWORD_LENGTH
            ),
            lower=bool(self.lower),
            upper=bool(self.upper),
            digits=bool(self.digits),
            symbols=bool(self.symbols),
            exclude_similar=bool(self.exclude_similar),
            no_ambiguous=bool(self.no_ambiguous),
            no_repeat=bool(self.no_repeat),
        )


@dataclass(frozen=True)
class PassphraseOptions:
    word_count: int = DEFAULT_WORD_COUNT
    delimiter: str = DEFAULT_DELIMITER
    capitalize_words: bool = False
    include_number_word: bool = False
    include_symbol_word: bool = False
    exclude_similar: bool = False
    no_ambiguous: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PassphraseOptions":
        return cls(**_collect(cls, data))

    def normalized(self) -> "PassphraseOptions":
        return replace(
            self,
            word_count=normalize_length(self.word_count, MIN_WORDS, MAX_WORDS, DEFAULT_WORD_COUNT),
            delimiter=normalize_delimiter(self.delimiter),
            capitalize_words=bool(self.capitalize_words),
            include_number_word=bool(self.include_number_word),
            include_symbol_word=bool(self.include_symbol_word),
            exclude_similar=bool(self.exclude_similar),
            no_ambiguous=bool(self.no_ambiguous),
        )


def password_options(options: Union[PasswordOptions, Mapping[str, Any], None] = None) -> PasswordOptions:
    """Coerce a record, a mapping or None into normalized PasswordOptions."""
    if options is None:
        options = PasswordOptions()
    elif not isinstance(options, PasswordOptions):
        options = PasswordOptions.from_dict(options)
    return options.normalized()


def passphrase_options(options: Union[PassphraseOptions, Mapping[str, Any], None] = None) -> PassphraseOptions:
    if options is None:
        options = PassphraseOptions()
    elif not isinstance(options, PassphraseOptions):
        options = PassphraseOptions.from_dict(options)
    return options.normalized()
