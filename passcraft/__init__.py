"""passcraft: random passwords and passphrases from the OS secure random source."""

from loguru import logger

from .charsets import AMBIGUOUS_SYMBOLS, CHAR_SETS, SIMILAR_CHARACTERS, WORD_LIST
from .generator import generate_password
from .options import PassphraseOptions, PasswordOptions
from .passphrase import generate_passphrase

# library callers opt in with logger.enable("passcraft"); the CLI does
logger.disable("passcraft")

__all__ = [
    "AMBIGUOUS_SYMBOLS",
    "CHAR_SETS",
    "SIMILAR_CHARACTERS",
    "WORD_LIST",
    "PassphraseOptions",
    "PasswordOptions",
    "generate_passphrase",
    "generate_password",
]
