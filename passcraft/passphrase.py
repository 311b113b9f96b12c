"""
passcraft.passphrase
Word-based passphrases drawn from WORD_LIST, with optional capitalization and
one injected digit and/or symbol token.
"""

from typing import List, Mapping, Optional, Set, Union

from loguru import logger

from .charsets import WORD_LIST, filter_characters
from .errors import NoDigitsAvailableError, NoSymbolsAvailableError
from .options import PassphraseOptions, passphrase_options
from .random_source import RandomIndex, resolve


def _capitalize(word: str) -> str:
    # str.capitalize() would also lowercase the rest
    return word[:1].upper() + word[1:]


def generate_passphrase(
    options: Union[PassphraseOptions, Mapping, None] = None,
    random_index: Optional[RandomIndex] = None,
) -> str:
    """
    Return ``word_count`` tokens joined by ``delimiter``.

    Words are drawn independently, so the same word may appear twice. The digit
    and symbol tokens each replace one word; the symbol goes to a different
    slot than the digit.
    """
    opts = passphrase_options(options)
    draw = resolve(random_index)

    words: List[str] = []
    for _ in range(opts.word_count):
        word = WORD_LIST[draw(len(WORD_LIST))]
        words.append(_capitalize(word) if opts.capitalize_words else word)

    occupied: Set[int] = set()
    if opts.include_number_word:
        digits = filter_characters("digits", opts.exclude_similar, opts.no_ambiguous)
        if not digits:
            raise NoDigitsAvailableError()
        index = draw(len(words))
        words[index] = digits[draw(len(digits))]
        occupied.add(index)

    if opts.include_symbol_word:
        symbols = filter_characters("symbols", opts.exclude_similar, opts.no_ambiguous)
        if not symbols:
            raise NoSymbolsAvailableError()
        index = draw(len(words))
        while index in occupied and len(occupied) < len(words):
            index = draw(len(words))
        words[index] = symbols[draw(len(symbols))]
        occupied.add(index)

    logger.debug("generated passphrase of {} tokens ({} injected)", len(words), len(occupied))
    return opts.delimiter.join(words)
