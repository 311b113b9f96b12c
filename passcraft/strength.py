"""
passcraft.strength

Closed-form entropy for a generator configuration (not for an arbitrary
password): the number of bits an attacker who knows the options still has to
guess.
- password_entropy(options): length * log2(pool size)
- passphrase_entropy(options): words * log2(len(WORD_LIST)) plus the injected
  digit/symbol choices
- strength_label(bits): Very Weak .. Excellent
"""

import math
from typing import Dict

from .charsets import WORD_LIST, build_categories, build_pool, filter_characters
from .errors import LengthTooShortError, NoCategoryEnabledError, NoDigitsAvailableError, NoSymbolsAvailableError
from .options import password_options, passphrase_options


def password_entropy(options=None) -> float:
    opts = password_options(options)
    categories = build_categories(opts)
    if not categories:
        raise NoCategoryEnabledError()
    if opts.length < len(categories):
        raise LengthTooShortError(opts.length, len(categories))
    pool = build_pool(categories)
    return opts.length * math.log2(len(pool))


def passphrase_entropy(options=None) -> float:
    opts = passphrase_options(options)
    slots = opts.word_count
    bits = 0.0
    # each injected token costs one word and adds the slot + character choice
    if opts.include_number_word:
        digits = filter_characters("digits", opts.exclude_similar, opts.no_ambiguous)
        if not digits:
            raise NoDigitsAvailableError()
        bits += math.log2(slots) + math.log2(len(digits))
        slots -= 1
    if opts.include_symbol_word:
        symbols = filter_characters("symbols", opts.exclude_similar, opts.no_ambiguous)
        if not symbols:
            raise NoSymbolsAvailableError()
        bits += math.log2(slots) + math.log2(len(symbols))
        slots -= 1
    return bits + slots * math.log2(len(WORD_LIST))


def strength_label(bits: float) -> str:
    if bits < 28:
        return "Very Weak"
    elif bits < 36:
        return "Weak"
    elif bits < 60:
        return "Fair"
    elif bits < 80:
        return "Strong"
    return "Excellent"


def describe(bits: float) -> Dict:
    return {"entropy": bits, "label": strength_label(bits)}
