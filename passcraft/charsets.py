"""
passcraft.charsets
Constant alphabets, exclusion sets and the word list, plus the pool builder
that turns enabled categories into filtered character strings.
"""

import string
from types import MappingProxyType
from typing import List, NamedTuple

from loguru import logger

from .errors import EmptyCategoryError, NoPoolError

CATEGORY_ORDER = ("lower", "upper", "digits", "symbols")

CHAR_SETS = MappingProxyType({
    "lower": string.ascii_lowercase,
    "upper": string.ascii_uppercase,
    "digits": string.digits,
    "symbols": string.punctuation,  # printable ASCII punctuation
})

# look-alikes are removed from every category, not only letters
SIMILAR_CHARACTERS = frozenset("0Oo1lI5S2Z8B")
AMBIGUOUS_SYMBOLS = frozenset("{}[]()/\\'\"`~,;:.<>")

WORD_LIST = (
    "acorn", "amber", "anchor", "apex", "aster", "aurora", "badge", "bamboo",
    "beacon", "binary", "blossom", "breeze", "canyon", "cascade", "cedar", "citadel",
    "cobalt", "coral", "crystal", "dawn", "delta", "dune", "ember", "falcon",
    "fable", "flint", "forest", "galaxy", "garnet", "glimmer", "grove", "harbor",
    "harvest", "horizon", "hydra", "inspire", "iris", "island", "jade", "journey",
    "juniper", "keystone", "lagoon", "lantern", "legend", "lilac", "meadow", "meteor",
    "nebula", "nectar", "onyx", "oracle", "oxygen", "pebble", "pinnacle", "plume",
    "prism", "quartz", "quill", "raven", "ripple", "saffron", "solstice", "spruce",
    "stellar", "summit", "sunrise", "tidal", "topaz", "umbra", "valor", "velvet",
    "vertex", "violet", "voyage", "willow", "wisdom", "xenon", "yonder", "zenith",
)


class Category(NamedTuple):
    key: str
    chars: str


def filter_characters(key: str, exclude_similar: bool = False, no_ambiguous: bool = False) -> str:
    """Return the base alphabet of ``key`` with the requested exclusions applied."""
    chars = CHAR_SETS[key]
    if exclude_similar:
        chars = "".join(c for c in chars if c not in SIMILAR_CHARACTERS)
    if no_ambiguous and key == "symbols":
        chars = "".join(c for c in chars if c not in AMBIGUOUS_SYMBOLS)
    return chars


def build_categories(options) -> List[Category]:
    """
    One Category per enabled flag of ``options``, in CATEGORY_ORDER.
    Raises EmptyCategoryError when filtering empties an enabled category.
    """
    categories = []
    for key in CATEGORY_ORDER:
        if not getattr(options, key):
            continue
        chars = filter_characters(key, options.exclude_similar, options.no_ambiguous)
        if not chars:
            raise EmptyCategoryError(key)
        categories.append(Category(key, chars))
    logger.debug(
        "categories: {}",
        ", ".join(f"{c.key}={len(c.chars)}" for c in categories) or "none",
    )
    return categories


def build_pool(categories: List[Category]) -> str:
    pool = "".join(c.chars for c in categories)
    if not pool:
        raise NoPoolError()
    return pool
