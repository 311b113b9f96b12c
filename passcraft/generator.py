"""
passcraft.generator
Secure password generator.

The buffer is filled left to right from the union pool, then a coverage pass
makes sure every enabled category is present. The pass tracks how many
characters each category holds, so replacing a character never removes the
last representative of another category.
"""

from typing import Dict, List, Mapping, Optional, Union

from loguru import logger

from .charsets import Category, build_categories, build_pool
from .errors import CoverageUnsatisfiableError, LengthTooShortError, NoCategoryEnabledError
from .options import PasswordOptions, password_options
from .random_source import RandomIndex, resolve

COVERAGE_ATTEMPTS = 200


def _fill(pool: str, length: int, no_repeat: bool, draw: RandomIndex) -> List[str]:
    # a one-character pool cannot avoid repeats, so the rule does not apply
    avoid_repeat = no_repeat and len(pool) > 1
    chars: List[str] = []
    while len(chars) < length:
        candidate = pool[draw(len(pool))]
        if avoid_repeat and chars and candidate == chars[-1]:
            continue
        chars.append(candidate)
    return chars


def _clashes(chars: List[str], position: int, candidate: str) -> bool:
    if position > 0 and chars[position - 1] == candidate:
        return True
    if position < len(chars) - 1 and chars[position + 1] == candidate:
        return True
    return False


def _ensure_coverage(chars: List[str], categories: List[Category], no_repeat: bool, draw: RandomIndex) -> None:
    owner: Dict[str, int] = {}
    for i, category in enumerate(categories):
        for c in category.chars:
            owner[c] = i
    counts = [0] * len(categories)
    for c in chars:
        counts[owner[c]] += 1

    for i, category in enumerate(categories):
        if counts[i]:
            continue
        for _ in range(COVERAGE_ATTEMPTS):
            position = draw(len(chars))
            current = owner[chars[position]]
            if counts[current] <= 1:
                continue
            candidate = category.chars[draw(len(category.chars))]
            if no_repeat and _clashes(chars, position, candidate):
                continue
            chars[position] = candidate
            counts[current] -= 1
            counts[i] += 1
            logger.debug("coverage: placed {} at position {}", category.key, position)
            break
        else:
            raise CoverageUnsatisfiableError(category.key, COVERAGE_ATTEMPTS)


def generate_password(
    options: Union[PasswordOptions, Mapping, None] = None,
    random_index: Optional[RandomIndex] = None,
) -> str:
    """
    Generate a password of exactly ``options.length`` characters (after
    clamping), drawn only from the enabled, filtered categories.

    ``random_index`` replaces the secure source for every draw of this call.
    Raises NoCategoryEnabledError, EmptyCategoryError, LengthTooShortError or
    CoverageUnsatisfiableError for configurations that cannot be honoured.
    """
    opts = password_options(options)
    draw = resolve(random_index)

    categories = build_categories(opts)
    if not categories:
        raise NoCategoryEnabledError()
    if opts.length < len(categories):
        raise LengthTooShortError(opts.length, len(categories))
    pool = build_pool(categories)

    chars = _fill(pool, opts.length, opts.no_repeat, draw)
    _ensure_coverage(chars, categories, opts.no_repeat and len(pool) > 1, draw)
    logger.debug("generated password of length {} from a pool of {}", len(chars), len(pool))
    return "".join(chars)
