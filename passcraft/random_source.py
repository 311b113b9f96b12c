"""
passcraft.random_source
Uniform random indices from the OS CSPRNG, without modulo bias.

Every generator draws through a single ``RandomIndex`` callable. By default it
is ``random_index``; tests pass their own callable (see ``ReplayRandom``) which
``resolve`` wraps so that a misbehaving override cannot leak an out-of-range
index into the output.
"""

import os
from secrets import SystemRandom
from typing import Callable, Iterable, Optional

from .errors import ConfigurationError, ContractViolation, UnavailableError

RandomIndex = Callable[[int], int]

_UINT32_RANGE = 1 << 32


def _system_random() -> SystemRandom:
    # SystemRandom reads os.urandom, which raises NotImplementedError when the
    # platform has no secure source.
    try:
        os.urandom(4)
    except NotImplementedError as e:
        raise UnavailableError("Secure random generator is not available.") from e
    return SystemRandom()


_sysrand = _system_random()


def _check_bound(max_value) -> None:
    if isinstance(max_value, bool) or not isinstance(max_value, int):
        raise ConfigurationError(f"Random index range must be an integer, got {max_value!r}.")
    if max_value <= 0:
        raise ConfigurationError("Random index range must be positive.")
    if max_value > _UINT32_RANGE:
        raise ConfigurationError(f"Random index range must not exceed 2**32, got {max_value}.")


def random_index(max_value: int) -> int:
    """
    Return a uniformly distributed integer in [0, max_value).

    A 32-bit value is drawn and rejected when it falls in the incomplete last
    block of size max_value, so ``value % max_value`` carries no bias.
    """
    _check_bound(max_value)
    upper_bound = (_UINT32_RANGE // max_value) * max_value
    while True:
        value = _sysrand.getrandbits(32)
        if value < upper_bound:
            return value % max_value


def resolve(override: Optional[RandomIndex] = None) -> RandomIndex:
    """Return the default source, or ``override`` wrapped with range checks."""
    if override is None:
        return random_index

    def checked(max_value: int) -> int:
        _check_bound(max_value)
        value = override(max_value)
        if isinstance(value, bool) or not isinstance(value, int):
            raise ContractViolation(value, max_value)
        if not 0 <= value < max_value:
            raise ContractViolation(value, max_value)
        return value

    return checked


class ReplayRandom:
    """
    Replays a fixed sequence of indices, reduced modulo the requested range.
    Once the sequence is exhausted every call returns ``fallback % max``.
    """

    def __init__(self, values: Iterable[int], fallback: int = 0):
        self.values = list(values)
        self.fallback = fallback
        self.consumed = 0

    def __call__(self, max_value: int) -> int:
        if self.consumed < len(self.values):
            value = self.values[self.consumed]
            self.consumed += 1
        else:
            value = self.fallback
        return value % max_value
