"""
passcraft.errors
Exceptions raised by the generators. Option problems are also ValueErrors,
failures of the random source or the coverage repair are RuntimeErrors.
"""

from typing import Optional


class PasscraftError(Exception):
    """Base class for every passcraft failure."""


class ConfigurationError(PasscraftError, ValueError):
    """Invalid bound passed to the random source."""


class UnavailableError(PasscraftError, RuntimeError):
    """The host has no cryptographically secure random primitive."""


class ContractViolation(PasscraftError, RuntimeError):
    """An injected random source returned something other than an in-range int."""

    def __init__(self, value, max_value: int):
        super().__init__(
            f"random source returned {value!r}, expected an integer in [0, {max_value})"
        )
        self.value = value
        self.max_value = max_value


class OptionsError(PasscraftError, ValueError):
    """Generation options that cannot produce a result."""


class EmptyCategoryError(OptionsError):
    def __init__(self, category: str):
        super().__init__(f"No {category} characters available after filtering.")
        self.category = category


class NoPoolError(OptionsError):
    def __init__(self):
        super().__init__("No characters available for generation.")


class NoCategoryEnabledError(OptionsError):
    def __init__(self):
        super().__init__("At least one character set must be enabled.")


class LengthTooShortError(OptionsError):
    def __init__(self, length: int, required: int):
        super().__init__(
            "Password length must be at least the number of enabled character sets "
            f"(got {length}, need {required})."
        )
        self.length = length
        self.required = required


class NoDigitsAvailableError(OptionsError):
    def __init__(self):
        super().__init__("No digits available for passphrase.")


class NoSymbolsAvailableError(OptionsError):
    def __init__(self):
        super().__init__("No symbols available for passphrase.")


class CoverageUnsatisfiableError(PasscraftError, RuntimeError):
    def __init__(self, category: Optional[str] = None, attempts: int = 0):
        msg = "Failed to satisfy required character categories"
        if category:
            msg += f" ({category} after {attempts} attempts)"
        super().__init__(msg + ".")
        self.category = category
        self.attempts = attempts
