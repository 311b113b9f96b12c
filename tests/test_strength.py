import math

import pytest

from passcraft.errors import LengthTooShortError, NoCategoryEnabledError
from passcraft.strength import passphrase_entropy, password_entropy, strength_label


def test_password_entropy_from_pool():
    assert password_entropy() == pytest.approx(16 * math.log2(62))
    assert password_entropy({"length": 10, "upper": False, "digits": False}) == pytest.approx(10 * math.log2(26))

def test_entropy_increases_with_length():
    assert password_entropy({"length": 32}) > password_entropy({"length": 8})

def test_password_entropy_invalid_options():
    with pytest.raises(NoCategoryEnabledError):
        password_entropy({"lower": False, "upper": False, "digits": False})
    with pytest.raises(LengthTooShortError):
        password_entropy({"length": 2})

def test_passphrase_entropy():
    assert passphrase_entropy() == pytest.approx(4 * math.log2(80))
    with_number = passphrase_entropy({"includeNumberWord": True})
    assert with_number == pytest.approx(math.log2(4) + math.log2(10) + 3 * math.log2(80))
    both = passphrase_entropy({"includeNumberWord": True, "includeSymbolWord": True, "noAmbiguous": True})
    assert both == pytest.approx(math.log2(4) + math.log2(10) + math.log2(3) + math.log2(14) + 2 * math.log2(80))

def test_labels():
    assert strength_label(10) == "Very Weak"
    assert strength_label(30) == "Weak"
    assert strength_label(50) == "Fair"
    assert strength_label(70) == "Strong"
    assert strength_label(95.3) == "Excellent"
