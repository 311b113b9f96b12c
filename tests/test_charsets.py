import string
from types import MappingProxyType

import pytest

from passcraft import charsets
from passcraft.charsets import (
    AMBIGUOUS_SYMBOLS,
    CHAR_SETS,
    SIMILAR_CHARACTERS,
    WORD_LIST,
    build_categories,
    build_pool,
    filter_characters,
)
from passcraft.errors import EmptyCategoryError, NoPoolError
from passcraft.options import PasswordOptions


def test_categories_in_fixed_order():
    cats = build_categories(PasswordOptions(symbols=True, lower=False))
    assert [c.key for c in cats] == ["upper", "digits", "symbols"]
    assert cats[0].chars == string.ascii_uppercase

def test_symbols_are_ascii_punctuation():
    assert CHAR_SETS["symbols"] == string.punctuation
    assert AMBIGUOUS_SYMBOLS <= set(CHAR_SETS["symbols"])

def test_exclude_similar_applies_to_every_category():
    assert filter_characters("digits", exclude_similar=True) == "34679"
    lower = filter_characters("lower", exclude_similar=True)
    upper = filter_characters("upper", exclude_similar=True)
    assert "o" not in lower and "l" not in lower
    assert not set("OISZB") & set(upper)
    assert len(lower) == 24 and len(upper) == 21

def test_no_ambiguous_only_touches_symbols():
    assert filter_characters("lower", no_ambiguous=True) == string.ascii_lowercase
    assert filter_characters("symbols", no_ambiguous=True) == "!#$%&*+-=?@^_|"

def test_empty_category(monkeypatch):
    monkeypatch.setattr(charsets, "CHAR_SETS", MappingProxyType(dict(CHAR_SETS, digits="018")))
    with pytest.raises(EmptyCategoryError) as info:
        build_categories(PasswordOptions(exclude_similar=True))
    assert info.value.category == "digits"
    assert "digits" in str(info.value)

def test_pool_is_union():
    cats = build_categories(PasswordOptions(upper=False))
    assert build_pool(cats) == string.ascii_lowercase + string.digits
    with pytest.raises(NoPoolError):
        build_pool([])

def test_constant_tables_are_read_only():
    with pytest.raises(TypeError):
        CHAR_SETS["lower"] = "abc"
    assert isinstance(SIMILAR_CHARACTERS, frozenset)
    assert isinstance(WORD_LIST, tuple)

def test_word_list():
    assert len(WORD_LIST) >= 60
    assert len(set(WORD_LIST)) == len(WORD_LIST)
    assert all(w.isalpha() and w.islower() for w in WORD_LIST)
