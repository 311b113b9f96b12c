from passcraft.options import (
    PassphraseOptions,
    PasswordOptions,
    normalize_delimiter,
    normalize_length,
    passphrase_options,
    password_options,
)


def test_normalize_length():
    assert normalize_length(12, 1, 128, 16) == 12
    assert normalize_length("12", 1, 128, 16) == 12
    assert normalize_length(12.9, 1, 128, 16) == 12
    assert normalize_length(500, 1, 128, 16) == 128
    assert normalize_length(0, 1, 128, 16) == 1
    for bad in (None, "abc", float("nan"), float("inf"), [], 10**400):
        assert normalize_length(bad, 1, 128, 16) == 16

def test_normalize_delimiter():
    assert normalize_delimiter(".") == "."
    assert normalize_delimiter("abc") == "ab"
    assert normalize_delimiter("") == "-"
    assert normalize_delimiter(5) == "-"
    assert normalize_delimiter(None) == "-"

def test_from_dict_accepts_extension_keys():
    opts = PasswordOptions.from_dict({"length": 20, "excludeSimilar": True, "noRepeat": 1, "passphraseMode": True})
    assert opts.length == 20
    assert opts.exclude_similar is True
    assert opts.no_repeat == 1
    assert opts.normalized().no_repeat is True

def test_defaults():
    pw = password_options()
    assert (pw.length, pw.lower, pw.upper, pw.digits, pw.symbols) == (16, True, True, True, False)
    pp = passphrase_options()
    assert (pp.word_count, pp.delimiter, pp.capitalize_words) == (4, "-", False)

def test_passphrase_normalization():
    pp = passphrase_options({"wordCount": "50", "delimiter": "", "includeNumberWord": "yes"})
    assert pp.word_count == 12
    assert pp.delimiter == "-"
    assert pp.include_number_word is True
    assert passphrase_options(PassphraseOptions(word_count=1)).word_count == 3
