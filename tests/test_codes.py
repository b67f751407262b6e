from matchroom.game.codes import CODE_ALPHABET, generate_code, is_valid_code, normalize_code


def test_generate_code_format():
    for _ in range(200):
        code = generate_code()
        assert len(code) == 6
        assert is_valid_code(code)
        assert all(ch in CODE_ALPHABET for ch in code)


def test_generate_code_is_random():
    codes = {generate_code() for _ in range(50)}
    # 50 draws from 36^6 codes; a repeat here means the source is broken.
    assert len(codes) == 50


def test_alphabet_is_uppercase_alphanumeric():
    assert len(CODE_ALPHABET) == 36
    assert CODE_ALPHABET.isalnum()
    assert CODE_ALPHABET == CODE_ALPHABET.upper()


def test_normalize_code():
    assert normalize_code("  ab12cd ") == "AB12CD"
    assert normalize_code(None) == ""


def test_is_valid_code_rejects_bad_input():
    assert not is_valid_code("")
    assert not is_valid_code("AB12C")
    assert not is_valid_code("AB12CDE")
    assert not is_valid_code("ab12cd")
    assert not is_valid_code("AB-2CD")
