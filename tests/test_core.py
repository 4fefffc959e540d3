import pytest

from passwordgenerator import core
from passwordgenerator.core import (
    DIGIT_CHARS,
    LOWERCASE_CHARS,
    SPECIAL_CHARS,
    UPPERCASE_CHARS,
    CharacterClass,
    GenerationRequest,
    InvalidRequest,
    StrengthLevel,
    build_alphabet,
    generate,
    generate_password,
    parse_length,
    save_password,
    score_strength,
    strength_level,
)


def test_build_alphabet_all_classes_in_fixed_order():
    alphabet = build_alphabet(list(CharacterClass))
    assert alphabet == UPPERCASE_CHARS + LOWERCASE_CHARS + DIGIT_CHARS + SPECIAL_CHARS


def test_build_alphabet_ignores_argument_order():
    alphabet = build_alphabet([CharacterClass.SPECIAL, CharacterClass.DIGIT, CharacterClass.UPPERCASE])
    assert alphabet == UPPERCASE_CHARS + DIGIT_CHARS + SPECIAL_CHARS


def test_build_alphabet_empty_raises():
    with pytest.raises(InvalidRequest):
        build_alphabet([])


@pytest.mark.parametrize("length", [1, 8, 12, 64])
def test_generate_exact_length_from_alphabet(length):
    alphabet = build_alphabet([CharacterClass.DIGIT, CharacterClass.SPECIAL])
    pwd = generate(length, alphabet)
    assert len(pwd) == length
    assert set(pwd) <= set(alphabet)


@pytest.mark.parametrize("length", [0, -5])
def test_generate_non_positive_length_raises(length):
    with pytest.raises(InvalidRequest):
        generate(length, LOWERCASE_CHARS)


def test_generate_single_character_alphabet():
    assert generate(5, "x") == "xxxxx"


def test_generate_reaches_every_alphabet_character():
    assert set(generate(2000, DIGIT_CHARS)) == set(DIGIT_CHARS)


def test_generate_draws_last_index(monkeypatch):
    drawn_bounds = []

    def last_index(bound):
        drawn_bounds.append(bound)
        return bound - 1

    monkeypatch.setattr(core.secrets, "randbelow", last_index)
    assert generate(3, DIGIT_CHARS) == "999"
    assert drawn_bounds == [len(DIGIT_CHARS)] * 3


def test_generate_draws_first_index(monkeypatch):
    monkeypatch.setattr(core.secrets, "randbelow", lambda bound: 0)
    assert generate(4, UPPERCASE_CHARS) == "AAAA"


def test_generate_password_uses_enabled_classes_only():
    request = GenerationRequest.from_flags(200, uppercase=False, lowercase=True, digits=False, special=False)
    pwd = generate_password(request)
    assert len(pwd) == 200
    assert set(pwd) <= set(LOWERCASE_CHARS)


def test_generate_password_no_classes_raises():
    request = GenerationRequest.from_flags(10, False, False, False, False)
    with pytest.raises(InvalidRequest, match="At least one character type"):
        generate_password(request)


def test_generate_password_zero_length_raises():
    with pytest.raises(InvalidRequest):
        generate_password(GenerationRequest.from_flags(0))


def test_invalid_request_is_value_error():
    assert issubclass(InvalidRequest, ValueError)


def test_parse_length():
    assert parse_length(" 12 ") == 12
    assert parse_length("+5") == 5
    with pytest.raises(InvalidRequest, match="valid password length"):
        parse_length("twelve")
    with pytest.raises(InvalidRequest):
        parse_length("")


@pytest.mark.parametrize(
    "password, expected",
    [
        ("", 0),
        ("aaaaaaaa", 38),
        ("aaaaaaaaaaaa", 62),
        ("Ab1!", 4),
        ("       ~~", 30),
    ],
)
def test_score_strength(password, expected):
    assert score_strength(password) == expected


def test_score_strength_is_capped():
    assert score_strength("Ab1!" * 40) == 100


def test_score_strength_monotonic_in_length():
    scores = [score_strength("a" * n) for n in range(0, 120)]
    assert scores == sorted(scores)
    assert all(0 <= s <= 100 for s in scores)


@pytest.mark.parametrize(
    "score, level",
    [(0, StrengthLevel.WEAK), (49, StrengthLevel.WEAK), (50, StrengthLevel.MEDIUM),
     (74, StrengthLevel.MEDIUM), (75, StrengthLevel.STRONG), (100, StrengthLevel.STRONG)],
)
def test_strength_level(score, level):
    assert strength_level(score) is level


def test_save_password_writes_verbatim(tmp_path):
    target = tmp_path / "pwd.txt"
    save_password("p@ss\"word", str(target))
    assert target.read_bytes() == b'p@ss"word'

    save_password("second", target)
    assert target.read_text(encoding="utf-8") == "second"


def test_save_password_surfaces_os_error(tmp_path):
    with pytest.raises(OSError):
        save_password("secret", tmp_path / "missing-dir" / "pwd.txt")


@pytest.mark.parametrize("text", ["1_000", "١٢", "12.0", "1e3", "+", "- 5"])
def test_parse_length_rejects_non_integer_text(text):
    with pytest.raises(InvalidRequest, match="valid password length"):
        parse_length(text)
