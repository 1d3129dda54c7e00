# backend/tests/test_hashing.py

from budget_travel.utils.hashing import hash_string, round_half_up


def test_hash_matches_known_values():
    assert hash_string("") == 0
    assert hash_string("a") == 97
    assert hash_string("ab") == 97 * 31 + 98
    assert hash_string("hello") == 99162322


def test_hash_wraps_to_signed_32_bits_then_abs():
    # negative after wrap-around
    assert hash_string("Hello World") == 862545276
    # wraps exactly to -2**31
    assert hash_string("polygenelubricants") == 2**31


def test_hash_is_deterministic_and_non_negative():
    for text in ["Paris, France", "Tokyo", "São Paulo", "東京", "🙂 emoji"]:
        assert hash_string(text) == hash_string(text)
        assert hash_string(text) >= 0


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(3.5) == 4
    assert round_half_up(2.49) == 2
    assert round_half_up(0) == 0
