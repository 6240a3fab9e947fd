import base64
import hashlib

import pytest

from kuekit import hashing
from kuekit.hashing import (
    ALPHANUMS,
    LETTER_RUNES,
    NUMBERS,
    check_password_hash,
    compare_bcrypt,
    contains,
    generate_16_byte_hash,
    generate_api_key,
    generate_code,
    generate_otp_number,
    generate_product_code,
    generate_rand_string,
    hash_password,
    random_alphanum_string,
    random_number_string,
    to_bcrypt,
)


@pytest.fixture
def fast_bcrypt(monkeypatch):
    monkeypatch.setattr(hashing, "TO_BCRYPT_COST", 4)
    monkeypatch.setattr(hashing, "HASH_PASSWORD_COST", 4)


def test_to_bcrypt_round_trip(fast_bcrypt):
    hashed = to_bcrypt("password")
    assert hashed.startswith("$2")
    assert compare_bcrypt(hashed, "password") is True
    assert compare_bcrypt(hashed, "secret") is False


def test_to_bcrypt_too_long_returns_empty(fast_bcrypt):
    assert to_bcrypt("x" * 73) == ""


def test_compare_bcrypt_with_invalid_hash():
    assert compare_bcrypt("not-a-hash", "password") is False


def test_hash_password_round_trip(fast_bcrypt):
    password = "password"
    hashed = hash_password(password)
    assert check_password_hash(password, hashed) is True
    assert check_password_hash("secret", hashed) is False


def test_hash_password_too_long_raises(fast_bcrypt):
    with pytest.raises(ValueError):
        hash_password("x" * 73)


def test_generate_16_byte_hash():
    salt = generate_16_byte_hash("abc")
    raw = base64.b64decode(salt)
    assert len(salt) == 24
    assert len(raw) == 16
    assert hashlib.sha256(b"abc").digest().startswith(raw)
    assert generate_16_byte_hash("abc") == salt
    assert generate_16_byte_hash("abd") != salt


@pytest.mark.parametrize("n", [0, 1, 16, 64])
def test_random_alphanum_string(n):
    result = random_alphanum_string(n)
    assert len(result) == n
    assert set(result) <= set(ALPHANUMS)


@pytest.mark.parametrize("n", [0, 5, 30])
def test_random_number_string(n):
    result = random_number_string(n)
    assert len(result) == n
    assert set(result) <= set(NUMBERS)


def test_generate_otp_number():
    otp = generate_otp_number()
    assert len(otp) == 6
    assert otp.isdigit()


def test_contains():
    assert contains(["a", "b"], "b") is True
    assert contains(["a", "b"], "c") is False
    assert contains([], "a") is False


def test_generate_rand_string():
    result = generate_rand_string(40)
    assert len(result) == 40
    assert set(result) <= set(LETTER_RUNES)
    assert "0" not in result


def test_generate_rand_string_negative_raises():
    with pytest.raises(ValueError):
        generate_rand_string(-1)


def test_generate_code():
    assert generate_code("KUE", 2024, 7) == "KUE-20240000007"
    assert generate_code("KUE", 2024, 12345).endswith("00012345")


def test_generate_product_code():
    assert generate_product_code("PRD", 2024, 7) == "PRD-20240007"
    assert generate_product_code("PRD", 2024, 7).startswith("PRD-2024")


def test_generate_api_key():
    first = generate_api_key()
    second = generate_api_key()
    assert len(base64.b64decode(first)) == 32
    assert len(first) == 44
    assert first != second