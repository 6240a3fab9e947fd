"""Password hashing, short hashes, random strings and code generation."""

from __future__ import annotations

import base64
import hashlib
import random
import secrets

import bcrypt

NUMBERS = "12345678901234567890"
ALPHANUMS = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ12345678901234567890"
LETTER_RUNES = "123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"

TO_BCRYPT_COST = 18
HASH_PASSWORD_COST = 14
_BCRYPT_MAX_BYTES = 72


def _bcrypt_hash(plain: str, cost: int) -> str:
    data = plain.encode()
    if len(data) > _BCRYPT_MAX_BYTES:
        raise ValueError("bcrypt: password length exceeds 72 bytes")
    return bcrypt.hashpw(data, bcrypt.gensalt(rounds=cost)).decode()


def _bcrypt_matches(hashed: str, plain: str) -> bool:
    try:
        return bcrypt.checkpw(plain.encode(), hashed.encode())
    except ValueError:
        return False


def to_bcrypt(plain_text: str) -> str:
    """Hash text with bcrypt at TO_BCRYPT_COST; "" when it cannot be hashed."""
    try:
        return _bcrypt_hash(plain_text, TO_BCRYPT_COST)
    except ValueError:
        return ""


def compare_bcrypt(hashed: str, plain: str) -> bool:
    """Return True when plain matches the bcrypt hash."""
    return _bcrypt_matches(hashed, plain)


def hash_password(password: str) -> str:
    """Hash a password with bcrypt at HASH_PASSWORD_COST.

    Raises ValueError when the password is longer than 72 bytes.
    """
    return _bcrypt_hash(password, HASH_PASSWORD_COST)


def check_password_hash(password: str, hashed: str) -> bool:
    """Return True when password matches the bcrypt hash."""
    return _bcrypt_matches(hashed, password)


def generate_16_byte_hash(text: str) -> str:
    """Return the first 16 bytes of the SHA-256 of text, base64 encoded."""
    digest = hashlib.sha256(text.encode()).digest()
    return base64.b64encode(digest[:16]).decode()


def _random_from(alphabet: str, n: int) -> str:
    return "".join(random.choices(alphabet, k=max(n, 0)))


def random_alphanum_string(n: int) -> str:
    """Return n random letters and digits."""
    return _random_from(ALPHANUMS, n)


def random_number_string(n: int) -> str:
    """Return n random digits."""
    return _random_from(NUMBERS, n)


def generate_otp_number() -> str:
    """Return a random six-digit one-time code."""
    return random_number_string(6)


def contains(items: list[str], item: str) -> bool:
    """Return True when item is in items."""
    return item in items


def generate_rand_string(length: int) -> str:
    """Return length random characters from digits 1-9 and ASCII letters."""
    if length < 0:
        raise ValueError("length must not be negative")
    return _random_from(LETTER_RUNES, length)


def generate_code(code: str, year: int, counter: int) -> str:
    """Return "<code>-<year>000<counter as 4 digits>"."""
    return f"{code}-{year}000{counter:04d}"


def generate_product_code(code: str, year: int, counter: int) -> str:
    """Return "<code>-<year><counter as 4 digits>"."""
    return f"{code}-{year}{counter:04d}"


def generate_api_key() -> str:
    """Return a base64 SHA-256 digest of 32 random bytes."""
    digest = hashlib.sha256(secrets.token_bytes(32)).digest()
    return base64.b64encode(digest).decode()