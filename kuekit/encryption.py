"""AES-CBC encryption keyed by the ENCRYPT_KEY and ENCRYPT_IV environment variables."""

from __future__ import annotations

import base64
import os

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

BLOCK_SIZE = 16
_KEY_SIZES = (16, 24, 32)


def _key_and_iv() -> tuple[bytes, bytes]:
    return (
        os.environ.get("ENCRYPT_KEY", "").encode(),
        os.environ.get("ENCRYPT_IV", "").encode(),
    )


def _cipher(key: bytes, iv: bytes) -> Cipher:
    if len(key) not in _KEY_SIZES:
        raise ValueError(f"crypto/aes: invalid key size {len(key)}")
    if len(iv) != BLOCK_SIZE:
        raise ValueError("cipher: IV length must equal block size")
    return Cipher(algorithms.AES(key), modes.CBC(iv))


def _pad(data: bytes) -> bytes:
    remainder = len(data) % BLOCK_SIZE
    if remainder == 0:
        return data
    extend = BLOCK_SIZE - remainder
    return data + bytes([extend]) * extend


def encrypt(plaintext: str) -> str:
    """Encrypt text with AES-CBC and return it base64 encoded.

    Text whose length is not a multiple of the block size is padded with
    PKCS#5 bytes; text that already fills whole blocks is not padded.
    """
    key, iv = _key_and_iv()
    block = _pad(plaintext.encode())
    encryptor = _cipher(key, iv).encryptor()
    ciphertext = encryptor.update(block) + encryptor.finalize()
    return base64.b64encode(ciphertext).decode()


def decrypt(ciphertext: str) -> str:
    """Decode base64, decrypt with AES-CBC and strip the padding."""
    key, iv = _key_and_iv()
    raw = base64.b64decode(ciphertext, validate=True)
    cipher = _cipher(key, iv)
    if len(raw) % BLOCK_SIZE != 0:
        raise ValueError("block size cant be zero")
    decryptor = cipher.decryptor()
    plain = decryptor.update(raw) + decryptor.finalize()
    return pkcs5_unpad(plain).decode("utf-8", errors="replace")


def pkcs5_unpad(data: bytes) -> bytes:
    """Remove as many trailing bytes as the value of the last byte says."""
    if not data:
        raise ValueError("cannot unpad empty data")
    count = data[-1]
    if count > len(data):
        raise ValueError(f"padding length {count} exceeds data length {len(data)}")
    return data[: len(data) - count]