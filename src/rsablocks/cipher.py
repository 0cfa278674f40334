"""Provides block-wise textbook RSA encryption and CRT-accelerated decryption.

Blocks are processed independently and in order. Decryption uses Garner's formula with the precomputed CRT
components of the private key instead of a full exponentiation by d.

Typical usage example:

    pub, pk = make_public_key(43, 59, 13), make_private_key(43, 59, 13)
    c = encrypt_message("help", pub)
    r = decrypt_message(c, pk)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from collections.abc import Iterable
import warnings

from rsablocks import codec
from rsablocks.keys import PrivateKey
from rsablocks.keys import PublicKey
from rsablocks.maths import fast_modular_exponentiation


def encrypt(blocks: Iterable[int], key: PublicKey) -> list[int]:
    """Encrypts each block with the public key.

    Args:
        blocks: Plaintext blocks, each in range [0, n-1].
        key: The public key.

    Returns:
        The ciphertext blocks, in input order.
    """
    return [fast_modular_exponentiation(block, key.e, key.n) for block in blocks]


def _garner(block: int, key: PrivateKey) -> int:
    """Performs core RSA decryption of a single block accelerated with CRT."""
    m_1 = fast_modular_exponentiation(block, key.dp, key.p)
    m_2 = fast_modular_exponentiation(block, key.dq, key.q)
    if m_1 >= m_2:
        h = (key.qinv * (m_1 - m_2)) % key.p
    else:
        h = (key.qinv * (m_1 - m_2 + key.p)) % key.p
    return m_2 + h * key.q


def decrypt(blocks: Iterable[int], key: PrivateKey) -> list[int]:
    """Decrypts each block with the private key.

    Args:
        blocks: Ciphertext blocks, each in range [0, n-1].
        key: The private key.

    Returns:
        The plaintext blocks, in input order.
    """
    return [_garner(block, key) for block in blocks]


def encrypt_message(message: str, key: PublicKey) -> list[int]:
    """Marshals the message into blocks and encrypts them.

    Warning! Textbook RSA is unsecure!

    Args:
        message: The lowercase message to encrypt.
        key: The public key.

    Returns:
        The ciphertext blocks.
    """
    warnings.warn("Textbook RSA encryption is unsecure! Please use with care.", RuntimeWarning)
    return encrypt(codec.to_blocks(message, key.n), key)


def decrypt_message(blocks: Iterable[int], key: PrivateKey) -> str:
    """Decrypts the blocks and unmarshals them into the message, including any padding."""
    return codec.from_blocks(decrypt(blocks, key), key.n)
