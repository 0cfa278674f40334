"""Textbook RSA Block Cipher in an Academic Sense.

Provides the number theory toolkit (GCD, modular inverse, fast modular exponentiation, Chinese Remainder Theorem),
a letter-to-block message codec, key construction from caller-supplied primes with PKCS1 key files, and block-wise
encryption with CRT-accelerated decryption.

Typical usage example:

    pub, pk = make_public_key(43, 59, 13), make_private_key(43, 59, 13)
    c = encrypt(to_blocks("help", pub.n), pub)
    r = from_blocks(decrypt(c, pk), pub.n)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from rsablocks.cipher import decrypt
from rsablocks.cipher import decrypt_message
from rsablocks.cipher import encrypt
from rsablocks.cipher import encrypt_message
from rsablocks.codec import block_size
from rsablocks.codec import from_blocks
from rsablocks.codec import to_blocks
from rsablocks.codec import translate
from rsablocks.codec import untranslate
from rsablocks.keys import export_private_key
from rsablocks.keys import export_public_key
from rsablocks.keys import import_private_key
from rsablocks.keys import import_public_key
from rsablocks.keys import make_private_key
from rsablocks.keys import make_public_key
from rsablocks.keys import PrivateKey
from rsablocks.keys import PublicKey
from rsablocks.maths import are_pairwise_relatively_prime
from rsablocks.maths import are_relatively_prime
from rsablocks.maths import chinese_remainder_theorem
from rsablocks.maths import fast_modular_exponentiation
from rsablocks.maths import gcd
from rsablocks.maths import modular_inverse
from rsablocks.maths import NoInverseError

__version__ = "0.0.1"
__all__ = [
    "NoInverseError",
    "gcd",
    "are_relatively_prime",
    "are_pairwise_relatively_prime",
    "modular_inverse",
    "fast_modular_exponentiation",
    "chinese_remainder_theorem",
    "translate",
    "untranslate",
    "block_size",
    "to_blocks",
    "from_blocks",
    "PublicKey",
    "PrivateKey",
    "make_public_key",
    "make_private_key",
    "export_public_key",
    "import_public_key",
    "export_private_key",
    "import_private_key",
    "encrypt",
    "decrypt",
    "encrypt_message",
    "decrypt_message",
]
