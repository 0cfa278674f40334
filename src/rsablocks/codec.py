"""Message marshalling between lowercase text and numeric blocks.

Letters are written as their two-digit alphabet position ("a" -> "00" ... "z" -> "25") and the resulting digit string
is cut into blocks of a width chosen so that no block can reach the RSA modulus.

Typical usage example:

    translate("help")  # "07041115"
    blocks = to_blocks("help", 2537)  # [704, 1115]
    from_blocks(blocks, 2537)  # "help"
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from collections.abc import Iterable

_OFFSET = ord("a")
_PAD_CODE = f"{ord('x') - _OFFSET:02d}"


def translate(text: str) -> str:
    """Converts lowercase text into its two-digit-per-letter representation.

    Args:
        text: The message. Only "a" to "z" are supported.

    Returns:
        The string of decimal digits, two per letter.
    """
    return "".join(f"{ord(c) - _OFFSET:02d}" for c in text)


def untranslate(digits: str) -> str:
    """Converts a digit string back into text, two digits per letter.

    An odd trailing digit is read as if it had a leading zero.

    Args:
        digits: The decimal digit string.

    Returns:
        The lowercase text.
    """
    letters = []
    for i in range(0, len(digits), 2):
        code = digits[i:i + 2].zfill(2)
        letters.append(chr(int(code) + _OFFSET))
    return "".join(letters)


def block_size(n: int) -> int:
    """Determine the digit width of a block for modulus `n`.

    Grows the width two digits at a time, as long as a block made up entirely of "z" codes (2525...25) of the new
    width stays below `n`.

    Args:
        n: The RSA modulus.

    Returns:
        An even number of digits. Zero if not even a single letter fits.
    """
    size = 0
    digits = 25
    while digits < n:
        size += 2
        digits += 25 * 10**size
    return size


def to_blocks(text: str, n: int) -> list[int]:
    """Marshals text into blocks for encryption under modulus `n`.

    The final block is padded with "x" to full width.

    Args:
        text: The lowercase message.
        n: The RSA modulus.

    Returns:
        The blocks, in message order.

    Raises:
        ValueError: If `n` is too small to carry a single letter per block.
    """
    size = block_size(n)
    if size == 0:
        raise ValueError(f"Modulus {n} is too small to hold a single letter per block.")
    translated = translate(text)
    blocks = []
    for i in range(0, len(translated), size):
        chunk = translated[i:i + size]
        while len(chunk) < size:
            chunk += _PAD_CODE
        blocks.append(int(chunk))
    return blocks


def from_blocks(blocks: Iterable[int], n: int) -> str:
    """Unmarshals decrypted blocks back into text.

    Args:
        blocks: The blocks, in message order.
        n: The RSA modulus the blocks were sized for.

    Returns:
        The recovered lowercase message, including any "x" padding.
    """
    size = block_size(n)
    return "".join(untranslate(str(block).zfill(size)) for block in blocks)
