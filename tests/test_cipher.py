# pylint: disable=missing-module-docstring,redefined-outer-name
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import pytest
import sympy

import rsablocks
from rsablocks import cipher
from rsablocks import maths

ROSEN = (43, 59, 13)
LARGE = (int(sympy.nextprime(2**256)), int(sympy.nextprime(2**257)), 65537)


@pytest.fixture(scope="module")
def rosen_keys() -> tuple[rsablocks.PublicKey, rsablocks.PrivateKey]:
    return rsablocks.make_public_key(*ROSEN), rsablocks.make_private_key(*ROSEN)


@pytest.fixture(scope="module")
def large_keys() -> tuple[rsablocks.PublicKey, rsablocks.PrivateKey]:
    return rsablocks.make_public_key(*LARGE), rsablocks.make_private_key(*LARGE)


def test_encrypt_concrete(rosen_keys):
    pub, _ = rosen_keys
    assert cipher.encrypt([704, 1115], pub) == [981, 461]
    assert cipher.encrypt([1819, 1415], pub) == [2081, 2182]


def test_decrypt_concrete(rosen_keys):
    _, pk = rosen_keys
    assert cipher.decrypt([981, 461], pk) == [704, 1115]
    assert cipher.decrypt([2081, 2182], pk) == [1819, 1415]


def test_empty(rosen_keys):
    pub, pk = rosen_keys
    assert cipher.encrypt([], pub) == []
    assert cipher.decrypt([], pk) == []


def test_order_preserved(rosen_keys):
    pub, pk = rosen_keys
    blocks = [1115, 704, 704, 0, 1]
    assert cipher.encrypt(blocks, pub) == [981 if b == 704 else 461 if b == 1115 else b for b in blocks]
    assert cipher.decrypt(cipher.encrypt(blocks, pub), pk) == blocks


@pytest.mark.slow
def test_inverse_law_exhaustive(rosen_keys):
    pub, pk = rosen_keys
    blocks = list(range(pub.n))
    assert cipher.decrypt(cipher.encrypt(blocks, pub), pk) == blocks
    assert cipher.encrypt(cipher.decrypt(blocks, pk), pub) == blocks


def test_inverse_law_large(large_keys):
    pub, pk = large_keys
    blocks = [0, 1, 2, 65537, pub.n // 3, pub.n - 2, pub.n - 1]
    assert cipher.decrypt(cipher.encrypt(blocks, pub), pk) == blocks
    assert cipher.encrypt(cipher.decrypt(blocks, pk), pub) == blocks


def test_decrypt_matches_textbook(large_keys):
    pub, pk = large_keys
    for c in (3, 12345678901234567890, pub.n - 5):
        assert cipher.decrypt([c], pk) == [pow(c, pk.d, pub.n)]


def test_decrypt_matches_crt(rosen_keys, mocker):
    _, pk = rosen_keys
    spy = mocker.spy(maths, "chinese_remainder_theorem")
    for c in (0, 1, 981, 461, 2081, 2536):
        m_1 = pow(c, pk.dp, pk.p)
        m_2 = pow(c, pk.dq, pk.q)
        expected = maths.chinese_remainder_theorem([m_1, m_2], [pk.p, pk.q]) % pk.n
        assert cipher.decrypt([c], pk) == [expected]
    assert spy.call_count == 6


def test_decrypt_uses_crt_components(rosen_keys, mocker):
    _, pk = rosen_keys
    spy = mocker.spy(cipher, "fast_modular_exponentiation")
    cipher.decrypt([981], pk)
    spy.assert_has_calls([mocker.call(981, pk.dp, pk.p), mocker.call(981, pk.dq, pk.q)])
    assert spy.call_count == 2


def test_message_roundtrip(rosen_keys):
    pub, pk = rosen_keys
    with pytest.warns(RuntimeWarning):
        ciph = cipher.encrypt_message("stop", pub)
    assert ciph == [2081, 2182]
    assert cipher.decrypt_message(ciph, pk) == "stop"
    assert cipher.decrypt_message([981, 461], pk) == "help"


def test_message_roundtrip_large(large_keys):
    pub, pk = large_keys
    message = "thequickbrownfoxjumpsoverthelazydog"
    with pytest.warns(RuntimeWarning):
        ciph = cipher.encrypt_message(message, pub)
    recovered = cipher.decrypt_message(ciph, pk)
    assert recovered.startswith(message)
    assert set(recovered[len(message):]) <= {"x"}


@pytest.mark.extreme
def test_inverse_law_exhaustive_wide():
    pub, pk = rsablocks.make_public_key(1009, 1013, 5), rsablocks.make_private_key(1009, 1013, 5)
    blocks = list(range(pub.n))
    assert cipher.decrypt(cipher.encrypt(blocks, pub), pk) == blocks
