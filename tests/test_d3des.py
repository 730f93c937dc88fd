import pytest

from vnckit.d3des import DesCipher, Mode, des, deskey


def _reverse_bits(data: bytes) -> bytes:
    return bytes(int(f"{b:08b}"[::-1], 2) for b in data)


STD_KEY = bytes.fromhex("0123456789abcdef")
PLAIN = bytes.fromhex("0123456789abcde7")
CIPHER = bytes.fromhex("c95744256a5ed31d")


def test_validation_vector_with_vnc_bit_order():
    cipher = DesCipher(_reverse_bits(STD_KEY), Mode.ENCRYPT)
    assert cipher.crypt(PLAIN) == CIPHER


def test_validation_vector_decrypts():
    cipher = DesCipher(_reverse_bits(STD_KEY), Mode.DECRYPT)
    assert cipher.crypt(CIPHER) == PLAIN


@pytest.mark.parametrize("key", [b"\x00" * 8, b"abcdefgh", bytes(range(8, 16))])
@pytest.mark.parametrize("block", [b"\x00" * 8, b"12345678", b"\xff" * 8])
def test_round_trip(key, block):
    enc = deskey(key, Mode.ENCRYPT)
    dec = deskey(key, Mode.DECRYPT)
    assert des(des(block, enc), dec) == block


def test_most_significant_bit_of_key_is_ignored():
    key = b"password"
    flipped = bytes(b ^ 0x80 for b in key)
    block = b"challeng"
    assert DesCipher(key).crypt(block) == DesCipher(flipped).crypt(block)


def test_decrypt_schedule_reverses_subkey_pairs():
    enc = deskey(b"abcdefgh", Mode.ENCRYPT)
    dec = deskey(b"abcdefgh", Mode.DECRYPT)
    assert len(enc) == 32
    assert all(0 <= k < 2**32 for k in enc)
    for i in range(16):
        assert enc[2 * i : 2 * i + 2] == dec[30 - 2 * i : 32 - 2 * i]


@pytest.mark.parametrize("key", [b"\x00" * 8, b"\xff" * 8])
def test_weak_keys_are_involutions(key):
    cipher = DesCipher(key, Mode.ENCRYPT)
    block = b"ABCDEFGH"
    assert cipher.crypt(cipher.crypt(block)) == block


def test_complementation_property():
    key = b"k3y-data"
    block = b"plaintxt"
    inv = lambda data: bytes(b ^ 0xFF for b in data)  # noqa: E731
    assert DesCipher(inv(key)).crypt(inv(block)) == inv(DesCipher(key).crypt(block))


def test_crypt_processes_multiple_blocks():
    cipher = DesCipher(b"abcdefgh")
    data = b"0123456789abcdef"
    assert cipher.crypt(data) == cipher.crypt(data[:8]) + cipher.crypt(data[8:])


def test_mode_accepts_integer_values():
    assert DesCipher(b"abcdefgh", 1).mode is Mode.DECRYPT
    assert deskey(b"abcdefgh", 0) == deskey(b"abcdefgh", Mode.ENCRYPT)


def test_bad_key_length():
    with pytest.raises(ValueError):
        deskey(b"short", Mode.ENCRYPT)


def test_bad_block_length():
    with pytest.raises(ValueError):
        des(b"1234567", deskey(b"abcdefgh", Mode.ENCRYPT))


def test_bad_schedule_length():
    with pytest.raises(ValueError):
        des(b"12345678", (0,) * 16)


def test_crypt_rejects_partial_block():
    with pytest.raises(ValueError):
        DesCipher(b"abcdefgh").crypt(b"123456789")


def test_crypt_rejects_empty_data():
    with pytest.raises(ValueError):
        DesCipher(b"abcdefgh").crypt(b"")


def test_invalid_mode():
    with pytest.raises(ValueError):
        deskey(b"abcdefgh", 5)