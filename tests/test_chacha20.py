import pytest

from crylib import chacha20

SEQ_KEY = bytes(range(32))
ZERO_KEY = bytes(32)
ZERO_NONCE = bytes(12)
KEY_LAST_ONE = bytes(31) + b"\x01"
NONCE_LAST_TWO = bytes(11) + b"\x02"
POEM_KEY = bytes.fromhex(
    "1c9240a5eb55d38af333888604f6b5f0473917c1402b80099dca5cbc207075c0"
)

ZERO_BLOCK_0 = bytes.fromhex(
    "76b8e0ada0f13d90405d6ae55386bd28bdd219b8a08ded1aa836efcc8b770dc7"
    "da41597c5157488d7724e03fb8d84a376a43b8f41518a11cc387b669b2ee6586"
)


def test_quarter_round():
    assert chacha20.quarter_round(0x11111111, 0x01020304, 0x9B8D6F43, 0x01234567) == (
        0xEA2A92F4,
        0xCB1CF8CE,
        0x4581472E,
        0x5881C4BB,
    )


def test_quarter_round_rejects_wide_word():
    with pytest.raises(ValueError):
        chacha20.quarter_round(1 << 32, 0, 0, 0)


@pytest.mark.parametrize(
    "key, nonce, counter, expected",
    [
        (
            SEQ_KEY,
            bytes.fromhex("000000090000004a00000000"),
            1,
            "10f1e7e4d13b5915500fdd1fa32071c4c7d1f4c733c068030422aa9ac3d46c4e"
            "d2826446079faa0914c2d705d98b02a2b5129cd1de164eb9cbd083e8a2503c4e",
        ),
        (ZERO_KEY, ZERO_NONCE, 0, ZERO_BLOCK_0.hex()),
        (
            ZERO_KEY,
            ZERO_NONCE,
            1,
            "9f07e7be5551387a98ba977c732d080dcb0f29a048e3656912c6533e32ee7aed"
            "29b721769ce64e43d57133b074d839d531ed1f28510afb45ace10a1f4b794d6f",
        ),
        (
            KEY_LAST_ONE,
            ZERO_NONCE,
            1,
            "3aeb5224ecf849929b9d828db1ced4dd832025e8018b8160b82284f3c949aa5a"
            "8eca00bbb4a73bdad192b5c42f73f2fd4e273644c8b36125a64addeb006c13a0",
        ),
        (
            b"\x00\xff" + bytes(30),
            ZERO_NONCE,
            2,
            "72d54dfbf12ec44b362692df94137f328fea8da73990265ec1bbbea1ae9af0ca"
            "13b25aa26cb4a648cb9b9d1be65b2c0924a66c54d545ec1b7374f4872e99f096",
        ),
        (
            ZERO_KEY,
            NONCE_LAST_TWO,
            0,
            "c2c64d378cd536374ae204b9ef933fcd1a8b2288b3dfa49672ab765b54ee27c7"
            "8a970e0e955c14f3a88e741b97c286f75f8fc299e8148362fa198a39531bed6d",
        ),
    ],
)
def test_block(key, nonce, counter, expected):
    assert chacha20.block(key, nonce, counter) == bytes.fromhex(expected)


def test_encrypt_sunscreen():
    plain_text = bytearray(
        b"Ladies and Gentlemen of the class of '99: If I could offer you only "
        b"one tip for the future, sunscreen would be it."
    )
    cipher_text = bytes.fromhex(
        "6e2e359a2568f98041ba0728dd0d"
        "6981e97e7aec1d4360c20a27afcc"
        "fd9fae0bf91b65c5524733ab8f59"
        "3dabcd62b3571639d624e65152ab"
        "8f530c359f0861d807ca0dbf500d"
        "6a6156a38e088a22b65e52bc514d"
        "16ccf806818ce91ab77937365af9"
        "0bbf74a35be6b40b8eedf2785e42"
        "874d"
    )
    chacha20.encrypt_inline(
        plain_text, SEQ_KEY, bytes.fromhex("000000000000004a00000000"), 1
    )
    assert bytes(plain_text) == cipher_text


def test_encrypt_zero_block():
    buf = bytearray(64)
    chacha20.encrypt_inline(buf, ZERO_KEY, ZERO_NONCE, 0)
    assert bytes(buf) == ZERO_BLOCK_0


IETF_TEXT = (
    b"Any submission to the IETF intended by the Contributor for publication "
    b"as all or part of an IETF Internet-Draft or RFC and any statement made "
    b"within the context of an IETF activity is considered an \"IETF "
    b"Contribution\". Such statements include oral statements in IETF "
    b"sessions, as well as written and electronic communications made at any "
    b"time or place, which are addressed to"
)

IETF_CIPHER = bytes.fromhex(
    "a3fbf07df3fa2fde4f376ca23e82"
    "737041605d9f4f4f57bd8cff2c1d"
    "4b7955ec2a97948bd3722915c8f3"
    "d337f7d370050e9e96d647b7c39f"
    "56e031ca5eb6250d4042e02785ec"
    "ecfa4b4bb5e8ead0440e20b6e8db"
    "09d881a7c6132f420e52795042bd"
    "fa7773d8a9051447b3291ce1411c"
    "680465552aa6c405b7764d5e87be"
    "a85ad00f8449ed8f72d0d662ab05"
    "2691ca66424bc86d2df80ea41f43"
    "abf937d3259dc4b2d0dfb48a6c91"
    "39ddd7f76966e928e635553ba76c"
    "5c879d7b35d49eb2e62b0871cdac"
    "638939e25e8a1e0ef9d5280fa8ca"
    "328b351c3c765989cbcf3daa8b6c"
    "cc3aaf9f3979c92b3720fc88dc95"
    "ed84a1be059c6499b9fda236e7e8"
    "18b04b0bc39c1e876b193bfe5569"
    "753f88128cc08aaa9b63d1a16f80"
    "ef2554d7189c411f5869ca52c5b8"
    "3fa36ff216b9c1d30062bebcfd2d"
    "c5bce0911934fda79a86f6e698ce"
    "d759c3ff9b6477338f3da4f9cd85"
    "14ea9982ccafb341b2384dd902f3"
    "d1ab7ac61dd29c6f21ba5b862f37"
    "30e37cfdc4fd806c22f221"
)


def test_encrypt_ietf_text():
    buf = bytearray(IETF_TEXT)
    chacha20.encrypt_inline(buf, KEY_LAST_ONE, NONCE_LAST_TWO, 1)
    assert bytes(buf) == IETF_CIPHER


POEM = (
    b"'Twas brillig, and the slithy toves\n"
    b"Did gyre and gimble in the wabe:\n"
    b"All mimsy were the borogoves,\n"
    b"And the mome raths outgrabe."
)

POEM_CIPHER = bytes.fromhex(
    "62e6347f95ed87a45ffae7426f27"
    "a1df5fb69110044c0d73118effa9"
    "5b01e5cf166d3df2d721caf9b21e"
    "5fb14c616871fd84c54f9d65b283"
    "196c7fe4f60553ebf39c6402c422"
    "34e32a356b3e764312a61a553205"
    "5716ead6962568f87d3f3f7704c6"
    "a8d1bcd1bf4d50d6154b6da731b1"
    "87b58dfd728afa36757a797ac188"
    "d1"
)


def test_encrypt_poem():
    buf = bytearray(POEM)
    chacha20.encrypt_inline(buf, POEM_KEY, NONCE_LAST_TWO, 42)
    assert bytes(buf) == POEM_CIPHER


def test_encrypt_returns_copy_and_round_trips():
    cipher_text = chacha20.encrypt(POEM, POEM_KEY, NONCE_LAST_TWO, 42)
    assert cipher_text == POEM_CIPHER
    assert chacha20.encrypt(cipher_text, POEM_KEY, NONCE_LAST_TWO, 42) == POEM


def test_encrypt_empty_message():
    assert chacha20.encrypt(b"", SEQ_KEY, ZERO_NONCE, 0) == b""


def test_bad_key_length():
    with pytest.raises(ValueError):
        chacha20.block(bytes(31), ZERO_NONCE, 0)


def test_bad_nonce_length():
    with pytest.raises(ValueError):
        chacha20.encrypt(b"abc", ZERO_KEY, bytes(8), 0)


def test_counter_overflow():
    with pytest.raises(OverflowError):
        chacha20.encrypt(bytes(65), ZERO_KEY, ZERO_NONCE, 0xFFFFFFFF)


def test_counter_at_limit_single_block():
    result = chacha20.encrypt(bytes(64), ZERO_KEY, ZERO_NONCE, 0xFFFFFFFF)
    assert result == chacha20.block(ZERO_KEY, ZERO_NONCE, 0xFFFFFFFF)