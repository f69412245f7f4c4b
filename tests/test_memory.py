import pytest

from minishell.memory import bzero, memchr, memcmp, memcpy, memmove, memset


def test_memchr_finds_first_occurrence():
    data = b"hello world"
    assert memchr(data, "o", len(data)) == data.index(b"o")


def test_memchr_accepts_int_and_bytes():
    data = b"abcabc"
    assert memchr(data, ord("c"), 6) == 2
    assert memchr(data, b"c", 6) == 2


def test_memchr_respects_limit():
    assert memchr(b"abcdef", "e", 3) is None


def test_memchr_truncates_int_like_unsigned_char():
    data = bytes([1, 2, 3])
    assert memchr(data, 0x100 + 2, 3) == 1


def test_memchr_finds_nul_byte():
    data = b"ab\0cd"
    assert memchr(data, 0, 5) == 2


def test_memchr_count_too_large():
    with pytest.raises(ValueError):
        memchr(b"ab", "a", 3)


def test_memcmp_equal():
    assert memcmp(b"abcd", b"abcd", 4) == 0


def test_memcmp_only_first_n():
    assert memcmp(b"abcX", b"abcY", 3) == 0


def test_memcmp_sign_and_antisymmetry():
    a, b = b"abc", b"abd"
    assert memcmp(a, b, 3) < 0
    assert memcmp(b, a, 3) > 0
    assert memcmp(a, b, 3) == -memcmp(b, a, 3)


def test_memcmp_is_unsigned():
    assert memcmp(bytes([0xFF]), bytes([0x01]), 1) > 0


def test_memcmp_zero_length():
    assert memcmp(b"a", b"b", 0) == 0


def test_memcmp_negative_count():
    with pytest.raises(ValueError):
        memcmp(b"a", b"a", -1)


def test_memcpy_copies_prefix():
    dst = bytearray(b"xxxxxx")
    result = memcpy(dst, b"abc", 3)
    assert result is dst
    assert dst == bytearray(b"abcxxx")


def test_memcpy_count_too_large():
    with pytest.raises(ValueError):
        memcpy(bytearray(2), b"abc", 3)


def test_memmove_forward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 2, 0, 4)
    assert buf == bytearray(b"ababcd")


def test_memmove_backward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 0, 2, 4)
    assert buf == bytearray(b"cdefef")


def test_memmove_out_of_range():
    with pytest.raises(ValueError):
        memmove(bytearray(b"abc"), 1, 0, 3)


def test_memset_fills_prefix():
    buf = bytearray(b"abcdef")
    assert memset(buf, "z", 4) is buf
    assert buf == bytearray(b"zzzzef")


def test_memset_truncates_value():
    buf = bytearray(3)
    memset(buf, 0x141, 3)
    assert buf == bytearray(b"AAA")


def test_bzero_clears_prefix():
    buf = bytearray(b"abcd")
    bzero(buf, 2)
    assert buf == bytearray(b"\0\0cd")


def test_bad_byte_value():
    with pytest.raises(ValueError):
        memset(bytearray(2), "ab", 2)