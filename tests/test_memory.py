import pytest

from pushswap.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_fills_prefix_only():
    buffer = bytearray(b"abcdef")
    result = memset(buffer, ord("x"), 3)
    assert result is buffer
    assert buffer == bytearray(b"xxxdef")


def test_memset_uses_low_byte():
    buffer = bytearray(4)
    memset(buffer, 0x141, 4)
    assert buffer == bytearray(b"AAAA")


def test_memset_count_too_large():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)


def test_bzero_clears_prefix():
    buffer = bytearray(b"hello")
    bzero(buffer, 2)
    assert buffer == bytearray(b"\x00\x00llo")


def test_bzero_zero_count_leaves_buffer():
    buffer = bytearray(b"keep")
    bzero(buffer, 0)
    assert buffer == bytearray(b"keep")


def test_calloc_returns_zeroed_buffer():
    buffer = calloc(4, 3)
    assert len(buffer) == 12
    assert not any(buffer)


def test_calloc_zero_members():
    assert calloc(0, 100) == bytearray()


def test_calloc_over_limit():
    with pytest.raises(MemoryError):
        calloc(2, 4295032592)


def test_memchr_finds_first_occurrence():
    assert memchr(b"banana", ord("n"), 6) == 2


def test_memchr_respects_count():
    assert memchr(b"banana", ord("n"), 2) is None


def test_memchr_casts_value_to_byte():
    assert memchr(b"\x01\x02", 0x102, 2) == 1


def test_memcmp_equal():
    assert memcmp(b"same", b"same", 4) == 0


def test_memcmp_sign_and_symmetry():
    forward = memcmp(b"abc", b"abd", 3)
    backward = memcmp(b"abd", b"abc", 3)
    assert forward < 0
    assert forward == -backward


def test_memcmp_ignores_bytes_past_count():
    assert memcmp(b"abX", b"abY", 2) == 0


def test_memcpy_round_trip():
    dest = bytearray(5)
    result = memcpy(dest, b"hello", 5)
    assert result is dest
    assert memcmp(dest, b"hello", 5) == 0


def test_memcpy_partial():
    dest = bytearray(b"-----")
    memcpy(dest, b"hi", 2)
    assert dest == bytearray(b"hi---")


def test_memcpy_count_too_large():
    with pytest.raises(ValueError):
        memcpy(bytearray(1), b"hello", 3)


def test_memmove_overlap_forward():
    buffer = bytearray(b"abcdef")
    view = memoryview(buffer)
    result = memmove(view[2:], view, 4)
    assert bytes(result) == b"abcd"
    assert buffer == bytearray(b"ababcd")


def test_memmove_overlap_backward():
    buffer = bytearray(b"abcdef")
    view = memoryview(buffer)
    result = memmove(view, view[2:], 4)
    assert bytes(result) == b"cdefef"
    assert buffer == bytearray(b"cdefef")