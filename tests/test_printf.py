import pytest

from pipex.printf import cformat, printf


def test_plain_text_passes_through():
    assert cformat("hello world") == "hello world"


def test_percent_literal():
    assert cformat("100%%") == "100%"


@pytest.mark.parametrize("n", [0, 1, -1, 42, -987654, 2147483647, -2147483648])
def test_decimal_matches_str(n):
    assert cformat("%d", n) == str(n)
    assert cformat("%i", n) == str(n)


def test_decimal_wraps_to_32_bits():
    assert cformat("%d", 2147483648) == str(-2147483648)


@pytest.mark.parametrize("n", [0, 7, 255, 4096, 2147483647])
def test_hex_matches_format(n):
    assert cformat("%x", n) == format(n, "x")
    assert cformat("%X", n) == format(n, "X")


def test_unsigned_of_negative_wraps():
    assert int(cformat("%u", -1)) + 1 == 2 ** 32
    assert int(cformat("%x", -1), 16) + 1 == 2 ** 32


def test_char_from_int_and_str():
    assert cformat("%c%c", 65, "z") == "Az"


def test_char_rejects_long_string():
    with pytest.raises(ValueError):
        cformat("%c", "ab")


def test_null_string():
    assert cformat("[%s]", None) == "[(null)]"


def test_null_pointer():
    assert cformat("%p", None) == "(nil)"
    assert cformat("%p", 0) == "(nil)"


def test_pointer_is_hex_address():
    out = cformat("%p", 4096)
    assert out.startswith("0x")
    assert int(out, 16) == 4096


def test_unknown_conversion_is_dropped():
    assert cformat("a%qb") == "ab"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        cformat("%d")


def test_none_format_raises():
    with pytest.raises(TypeError):
        cformat(None)


def test_mixed_conversions():
    assert cformat("%s=%d", "x", 5) == "x=5"


def test_printf_writes_and_counts(capsys):
    count = printf("%s:%d\n", "abc", -12)
    out = capsys.readouterr().out
    assert out == "abc:-12\n"
    assert count == len(out)