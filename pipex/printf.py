"""A small printf supporting the ``c s d i u x X p %`` conversions."""

from __future__ import annotations

import sys
from typing import Any, Iterator

_INT_BITS = 32
_UINT_MODULUS = 1 << _INT_BITS
_NULL_STRING = "(null)"
_NULL_POINTER = "(nil)"


def _as_signed(value: int) -> int:
    value %= _UINT_MODULUS
    if value >= _UINT_MODULUS // 2:
        value -= _UINT_MODULUS
    return value


def _as_unsigned(value: int) -> int:
    return value % _UINT_MODULUS


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c expects a single character")
        return value
    return chr(int(value) % 256)


def _string(value: Any) -> str:
    return _NULL_STRING if value is None else str(value)


def _pointer(value: Any) -> str:
    if value is None:
        return _NULL_POINTER
    address = value if isinstance(value, int) else id(value)
    if address == 0:
        return _NULL_POINTER
    return f"0x{address % (1 << 64):x}"


_CONVERSIONS = {
    "c": _char,
    "s": _string,
    "d": lambda value: str(_as_signed(int(value))),
    "i": lambda value: str(_as_signed(int(value))),
    "u": lambda value: str(_as_unsigned(int(value))),
    "x": lambda value: format(_as_unsigned(int(value)), "x"),
    "X": lambda value: format(_as_unsigned(int(value)), "X"),
    "p": _pointer,
}


def _render(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    values = iter(args)
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            yield char
            continue
        spec = next(chars, None)
        if spec == "%":
            yield "%"
        elif spec in _CONVERSIONS:
            try:
                value = next(values)
            except StopIteration:
                raise TypeError(
                    f"not enough arguments for conversion %{spec}"
                ) from None
            yield _CONVERSIONS[spec](value)
        # Unknown conversions and a trailing '%' produce nothing.


def cformat(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args``.

    Integers for ``%d``/``%i`` wrap to 32-bit signed and for ``%u``/``%x``/
    ``%X`` to 32-bit unsigned. ``%s`` of ``None`` gives ``(null)``; ``%p`` of
    ``None`` or 0 gives ``(nil)``. Unknown conversions are dropped.
    """
    if fmt is None:
        raise TypeError("format must not be None")
    return "".join(_render(fmt, args))


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = cformat(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)