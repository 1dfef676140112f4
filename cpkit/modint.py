"""Integers modulo a fixed modulus."""

from __future__ import annotations

import functools
from typing import Optional


class ModInt:
    """An immutable integer modulo ``MOD``.

    Mixes with plain ints; ``**`` raises to a non-negative power and
    ``inv`` uses Fermat's little theorem, so division needs a prime modulus.
    """

    MOD = 1_000_000_007
    __slots__ = ("_value",)

    def __init__(self, value: int = 0) -> None:
        self._value = int(value) % self.MOD

    def _coerce(self, other: object) -> Optional[int]:
        if isinstance(other, ModInt):
            if other.MOD != self.MOD:
                raise ValueError(
                    f"cannot mix moduli {self.MOD} and {other.MOD}"
                )
            return other._value
        if isinstance(other, int):
            return other % self.MOD
        return None

    def _new(self, value: int) -> "ModInt":
        return type(self)(value)

    def __add__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._new(self._value + o)

    __radd__ = __add__

    def __sub__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._new(self._value - o)

    def __rsub__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._new(o - self._value)

    def __mul__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._new(self._value * o)

    __rmul__ = __mul__

    def __truediv__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self * self._new(o).inv()

    def __rtruediv__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._new(o) * self.inv()

    def __neg__(self) -> "ModInt":
        return self._new(-self._value)

    def __pos__(self) -> "ModInt":
        return self

    def pow(self, exponent: int) -> "ModInt":
        if exponent < 0:
            raise ValueError("exponent must be non-negative")
        return self._new(pow(self._value, exponent, self.MOD))

    def __pow__(self, exponent, modulo=None):
        if modulo is not None or not isinstance(exponent, int):
            return NotImplemented
        return self.pow(exponent)

    def inv(self) -> "ModInt":
        """Multiplicative inverse, assuming the modulus is prime."""
        return self.pow(self.MOD - 2)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ModInt) and other.MOD != self.MOD:
            return False
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._value == o

    def __hash__(self) -> int:
        return hash(self._value)

    def __int__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return bool(self._value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value})"

    def __str__(self) -> str:
        return str(self._value)


@functools.lru_cache(maxsize=None)
def modint_factory(mod: int) -> type[ModInt]:
    """Return the ModInt class for modulus ``mod``; the same class per modulus."""
    if mod < 1:
        raise ValueError("modulus must be positive")
    if mod == ModInt.MOD:
        return ModInt

    class _ModInt(ModInt):
        MOD = mod
        __slots__ = ()

    _ModInt.__name__ = _ModInt.__qualname__ = f"ModInt{mod}"
    return _ModInt


Mint1099 = modint_factory(1_000_000_009)
Mint998 = modint_factory(998_244_353)