from __future__ import annotations

from functools import cached_property
from typing import Optional

from pkpad.exceptions import ConfigurationError
from pkpad.util import ct_equal, tobytes, toint


class PrimeField:
  """Integers modulo a prime p. Call the field with an int to get an element."""

  def __init__(self, p: int, name: Optional[str] = None):
    if p < 2:
      # Modulus 1 (or below) would give a field with bit length 0
      raise ConfigurationError(f"Invalid field modulus {p}: bit length must be positive")
    self.p = p
    self.name = name
    # Minimal L such that 2**L > p - 1
    self.bits = (p - 1).bit_length()
    self.size = (self.bits + 7) // 8

  def __call__(self, x: int) -> fe: return fe(x, self)
  def __eq__(self, other): return isinstance(other, PrimeField) and self.p == other.p
  def __hash__(self): return hash(self.p)
  def __repr__(self): return f"PrimeField({self.name or self.p})"

  def from_bytes(self, b) -> fe:
    """Element from big-endian bytes, reduced mod p"""
    return self(toint(b))

  @cached_property
  def zero(self) -> fe: return self(0)

  @cached_property
  def one(self) -> fe: return self(1)


class fe:
  """An element of a prime field, always reduced to [0, p)"""
  def __init__(self, x: int, field: PrimeField):
    self.field = field
    self.val = x % field.p

  def __hash__(self): return hash((self.field.p, self.val))
  def __repr__(self): return f"{self.field.name or 'fe'}({self.val})"
  def __str__(self): return str(self.val)
  def __int__(self): return self.val
  def __bytes__(self): return tobytes(self.val, self.field.size)
  def hex(self) -> str: return bytes(self).hex()

  def _check(self, o) -> fe:
    if not isinstance(o, fe): raise TypeError(f"Cannot combine {self!r} with {o!r}")
    if o.field != self.field: raise TypeError(f"Elements of different fields: {self!r} and {o!r}")
    return o

  def __eq__(self, other):
    # Note: if we return NotImplemented, Python does object comparison and returns False
    self._check(other)
    # Fixed length representations so that the time does not depend on the values
    return ct_equal(bytes(self), bytes(other))

  def __neg__(self): return fe(-self.val, self.field)
  def __add__(self, o: fe): return fe(self.val + self._check(o).val, self.field)
  def __sub__(self, o: fe): return fe(self.val - self._check(o).val, self.field)
  def __mul__(self, o: fe): return fe(self.val * self._check(o).val, self.field)

  def __truediv__(self, o: fe) -> fe:
    """Division mod p"""
    return self * self._check(o).inv

  def __pow__(self, s: int) -> fe:
    return fe(pow(self.val, s, self.field.p), self.field)

  @cached_property
  def inv(self) -> fe:
    if not self.val: raise ZeroDivisionError("Zero has no inverse")
    return self**-1
