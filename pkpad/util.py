import re

from cryptography.hazmat.primitives.constant_time import bytes_eq

from pkpad.exceptions import ConfigurationError


def toint(b) -> int:
  """Big-endian (most significant byte first) unsigned integer"""
  return int.from_bytes(b, "big")

def tobytes(x: int, size: int) -> bytes:
  return x.to_bytes(size, "big")

def tobytes_message(message) -> bytes:
  """Accept any bytes-like message, or text which is UTF-8 encoded."""
  if isinstance(message, str): return message.encode()
  return bytes(message)


def parse_value(s) -> int:
  """Field value from decimal or 0x prefixed hex text, or a plain integer"""
  if isinstance(s, int) and not isinstance(s, bool): return s
  if isinstance(s, str) and (m := re.fullmatch(r"-?(0[xX])?([0-9a-fA-F]+)", s.strip())):
    # Decimal digits only unless prefixed with 0x (leading zeros allowed)
    if m[1] or m[2].isdigit(): return int(s.strip(), 16 if m[1] else 10)
  raise ValueError(f"Invalid field value {s!r}, expected decimal or 0x hex")


def bits2int(digest, bits: int) -> int:
  """Digest as an unsigned integer of at most `bits` bits.

  The digest is read big-endian. If it is longer than `bits`, only its
  leftmost `bits` bits are kept by shifting out the low bits, so that the
  result is always below 2**bits. Shorter digests pass through unchanged
  and no modular reduction is done here.
  """
  if bits < 1:
    raise ConfigurationError(f"Target bit length must be positive, got {bits}")
  x = toint(digest)
  excess = 8 * len(digest) - bits
  return x >> excess if excess > 0 else x


def ct_equal(a: bytes, b: bytes) -> bool:
  """Constant time comparison of two equal length byte strings"""
  # Lengths are public (fixed by the field), only the content must not leak
  if len(a) != len(b): return False
  return bytes_eq(a, b)
