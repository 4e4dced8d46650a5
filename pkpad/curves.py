from __future__ import annotations

from typing import NamedTuple

from pkpad.exceptions import ConfigurationError
from pkpad.field import PrimeField


class Curve(NamedTuple):
  """Field parameters of an elliptic curve: coordinate prime p and group order n"""
  name: str
  p: int
  n: int

  @property
  def fq(self) -> PrimeField:
    """Base field (point coordinates)"""
    return _fields[self.name, "fq"]

  @property
  def fr(self) -> PrimeField:
    """Scalar field (group order)"""
    return _fields[self.name, "fr"]

  def field(self, kind: str) -> PrimeField:
    if kind not in ("fr", "fq"):
      raise ConfigurationError(f"Field must be fr (scalar) or fq (base), not {kind!r}")
    return _fields[self.name, kind]


# NIST / SEC 2 prime curves
secp192r1 = Curve(
  "secp192r1",
  6277101735386680763835789423207666416083908700390324961279,
  6277101735386680763835789423176059013767194773182842284081,
)
secp224r1 = Curve(
  "secp224r1",
  26959946667150639794667015087019630673557916260026308143510066298881,
  26959946667150639794667015087019625940457807714424391721682722368061,
)
secp256r1 = Curve(
  "secp256r1",
  0xffffffff00000001000000000000000000000000ffffffffffffffffffffffff,
  0xffffffff00000000ffffffffffffffffbce6faada7179e84f3b9cac2fc632551,
)
secp384r1 = Curve(
  "secp384r1",
  0xfffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffeffffffff0000000000000000ffffffff,
  0xffffffffffffffffffffffffffffffffffffffffffffffffc7634d81f4372ddf581a0db248b0a77aecec196accc52973,
)
secp521r1 = Curve(
  "secp521r1",
  2**521 - 1,
  6864797660130609714981900799081393217269435300143305409394463459185543183397655394245057746333217197532963996371363321113864768612440380340372808892707005449,
)
secp256k1 = Curve(
  "secp256k1",
  2**256 - 2**32 - 977,
  0xfffffffffffffffffffffffffffffffebaaedce6af48a03bbfd25e8cd0364141,
)

# Pairing friendly curves
bls12_381 = Curve(
  "bls12_381",
  0x1a0111ea397fe69a4b1ba7b6434bacd764774b84f38512bf6730d2a0f6b0f6241eabfffeb153ffffb9feffffffffaaab,
  0x73eda753299d7d483339d80809a1d80553bda402fffe5bfeffffffff00000001,
)
bn254 = Curve(
  "bn254",
  21888242871839275222246405745257275088696311157297823662689037894645226208583,
  21888242871839275222246405745257275088548364400416034343698204186575808495617,
)

# Edwards25519 (prime order subgroup)
ed25519 = Curve("ed25519", 2**255 - 19, 2**252 + 27742317777372353535851937790883648493)

curves = {c.name: c for c in (secp192r1, secp224r1, secp256r1, secp384r1, secp521r1, secp256k1, bls12_381, bn254, ed25519)}
aliases = dict(p192="secp192r1", p224="secp224r1", p256="secp256r1", prime256v1="secp256r1", p384="secp384r1", p521="secp521r1", altbn128="bn254", curve25519="ed25519")

# Fields are created once so that elements of the same curve field share one instance
_fields = {(c.name, kind): PrimeField(m, f"{c.name}_{kind}") for c in curves.values() for kind, m in (("fq", c.p), ("fr", c.n))}


def get(name: str) -> Curve:
  """Look up a curve by name, e.g. secp256r1, P-256 or BLS12-381"""
  key = name.lower().replace("-", "").replace("_", "")
  key = aliases.get(key, key)
  try:
    return next(c for c in curves.values() if c.name.replace("_", "") == key)
  except StopIteration:
    raise ConfigurationError(f"Unknown curve {name!r}, use one of: {', '.join(curves)}") from None
