from __future__ import annotations

from typing import Union

from pkpad import curves, hashes
from pkpad.exceptions import ConfigurationError
from pkpad.field import PrimeField, fe
from pkpad.hashes import Hash
from pkpad.log import debug_enabled, get_logger
from pkpad.util import bits2int, ct_equal, tobytes_message

# EMSA1 from IEEE 1363: the message digest, truncated to the bit length of the
# field modulus, becomes the field element to be signed. Used by ECDSA, DSA and
# friends where the hash output is converted into a scalar of the group order.

log = get_logger(__name__)


class EMSA1:
  """Message encoding into a prime field with a fixed hash algorithm."""

  def __init__(self, field: PrimeField, hash: Hash):
    if not isinstance(field, PrimeField):
      raise ConfigurationError(f"EMSA1 needs a PrimeField, got {field!r}")
    if not isinstance(hash, Hash):
      raise ConfigurationError(f"EMSA1 needs a Hash, got {hash!r}")
    self.field = field
    self.hash = hash

  @staticmethod
  def from_name(name: str) -> EMSA1:
    """Scheme from a name like emsa1_sha256_secp256r1_fr (hash, curve and fr/fq)."""
    parts = name.lower().split("_")
    if len(parts) < 4 or parts[0] != "emsa1":
      raise ConfigurationError(f"Invalid scheme name {name!r}, expected emsa1_<hash>_<curve>_<fr|fq>")
    kind, parts = parts[-1], parts[1:-1]
    # Hash and curve names may both contain underscores (sha3_256, bls12_381)
    for i in range(1, len(parts)):
      h, c = "_".join(parts[:i]), "_".join(parts[i:])
      try:
        scheme = EMSA1(curves.get(c).field(kind), hashes.get(h))
      except ConfigurationError:
        continue
      log.debug("EMSA1 scheme", name=name, field=scheme.field, hash=scheme.hash)
      return scheme
    raise ConfigurationError(f"Invalid scheme name {name!r}, unknown hash or curve")

  @property
  def name(self) -> str:
    # Curve field names are already of form secp256r1_fr
    return f"emsa1_{self.hash.name}_{self.field.name or self.field.p}"

  def __repr__(self): return f"EMSA1({self.field!r}, {self.hash!r})"
  def __eq__(self, other): return isinstance(other, EMSA1) and (self.field, self.hash.name) == (other.field, other.hash.name)
  def __hash__(self): return hash((self.field, self.hash.name))

  def encode(self, message: Union[bytes, str]) -> fe:
    """Hash the message and convert the digest into a field element"""
    digest = self.hash.digest(tobytes_message(message))
    x = bits2int(digest, self.field.bits)
    if debug_enabled(__name__):
      log.debug("EMSA1 encode", scheme=self.name, digest_bits=self.hash.bits, field_bits=self.field.bits, reduced=x >= self.field.p)
    # Only reduced if the digest (or its leading bits) exceeds the modulus
    return self.field(x)

  def verify(self, message: Union[bytes, str], claimed: Union[fe, int]) -> bool:
    """Check in constant time that claimed is the encoding of message. Mismatch is not an error."""
    if isinstance(claimed, int):
      claimed = self.field(claimed)
    elif not isinstance(claimed, fe) or claimed.field != self.field:
      raise TypeError(f"Cannot verify {claimed!r} with {self!r}")
    ok = ct_equal(bytes(self.encode(message)), bytes(claimed))
    if debug_enabled(__name__): log.debug("EMSA1 verify", scheme=self.name, ok=ok)
    return ok


def encode(scheme: EMSA1, message: Union[bytes, str]) -> fe:
  return scheme.encode(message)

def verify(scheme: EMSA1, message: Union[bytes, str], claimed: Union[fe, int]) -> bool:
  return scheme.verify(message, claimed)
