import hashlib
from typing import Callable, NamedTuple

import nacl.bindings as sodium

from pkpad.exceptions import ConfigurationError


class Hash(NamedTuple):
  """A hash algorithm with a fixed output length"""
  name: str
  digest_size: int
  fn: Callable[[bytes], bytes]

  @property
  def bits(self) -> int: return 8 * self.digest_size

  def digest(self, message) -> bytes:
    h = self.fn(bytes(message))
    # The output length is what bits2int relies upon, catch broken backends
    assert len(h) == self.digest_size, f"{self.name} returned {len(h)} bytes"
    return h

  def __repr__(self): return self.name.upper()


def _hashlib(name: str, size: int) -> Hash:
  return Hash(name, size, lambda m: hashlib.new(name, m).digest())

def _blake2b(m: bytes) -> bytes:
  return sodium.crypto_generichash_blake2b_salt_personal(m, digest_size=64)


SHA1 = _hashlib("sha1", 20)
SHA224 = _hashlib("sha224", 28)
SHA256 = _hashlib("sha256", 32)
SHA384 = _hashlib("sha384", 48)
SHA512 = _hashlib("sha512", 64)
SHA3_256 = _hashlib("sha3_256", 32)
SHA3_512 = _hashlib("sha3_512", 64)
BLAKE2B = Hash("blake2b", 64, _blake2b)

algorithms = {h.name.replace("_", ""): h for h in (SHA1, SHA224, SHA256, SHA384, SHA512, SHA3_256, SHA3_512, BLAKE2B)}


def get(name: str) -> Hash:
  """Look up a supported hash by name, e.g. sha256, SHA-256, sha2_256 or sha3-512."""
  key = name.lower().replace("-", "").replace("_", "")
  # SHA-2 family spelled with the family number: sha2256 -> sha256
  if key.startswith("sha2") and len(key) == 7: key = f"sha{key[4:]}"
  try:
    return algorithms[key]
  except KeyError:
    raise ConfigurationError(f"Unsupported hash algorithm {name!r}, use one of: {', '.join(algorithms)}") from None
