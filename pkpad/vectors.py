import json
from pathlib import Path
from typing import Dict, List, NamedTuple, Tuple

from pkpad.emsa1 import EMSA1
from pkpad.exceptions import VectorMismatch
from pkpad.log import get_logger
from pkpad.util import parse_value

# Conformity vectors are JSON objects of suites, each mapping the message text
# to the expected field value (decimal, or hex with 0x prefix):
# {"emsa1_sha256_secp256r1_fr": {"This is a tasty burger!": "1114...", ...}, ...}

log = get_logger(__name__)

Suites = Dict[str, List[Tuple[bytes, int]]]


class Failure(NamedTuple):
  suite: str
  message: bytes
  expected: int
  got: int

  def __str__(self):
    return f"{self.suite}: {self.message!r} expected {self.expected} got {self.got}"


def parse(data: dict) -> Suites:
  if not isinstance(data, dict):
    raise ValueError("Vectors should be an object of suites")
  suites = {}
  for suite, pairs in data.items():
    if not isinstance(pairs, dict):
      raise ValueError(f"Suite {suite} should map messages to values")
    try:
      suites[suite] = [(msg.encode(), parse_value(val)) for msg, val in pairs.items()]
    except ValueError as e:
      raise ValueError(f"Suite {suite}: {e}") from None
  return suites


def load(f) -> Suites:
  """Read vectors from a filename or an open text file"""
  if isinstance(f, (str, Path)):
    with open(f, encoding="utf-8") as fh:
      return parse(json.load(fh))
  return parse(json.load(f))


def check(suites: Suites) -> List[Failure]:
  failures = []
  for suite, pairs in suites.items():
    scheme = EMSA1.from_name(suite)
    for msg, expected in pairs:
      # Values outside [0, p) would otherwise be reduced into a match
      if not 0 <= expected < scheme.field.p or not scheme.verify(msg, expected):
        failures.append(Failure(suite, msg, expected, int(scheme.encode(msg))))
    log.debug("Vector suite checked", suite=suite, count=len(pairs), failed=sum(f.suite == suite for f in failures))
  return failures


def check_file(f) -> int:
  """Check all vectors of a file, returning their count. Raises VectorMismatch on failures."""
  suites = load(f)
  failures = check(suites)
  if failures:
    raise VectorMismatch(f"{len(failures)} vectors failed:\n" + "\n".join(map(str, failures)))
  return sum(len(p) for p in suites.values())
