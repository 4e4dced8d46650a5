import sys

from pkpad import curves, hashes
from pkpad.emsa1 import EMSA1
from pkpad.util import parse_value


def scheme(args) -> EMSA1:
  return EMSA1(curves.get(args.curve).field(args.field), hashes.get(args.hash))


def read_message(arg) -> bytes:
  """Message text from command line (UTF-8), or bytes from stdin with -"""
  if arg in (None, '-'):
    return sys.stdin.buffer.read()
  return arg.encode()


def main_encode(args):
  if len(args.files) > 1:
    raise ValueError("Only one message may be given, quote it if it contains spaces")
  s = scheme(args)
  el = s.encode(read_message(args.files[0] if args.files else None))
  print(el.hex() if args.hex else el)


def main_verify(args):
  if len(args.files) != 2:
    raise ValueError("Both message and value are required")
  s = scheme(args)
  msg, value = args.files
  value = parse_value(value)
  if not 0 <= value < s.field.p:
    raise ValueError(f"Value is not an element of {s.field.name or 'the field'}")
  if not s.verify(read_message(msg), value):
    sys.stderr.write(f"Mismatch: not the {s.name} encoding of the message\n")
    sys.exit(11)
  print("OK")
