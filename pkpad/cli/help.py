import sys
from typing import NoReturn

import pkpad
from pkpad import curves, hashes

T = "\x1B[1;44m"  # titlebar (white on blue)
H = "\x1B[1;37m"  # heading (bright white)
C = "\x1B[0;34m"  # command (dark blue)
F = "\x1B[1;34m"  # flag (light blue)
D = "\x1B[1;30m"  # dark / syntax markup
N = "\x1B[0m"     # normal color

usage = dict(
  encode=f"{C}pkpad {F}encode {D}[{F}-c {N}curve{D}] [{F}-f {N}fr{D}|{N}fq{D}] [{F}-H {N}hash{D}] [{F}-x{D}] [{N}message {D}|{N} -{D}]{N}\n",
  verify=f"{C}pkpad {F}verify {D}[{F}-c {N}curve{D}] [{F}-f {N}fr{D}|{N}fq{D}] [{F}-H {N}hash{D}]{N} message value\n",
  vectors=f"{C}pkpad {F}vectors {N}emsa.json {D}[{N}more.json{D}]… —{N} check conformity vectors\n",
)

optionshelp = f"""\
  {F}-c {N}curve         Curve whose field is used (default secp256r1)
  {F}-f {N}fr{D}|{N}fq         Scalar field (group order) or base field (default fr)
  {F}-H {N}hash          Hash algorithm (default sha256)
"""

usagetext = dict(
  encode=f"""\
Encode a message into a field element using EMSA1. The message is given as
text on command line, or read from stdin as bytes if omitted or {F}-{N}.

{optionshelp}  {F}-x{N}                Print the element as big-endian hex instead of decimal
""",
  verify=f"""\
Check that the value (decimal, or hex with 0x) is the EMSA1 encoding of the
message. Exits with status 11 if it is not.

{optionshelp}""",
  vectors=f"""\
Check files of conformity vectors, JSON objects of suites such as
{D}{{{N}"emsa1_sha256_secp256r1_fr": {D}{{{N}"message": "decimal value", {D}…}}}}{N}
""",
)

cmdhelp = {k: f"{usage[k]}\n{usagetext.get(k, '')}".rstrip("\n") + "\n" for k in usage}

introduction = f"""\
{T}{f"pkpad {pkpad.__version__} - EMSA1 message encoding into prime fields":78}{N}
"""

shorthelp = f"""\
{introduction}
{"".join(usage.values())}
Curves: {", ".join(curves.curves)}
Hashes: {", ".join(hashes.algorithms)}
"""

allcommands = '\n\n'.join(cmdhelp.values())

fullhelp = f"""\
{shorthelp}
{allcommands}"""

def print_help(modehelp: str = None, error: str = None) -> NoReturn:
  stream = sys.stderr if error else sys.stdout
  if modehelp is None: stream.write(shorthelp)
  elif (h := cmdhelp.get(modehelp)): stream.write(h)
  else: stream.write(fullhelp)
  if error:
    stream.write(f"\n{error}\n")
    sys.exit(1)
  sys.exit(0)

def print_version() -> NoReturn:
  print(f"pkpad {pkpad.__version__}")
  sys.exit(0)
