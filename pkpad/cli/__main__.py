import sys
from typing import NoReturn

import colorama

from pkpad.cli.args import argparse
from pkpad.cli.encode import main_encode, main_verify
from pkpad.cli.vectors import main_vectors
from pkpad.exceptions import VectorMismatch
from pkpad.log import init_logging

modes = {
  "encode": main_encode,
  "verify": main_verify,
  "vectors": main_vectors,
}


def main() -> NoReturn:
  """
  The main CLI entry point.

  Consider calling pkpad.EMSA1 directly if you use from Python code.

  System exit codes:
  * 0 The requested function was completed successfully
  * 1 CLI argument error
  * 2 Interrupted
  * 10 Invalid configuration or input value
  * 11 Verification mismatch or failing conformity vectors

  :raises SystemExit: on normal exit or any expected error, including KeyboardInterrupt
  :raises Exception: on unexpected error (report a bug), or on any error with `--debug`
  """
  colorama.just_fix_windows_console()
  # CLI argument processing
  args = argparse()
  init_logging(debug=bool(args.debug))

  # Run the mode-specific main function
  if args.debug:
    modes[args.mode](args)  # --debug makes us not catch errors
    sys.exit(0)
  try:
    modes[args.mode](args)  # Normal run
  except VectorMismatch as e:
    sys.stderr.write(f"{e}\n")
    sys.exit(11)
  except ValueError as e:
    sys.stderr.write(f"Error: {e}\n")
    sys.exit(10)
  except KeyboardInterrupt:
    sys.stderr.write("Interrupted.\n")
    sys.exit(2)
  sys.exit(0)

if __name__ == "__main__":
  main()
