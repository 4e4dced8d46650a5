from pkpad import vectors


def main_vectors(args):
  if not args.files:
    raise ValueError("No vector files given")
  for f in args.files:
    count = vectors.check_file(f)
    print(f"{f}: {count} vectors OK")
