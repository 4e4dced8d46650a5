import json
import sys
from io import BytesIO, TextIOWrapper

import pytest

from pkpad.cli.__main__ import main
from pkpad.cli.args import argparse

burger = "This is a tasty burger!"
burger_value = "111474717792720247796999809655932432881783035037226574051829933946736885398526"


def test_argparser(capsys):
  sys.argv = "pkpad encode -c bls12_381 --hash sha1 -x message".split()
  a = argparse()
  assert a.mode == "encode"
  assert a.curve == "bls12_381"
  assert a.hash == "sha1"
  assert a.field == "fr"
  assert a.hex is True
  assert a.files == ["message"]
  cap = capsys.readouterr()
  assert not cap.out
  assert not cap.err

  # Combined short flags, parameters taken in order
  sys.argv = "pkpad enc -xfH fq sha512 -".split()
  a = argparse()
  assert a.hex is True
  assert a.field == "fq"
  assert a.hash == "sha512"
  assert a.files == ["-"]

  # Messages that look like flags
  sys.argv = "pkpad verify -- -x 123".split()
  a = argparse()
  assert a.mode == "verify"
  assert a.files == ["-x", "123"]

  # Missing argument parameter
  sys.argv = "pkpad encode -c".split()
  with pytest.raises(SystemExit) as exc:
    argparse()
  assert exc.value.code == 1
  cap = capsys.readouterr()
  assert not cap.out
  assert "Argument parameter missing" in cap.err

  # Flag not known by this mode
  sys.argv = "pkpad vectors -x file".split()
  with pytest.raises(SystemExit) as exc:
    argparse()
  assert exc.value.code == 1
  assert "Unknown argument" in capsys.readouterr().err


def test_help(capsys):
  sys.argv = ["pkpad"]
  with pytest.raises(SystemExit) as exc:
    argparse()
  assert exc.value.code == 0
  cap = capsys.readouterr()
  assert "EMSA1" in cap.out
  assert "secp256r1" in cap.out
  assert not cap.err

  sys.argv = "pkpad help verify".split()
  with pytest.raises(SystemExit) as exc:
    argparse()
  assert exc.value.code == 0
  assert "status 11" in capsys.readouterr().out

  sys.argv = "pkpad encode --help".split()
  with pytest.raises(SystemExit):
    argparse()
  assert "big-endian hex" in capsys.readouterr().out

  sys.argv = "pkpad --version".split()
  with pytest.raises(SystemExit) as exc:
    argparse()
  assert exc.value.code == 0
  assert capsys.readouterr().out.startswith("pkpad ")

  sys.argv = "pkpad nonsense".split()
  with pytest.raises(SystemExit) as exc:
    argparse()
  assert exc.value.code == 1
  assert "Invalid or missing command" in capsys.readouterr().err


def test_encode(capsys):
  sys.argv = ["pkpad", "encode", burger]
  with pytest.raises(SystemExit) as exc:
    main()
  assert exc.value.code == 0
  cap = capsys.readouterr()
  assert cap.out == f"{burger_value}\n"
  assert not cap.err

  sys.argv = ["pkpad", "encode", "-x", "-c", "P-256", "-H", "sha2-256", burger]
  with pytest.raises(SystemExit) as exc:
    main()
  assert exc.value.code == 0
  assert capsys.readouterr().out == f"{int(burger_value):064x}\n"


def test_encode_stdin(capsys, monkeypatch):
  monkeypatch.setattr(sys, "stdin", TextIOWrapper(BytesIO(burger.encode())))
  sys.argv = "pkpad encode -".split()
  with pytest.raises(SystemExit) as exc:
    main()
  assert exc.value.code == 0
  assert capsys.readouterr().out == f"{burger_value}\n"


def test_verify(capsys):
  sys.argv = ["pkpad", "verify", burger, burger_value]
  with pytest.raises(SystemExit) as exc:
    main()
  assert exc.value.code == 0
  assert capsys.readouterr().out == "OK\n"

  sys.argv = ["pkpad", "verify", burger, hex(int(burger_value))]
  with pytest.raises(SystemExit) as exc:
    main()
  assert exc.value.code == 0
  assert capsys.readouterr().out == "OK\n"

  # Leading zeros are still decimal
  sys.argv = ["pkpad", "verify", burger, "000" + burger_value]
  with pytest.raises(SystemExit) as exc:
    main()
  assert exc.value.code == 0
  assert capsys.readouterr().out == "OK\n"

  sys.argv = ["pkpad", "verify", "This is a nasty burger!", burger_value]
  with pytest.raises(SystemExit) as exc:
    main()
  assert exc.value.code == 11
  cap = capsys.readouterr()
  assert not cap.out
  assert "Mismatch" in cap.err


def test_errors(capsys):
  sys.argv = ["pkpad", "encode", "-c", "secp999r1", burger]
  with pytest.raises(SystemExit) as exc:
    main()
  assert exc.value.code == 10
  assert "Error: Unknown curve 'secp999r1'" in capsys.readouterr().err

  sys.argv = ["pkpad", "verify", burger, "burger"]
  with pytest.raises(SystemExit) as exc:
    main()
  assert exc.value.code == 10
  assert "Invalid field value" in capsys.readouterr().err

  sys.argv = ["pkpad", "verify", burger]
  with pytest.raises(SystemExit) as exc:
    main()
  assert exc.value.code == 10

  # Values must be field elements
  sys.argv = ["pkpad", "verify", "-c", "bn254", burger, str(2**254)]
  with pytest.raises(SystemExit) as exc:
    main()
  assert exc.value.code == 10
  assert "not an element of bn254_fr" in capsys.readouterr().err

  # Out of range values are input errors, the scheme itself is fine
  sys.argv = ["pkpad", "verify", "--debug", "--", burger, "-1"]
  with pytest.raises(ValueError) as exc:
    main()
  assert type(exc.value) is ValueError
  assert "not an element of secp256r1_fr" in str(exc.value)

  # Only decimal and 0x hex
  for value in "0o17", "0b1", "1_000":
    sys.argv = ["pkpad", "verify", burger, value]
    with pytest.raises(SystemExit) as exc:
      main()
    assert exc.value.code == 10
    assert "Invalid field value" in capsys.readouterr().err

  # With --debug the exception is not caught
  sys.argv = ["pkpad", "encode", "--debug", "-H", "md5", burger]
  with pytest.raises(ValueError):
    main()


def test_vectors(capsys, tmp_path):
  f = tmp_path / "emsa.json"
  f.write_text(json.dumps({"emsa1_sha256_secp256r1_fr": {burger: burger_value}}))
  sys.argv = ["pkpad", "vectors", str(f)]
  with pytest.raises(SystemExit) as exc:
    main()
  assert exc.value.code == 0
  assert capsys.readouterr().out == f"{f}: 1 vectors OK\n"

  f.write_text(json.dumps({"emsa1_sha256_secp256r1_fr": {burger: "1"}}))
  with pytest.raises(SystemExit) as exc:
    main()
  assert exc.value.code == 11
  assert "1 vectors failed" in capsys.readouterr().err

  f.write_text("null")
  with pytest.raises(SystemExit) as exc:
    main()
  assert exc.value.code == 10
  assert "Error: Vectors should be an object of suites" in capsys.readouterr().err
