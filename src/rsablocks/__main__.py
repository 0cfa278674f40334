"""The Command Line Interface for the block cipher.

Constructs key files from supplied primes, and encrypts or decrypts lowercase messages with them. Ciphertext is
printed as space separated decimal blocks.

Typical usage example:

    rsablocks keygen --prime-p 43 --prime-q 59 --pub-exponent 13 -p key.pub -P key
    rsablocks encrypt -p key.pub --message stop
    python -m rsablocks decrypt -P key --message "2081 2182"
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import argparse
import pathlib
import sys

import rsablocks

parser = argparse.ArgumentParser(prog="rsablocks", description="Textbook RSA block cipher over lowercase letters.")
parser.add_argument("--version", "-v", action="version", version=f"%(prog)s {rsablocks.__version__}")
parser.add_argument("--quiet", "-q", action="store_true", help="Print results only")
commands = parser.add_subparsers(dest="subcommand", title="Subcommands", required=True)

keygen = commands.add_parser("keygen", help="Construct a key pair from two supplied primes.")
keygen.add_argument("--prime-p", type=int, required=True, help="The first prime of the key pair.")
keygen.add_argument("--prime-q", type=int, required=True, help="The second prime of the key pair.")
keygen.add_argument("--pub-exponent",
                    type=int,
                    default=65537,
                    help="Exponent for the public key. Must be coprime to (p-1)(q-1). Defaults to 65537.")
keygen.add_argument("--public_key", "-p", type=pathlib.Path, required=True, help="Public key destination.")
keygen.add_argument("--private_key", "-P", type=pathlib.Path, required=True, help="Private key destination.")
keygen.add_argument("--overwrite", "-o", action="store_true", help="Replace existing key files.")

encrypt = commands.add_parser("encrypt", help="Encrypt a lowercase message.")
encrypt.add_argument("--public_key", "-p", type=pathlib.Path, required=True, help="Location of the public key file.")
encrypt.add_argument("--message", required=True, help="Lowercase message. If Path start with `P:`")

decrypt = commands.add_parser("decrypt", help="Decrypt ciphertext blocks.")
decrypt.add_argument("--private_key", "-P", type=pathlib.Path, required=True, help="Location of the private key file.")
decrypt.add_argument("--message", required=True, help="Space or comma separated blocks. If Path start with `P:`")


def check_message(mess: str) -> str:
    """Parse message for path-notice."""
    if mess.startswith("P:"):
        with open(mess[2:], "r", encoding="ascii") as f:
            mess = f.read().strip()
    return mess


def parse_blocks(mess: str) -> list[int]:
    """Split a whitespace or comma separated list of ciphertext blocks.

    Raises:
        ValueError: If an entry is not a decimal integer.
    """
    return [int(block) for block in mess.replace(",", " ").split()]


def main(argv: list[str] | None = None) -> None:
    """Dispatches the subcommands, exiting with status 1 on unusable key material or ciphertext."""
    args = parser.parse_args(argv)

    def pspr(text: str):
        """Print only if not in quiet mode."""
        if not args.quiet:
            print(text)

    match args.subcommand:
        case "keygen":
            if not args.overwrite and (args.private_key.exists() or args.public_key.exists()):
                print("Destination private or public key already exists! Use --overwrite to replace it.")
                sys.exit(1)
            try:
                rpk = rsablocks.make_private_key(args.prime_p, args.prime_q, args.pub_exponent)
            except rsablocks.NoInverseError as exc:
                print(f"Key construction failed: {exc}")
                sys.exit(1)
            rsablocks.export_private_key(rpk, args.private_key)
            rsablocks.export_public_key(rpk.pub, args.public_key)
            pspr(f"Key pair constructed, modulus {rpk.n}.")
        case "encrypt":
            rpu = rsablocks.import_public_key(args.public_key)
            ciph = rsablocks.encrypt_message(check_message(args.message), rpu)
            pspr("Ciphertext:")
            print(" ".join(str(block) for block in ciph))
        case "decrypt":
            try:
                blocks = parse_blocks(check_message(args.message))
            except ValueError as exc:
                print(f"Malformed ciphertext: {exc}")
                sys.exit(1)
            rpk = rsablocks.import_private_key(args.private_key)
            pspr("Cleartext:")
            print(rsablocks.decrypt_message(blocks, rpk))


if __name__ == "__main__":
    main()
