"""
NDEC command line
=================
Thin file-in / file-out shell over NDECCipher.

    ndec encrypt -p1 PASS1 -p2 PASS2 [-iv 1c] -i plain.txt -o cipher.bin
    ndec decrypt -p1 PASS1 -p2 PASS2 -i cipher.bin -o plain.txt

encrypt writes iv(1) || ciphertext. Without -iv a random byte is used.
decrypt reads the same layout back; -iv is ignored there.
"""

import sys
import logging
import argparse
import binascii
from typing import Optional, Sequence

from .cipher import NDECCipher

logger = logging.getLogger(__name__)


def parse_iv(text: Optional[str]) -> int:
    """Decode a single hex byte, or pick a random one when text is empty."""
    if not text:
        return NDECCipher.random_iv()
    try:
        raw = binascii.unhexlify(text)
    except (binascii.Error, ValueError):
        raise ValueError("IV must be a single hex byte") from None
    if len(raw) != 1:
        raise ValueError("IV must be a single hex byte")
    return raw[0]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ndec",
        description="Encrypt or decrypt files in the NDEC legacy format.",
    )
    parser.add_argument("command", choices=["encrypt", "decrypt"])
    parser.add_argument("-p1", dest="password1", required=True,
                        help="first password (keystream)")
    parser.add_argument("-p2", dest="password2", required=True,
                        help="second password")
    parser.add_argument("-iv", dest="iv", default="",
                        help="IV as one hex byte, random if omitted (encrypt only)")
    parser.add_argument("-i", dest="input", required=True, help="input file")
    parser.add_argument("-o", dest="output", required=True, help="output file")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="debug logging")
    return parser


def run(args: argparse.Namespace) -> None:
    with open(args.input, "rb") as f:
        data = f.read()

    nd = NDECCipher(args.password1, args.password2)

    if args.command == "encrypt":
        iv = parse_iv(args.iv)
        data = nd.seal(data, iv)
        logger.info(f"Encrypted {args.input} -> {args.output} (iv=0x{iv:02x}, {len(data)} bytes)")
    else:
        data = nd.decrypt(data)
        logger.info(f"Decrypted {args.input} -> {args.output} ({len(data)} bytes)")

    with open(args.output, "wb") as f:
        f.write(data)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format=" %(message)s")
    try:
        run(args)
    except (ValueError, OSError) as e:
        logger.error(f"ndec: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
