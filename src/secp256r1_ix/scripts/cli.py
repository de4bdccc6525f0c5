# src/secp256r1_ix/scripts/cli.py
"""
Command-line tool for building secp256r1 verification instruction data.

Usage:
    secp256r1-ix encode --message hello --pubkey 02... --signature 0a... [--repeat N]
    secp256r1-ix encode --file entries.json
    secp256r1-ix inspect <hex>

Environment Variables:
    SECP256R1_LOG_LEVEL     Log level (default: WARNING)
    SECP256R1_DEBUG         Force DEBUG logging (default: false)
"""
from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from secp256r1_ix.core.errors import Secp256r1Error
from secp256r1_ix.core.settings import settings
from secp256r1_ix.models.entry import normalize
from secp256r1_ix.schemas.entry import load_entries_json
from secp256r1_ix.services.encoder import Secp256r1Instruction, decode_offsets
from secp256r1_ix.utils.hexstr import hex_to_bytes

EXIT_SUCCESS = 0
EXIT_INPUT_ERROR = 1

logger = logging.getLogger(__name__)


def setup_logging(level: str) -> None:
    """Configure root logging for the CLI."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=settings.app_name,
        description="Build instruction data for the secp256r1 signature-verification program.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    encode_parser = subparsers.add_parser("encode", help="Encode entries to hex instruction data")
    source = encode_parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--file", type=Path, help="JSON array of {message, pubkey, signature}")
    source.add_argument("--message", help="Message text, or 0x-prefixed hex")
    encode_parser.add_argument("--pubkey", help="Hex-encoded compressed public key")
    encode_parser.add_argument("--signature", help="Hex-encoded r||s signature")
    encode_parser.add_argument(
        "--repeat", type=int, default=1, help="Repeat the single entry N times"
    )

    inspect_parser = subparsers.add_parser("inspect", help="Print the offsets table of hex data")
    inspect_parser.add_argument("data", help="Hex-encoded instruction data")
    return parser


def _encode(args: argparse.Namespace, parser: argparse.ArgumentParser) -> str:
    if args.file is not None:
        try:
            raw = args.file.read_bytes()
        except OSError as err:
            raise Secp256r1Error(f"Cannot read {args.file}: {err.strerror or err}") from err
        entries = load_entries_json(raw)
    else:
        if args.pubkey is None or args.signature is None:
            parser.error("--pubkey and --signature are required with --message")
        if args.repeat < 1:
            parser.error("--repeat must be at least 1")
        entries = [normalize(args.message, args.pubkey, args.signature)] * args.repeat
    logger.info("Encoding %d entries", len(entries))
    return Secp256r1Instruction(entries).to_hex()


def _inspect(args: argparse.Namespace) -> str:
    try:
        data = hex_to_bytes(args.data)
    except ValueError as err:
        raise Secp256r1Error(f"Invalid hex data: {err}") from err
    lines = [f"count={data[0] if data else 0}"]
    for index, offsets in enumerate(decode_offsets(data)):
        lines.append(
            f"[{index}] signature={offsets.signature_offset} "
            f"pubkey={offsets.public_key_offset} "
            f"message={offsets.message_data_offset}+{offsets.message_data_size}"
        )
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return a process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(settings.effective_log_level)

    try:
        if args.command == "encode":
            output = _encode(args, parser)
        else:
            output = _inspect(args)
    except (Secp256r1Error, ValidationError) as err:
        print(f"error: {err}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    print(output)
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
