"""
wordshard CLI
"""

import argparse
import sys
from typing import List, Optional

from pydantic import ValidationError

from . import __version__
from .config import get_settings
from .encoding import EncodingParameters
from .erasure import decode, encode_stream
from .errors import WordshardError
from .log import setup_logging
from .shamir import generate_shares, restore_secret
from .words import decode_phrase


def _column_list(text: str) -> List[int]:
    try:
        return [int(part) for part in text.split(",") if part.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected comma-separated column numbers, got {text!r}")


def cmd_generate(args) -> int:
    try:
        secret = decode_phrase(args.secret) if args.secret else None
        share_set = generate_shares(args.total, args.required, args.words, secret=secret)
    except WordshardError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1
    print(f"Secret: {share_set.secret_phrase}")
    for i, phrase in enumerate(share_set.shares, start=1):
        print(f"Share {i}: {phrase}")
    return 0


def cmd_restore(args) -> int:
    try:
        secret_phrase = restore_secret(args.required, args.total, args.phrases)
    except WordshardError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1
    print(f"Secret: {secret_phrase}")
    return 0


def cmd_demo(args) -> int:
    try:
        if args.encoding:
            encoding = EncodingParameters.parse(args.encoding)
        else:
            encoding = get_settings().encoding
        data = args.text.encode("utf-8")
        stream = encode_stream(data, encoding)
        print(f"Bytes: {list(data)}")
        print(f"Encoding: {encoding} ({stream.row_count} bytes per column)")
        for i, column in enumerate(stream.columns):
            print(f"Column {i}: {column.hex()}")
        erased = stream.erase(*args.erase)
        recovered = decode(erased)
    except WordshardError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1
    print(f"✅ Recovered {recovered.decode('utf-8', errors='replace')!r} "
          f"with columns {args.erase} erased")
    return 0


def main(argv: Optional[list] = None) -> int:
    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"❌ Invalid configuration: {e}", file=sys.stderr)
        return 1

    parser = argparse.ArgumentParser(description="Reed-Solomon word-phrase secret sharing")
    parser.add_argument("--version", action="version", version=f"wordshard {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="command")

    gen_p = sub.add_parser("generate", help="Split a secret into share phrases")
    gen_p.add_argument("--total", type=int, default=settings.default_total, help="Shares to produce")
    gen_p.add_argument("--required", type=int, default=settings.default_required,
                       help="Shares needed to restore")
    gen_p.add_argument("--words", type=int, default=settings.default_word_count,
                       help="Words in the secret phrase")
    gen_p.add_argument("--secret", help="Secret phrase to split (random if omitted)")
    gen_p.set_defaults(func=cmd_generate)

    restore_p = sub.add_parser("restore", help="Restore a secret from share phrases")
    restore_p.add_argument("phrases", nargs="+", help="Share phrases, one quoted argument each")
    restore_p.add_argument("--total", type=int, default=settings.default_total,
                           help="Shares originally produced")
    restore_p.add_argument("--required", type=int, default=settings.default_required,
                           help="Shares needed to restore")
    restore_p.set_defaults(func=cmd_restore)

    demo_p = sub.add_parser("demo", help="Encode text, erase columns and decode it again")
    demo_p.add_argument("text", nargs="?", default="Test string", help="Text to encode")
    demo_p.add_argument("--encoding",
                        help=f"Encoding as rs=<data>.<code> (default: {settings.default_encoding})")
    demo_p.add_argument("--erase", type=_column_list, default=[],
                        help="Comma-separated columns to erase, e.g. 0,1,8,9")
    demo_p.set_defaults(func=cmd_demo)

    args = parser.parse_args(argv)
    setup_logging("debug" if args.verbose else settings.log_level, settings.log_format)
    if not args.command:
        parser.print_help()
        return 0
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
