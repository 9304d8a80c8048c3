"""Command-line front end.

Usage:
    testnumbers bsn 5
    testnumbers iban 3 INGB
    testnumbers loonheffingennummer 2 --suffix
    testnumbers validate-bsn 123456782
    testnumbers validate-iban NL91 ABNA 0417 1643 00
"""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from testnumbers.core.config import AppSettings
from testnumbers.core.exceptions import InvalidBankCodeError, MissingArgumentError
from testnumbers.core.logging_setup import configure_logging
from testnumbers.engines import DUTCH_BANK_CODES, create_engines

EPILOG = f"""\
Options:
  count   Number of test numbers to generate (default: 1)
  bank    Bank code for IBAN (default: random)
          Available banks: {', '.join(DUTCH_BANK_CODES)}

Examples:
  testnumbers bsn              Generate 1 BSN
  testnumbers bsn 5            Generate 5 BSNs
  testnumbers iban 3 INGB      Generate 3 ING Bank IBANs
  testnumbers validate-bsn 123456782
  testnumbers validate-iban NL91ABNA0417164300
"""


class _Parser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on usage errors."""

    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="testnumbers",
        description="Generate valid Dutch test numbers",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible output")
    parser.add_argument("--log-level", default=None, help="Logging level (default: from settings)")
    sub = parser.add_subparsers(dest="command", metavar="<command>")

    p = sub.add_parser("bsn", help="Generate BSN number(s)")
    p.add_argument("count", nargs="?", default=None)

    p = sub.add_parser("iban", help="Generate IBAN number(s)")
    p.add_argument("count", nargs="?", default=None)
    p.add_argument("bank", nargs="?", default=None)

    p = sub.add_parser("loonheffingennummer", help="Generate loonheffingennummer(s)")
    p.add_argument("count", nargs="?", default=None)
    p.add_argument("--suffix", action="store_true", help="Append the L01 suffix")

    p = sub.add_parser("validate-bsn", help="Validate a BSN number")
    p.add_argument("value", nargs="?", default=None)

    p = sub.add_parser("validate-iban", help="Validate an IBAN number")
    p.add_argument("value", nargs="*")

    p = sub.add_parser("validate-loonheffingennummer", help="Validate a loonheffingennummer")
    p.add_argument("value", nargs="?", default=None)

    sub.add_parser("help", help="Show this help message")
    return parser


def parse_count(raw: str | None) -> int:
    """Positive integer, falling back to 1 for missing or unusable input."""
    try:
        count = int(raw) if raw is not None else 1
    except ValueError:
        return 1
    return count if count > 0 else 1


def _print_list(title: str, values: Sequence[str]) -> None:
    print(f"\nGenerated {title}:")
    for value in values:
        print(f"  {value}")
    print()


def _print_verdict(label: str, value: str, valid: bool) -> None:
    print(f"\n{label} {value} is {'VALID' if valid else 'INVALID'}\n")


def main(argv: Sequence[str] | None = None, settings: AppSettings | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if settings is None:
        settings = AppSettings()
    if args.seed is not None:
        settings = settings.model_copy(
            update={"generator": settings.generator.model_copy(update={"seed": args.seed})}
        )
    configure_logging(args.log_level or settings.log_level)

    if args.command in (None, "help"):
        parser.print_help()
        return 0

    bsn, iban, loonheffing = create_engines(settings)

    try:
        if args.command == "bsn":
            _print_list("BSN number(s)", bsn.generate_many(parse_count(args.count)))

        elif args.command == "iban":
            count_arg, bank_arg = args.count, args.bank
            if bank_arg is None and count_arg is not None and not count_arg.lstrip("-").isdigit():
                count_arg, bank_arg = None, count_arg
            values = iban.generate_many(parse_count(count_arg), bank_arg)
            _print_list("IBAN number(s)", [iban.format(v) for v in values])

        elif args.command == "loonheffingennummer":
            values = loonheffing.generate_many(parse_count(args.count))
            if args.suffix:
                values = [loonheffing.format(v) for v in values]
            _print_list("loonheffingennummer(s)", values)

        elif args.command == "validate-bsn":
            if not args.value:
                raise MissingArgumentError("number", "Please provide a BSN to validate")
            _print_verdict("BSN", args.value, bsn.validate(args.value))

        elif args.command == "validate-iban":
            if not args.value:
                raise MissingArgumentError("iban", "Please provide an IBAN to validate")
            value = " ".join(args.value)
            _print_verdict("IBAN", value, iban.validate(value))

        elif args.command == "validate-loonheffingennummer":
            if not args.value:
                raise MissingArgumentError(
                    "number", "Please provide a loonheffingennummer to validate"
                )
            suffixed = args.value.endswith(loonheffing.suffix)
            valid = loonheffing.validate(args.value, suffixed=suffixed)
            _print_verdict("Loonheffingennummer", args.value, valid)

    except (InvalidBankCodeError, MissingArgumentError) as exc:
        print(str(exc), file=sys.stderr)
        return 1
    return 0


def run() -> None:
    """Console-script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
