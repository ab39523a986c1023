"""
Command-line interface.

    secretgen password --length 24 --no-symbols
    secretgen passphrase --words 5 --case capitalize --numbers
    secretgen format "2u4l2d2{#$%}"
    secretgen format --preset strong
    secretgen pin --length 6
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Callable, Sequence

from .config import (
    CharClass,
    PassphraseConfig,
    PasswordConfig,
    PinConfig,
    Separator,
    WordCase,
)
from .errors import SecretGenError
from .models import GeneratedSecret
from .passphrase import generate_passphrase
from .password import generate_password
from .pattern import generate_from_pattern, preset_pattern
from .pin import generate_pin
from .secure_random import SecureRandom
from .strength import strength_description

logger = logging.getLogger(__name__)

SEPARATOR_NAMES = {
    "hyphen": Separator.HYPHEN,
    "underscore": Separator.UNDERSCORE,
    "space": Separator.SPACE,
    "period": Separator.PERIOD,
    "none": Separator.NONE,
}


def _password(args: argparse.Namespace, rng: SecureRandom | None) -> GeneratedSecret:
    classes = {
        CharClass.UPPER: args.upper,
        CharClass.LOWER: args.lower,
        CharClass.DIGIT: args.digits,
        CharClass.SYMBOL: args.symbols,
    }
    config = PasswordConfig(
        length=args.length,
        classes=frozenset(c for c, enabled in classes.items() if enabled),
        custom_chars=args.custom,
        exclude_similar=args.exclude_similar,
        exclude_ambiguous=args.exclude_ambiguous,
        min_digits=args.min_digits,
        min_symbols=args.min_symbols,
        require_each_class=args.require_each,
    )
    return generate_password(config, rng)


def _passphrase(args: argparse.Namespace, rng: SecureRandom | None) -> GeneratedSecret:
    config = PassphraseConfig(
        word_count=args.words,
        separator=SEPARATOR_NAMES[args.separator],
        word_case=WordCase(args.case),
        include_numbers=args.numbers or args.insert_numbers,
        insert_numbers_randomly=args.insert_numbers,
        custom_words=tuple(args.word_list or ()),
    )
    return generate_passphrase(config, rng)


def _format(args: argparse.Namespace, rng: SecureRandom | None) -> GeneratedSecret:
    pattern = preset_pattern(args.preset) if args.preset else args.pattern
    return generate_from_pattern(pattern, rng)


def _pin(args: argparse.Namespace, rng: SecureRandom | None) -> GeneratedSecret:
    return generate_pin(PinConfig(length=args.length), rng)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="secretgen",
        description="Generate passwords, passphrases, patterned secrets and PINs.",
    )
    parser.add_argument("--count", type=int, default=1, help="How many secrets to generate")
    parser.add_argument("--json", action="store_true", help="Output as JSON array")
    parser.add_argument(
        "--quantum",
        action="store_true",
        help="Mix quantum-simulator bits into the OS random source",
    )
    parser.add_argument(
        "--log-level",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        default="WARNING",
        help="Logging verbosity",
    )
    sub = parser.add_subparsers(dest="mode", required=True)

    pw = sub.add_parser("password", help="Random characters from selected classes")
    pw.add_argument("--length", type=int, default=16)
    pw.add_argument("--no-upper", dest="upper", action="store_false", help="Exclude uppercase letters")
    pw.add_argument("--no-lower", dest="lower", action="store_false", help="Exclude lowercase letters")
    pw.add_argument("--no-digits", dest="digits", action="store_false", help="Exclude digits")
    pw.add_argument("--no-symbols", dest="symbols", action="store_false", help="Exclude symbols")
    pw.add_argument("--custom", default="", help="Extra characters to draw from")
    pw.add_argument("--exclude-similar", action="store_true", help="Avoid 0 O 1 l I")
    pw.add_argument("--exclude-ambiguous", action="store_true", help="Avoid brackets, quotes and punctuation")
    pw.add_argument("--min-digits", type=int, default=1)
    pw.add_argument("--min-symbols", type=int, default=1)
    pw.add_argument(
        "--no-require-each",
        dest="require_each",
        action="store_false",
        help="Do not enforce at least one character from each selected class",
    )
    pw.set_defaults(handler=_password)

    pp = sub.add_parser("passphrase", help="Random dictionary words")
    pp.add_argument("--words", type=int, default=4)
    pp.add_argument("--separator", choices=sorted(SEPARATOR_NAMES), default="hyphen")
    pp.add_argument("--case", choices=[c.value for c in WordCase], default=WordCase.LOWER.value)
    pp.add_argument("--numbers", action="store_true", help="Append 2-4 digits")
    pp.add_argument("--insert-numbers", action="store_true", help="Insert 1-2 digits into random words")
    pp.add_argument("--word-list", nargs="+", help="Use these words instead of the built-in list")
    pp.set_defaults(handler=_passphrase)

    fmt = sub.add_parser("format", help="Secret from a pattern such as 3u2l4d or 2{#$%}")
    group = fmt.add_mutually_exclusive_group(required=True)
    group.add_argument("pattern", nargs="?")
    group.add_argument("--preset", help="Readable preset (easy, moderate, strong, ultra) or template name")
    fmt.set_defaults(handler=_format)

    pin = sub.add_parser("pin", help="Numeric PIN")
    pin.add_argument("--length", type=int, default=4)
    pin.set_defaults(handler=_pin)

    return parser


def _make_rng(quantum: bool) -> SecureRandom | None:
    if not quantum:
        return None
    # qiskit is slow to import, so only load it when asked for.
    from .quantum_engine import quantum_random

    return quantum_random()


def _print_secret(secret: GeneratedSecret) -> None:
    print(secret.value)
    print(
        f"  {secret.strength_label.value} ({secret.strength_score}/9), "
        f"{secret.entropy_bits:.1f} bits, crack time: {secret.crack_time_label}"
    )
    description = strength_description(secret.strength_label, secret.kind)
    if description:
        print(f"  {description}")
    for warning in secret.warnings:
        print(f"  warning: {warning}")


def main(argv: Sequence[str] | None = None) -> int:
    """
    Entry point for `secretgen`, `python -m secretgen` or `run_secretgen.py`.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    handler: Callable[[argparse.Namespace, SecureRandom | None], GeneratedSecret] = args.handler
    try:
        rng = _make_rng(args.quantum)
        results = [handler(args, rng) for _ in range(max(1, args.count))]
    except (SecretGenError, KeyError) as exc:
        logger.error(str(exc))
        return 2

    if args.json:
        print(json.dumps([s.to_dict() for s in results], indent=2))
    else:
        for secret in results:
            _print_secret(secret)

    return 0
