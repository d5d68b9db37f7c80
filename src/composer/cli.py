"""Командная строка: вычисление и печать Pi.

    pi-digits --digits 1000 --identity machin
    python -m src.composer --digits 100 --json
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from jsonschema import ValidationError

from src.composer.pi_composer import ComposerConfig, PiComposer, limb_count_for_digits
from src.composer.printer import format_big_real
from src.core.contracts import validate_machin_identity, validate_pi_result
from src.core.domain.identity import IDENTITIES, MachinIdentity, get_identity
from src.core.math.big_real import BigRealConfig, BigRealContractViolation

# Число знаков по умолчанию
DEFAULT_DIGITS = 10000

logger = logging.getLogger(__name__)


def setup_logging(verbosity: int) -> None:
    """Консольное логирование в stderr; -v → INFO, -vv → DEBUG."""
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def load_identity_file(path: Path) -> MachinIdentity:
    """Формула из JSON файла по контракту machin_identity."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    validate_machin_identity(data)
    return MachinIdentity.model_validate(data)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pi-digits",
        description="Compute decimal digits of Pi with Machin-like arctan formulas.",
    )
    parser.add_argument("-d", "--digits", type=int, default=DEFAULT_DIGITS,
                        help="decimal digits after the point (default: %(default)s)")
    parser.add_argument("-i", "--identity", default="gauss", choices=sorted(IDENTITIES),
                        help="arctan formula (default: %(default)s)")
    parser.add_argument("--identity-file", type=Path,
                        help="JSON file with a custom formula, overrides --identity")
    parser.add_argument("--limb-digits", type=int, default=4,
                        help="decimal digits per limb, base = 10**N (default: %(default)s)")
    parser.add_argument("--max-divisor", type=int, default=450,
                        help="p below this divides by p*p in one step; scalars are bounded "
                             "by its square (default: %(default)s)")
    parser.add_argument("--guard-limbs", type=int, default=2,
                        help="extra limbs against truncation error (default: %(default)s)")
    parser.add_argument("--unchecked", action="store_true",
                        help="skip arithmetic precondition checks")
    parser.add_argument("--json", action="store_true",
                        help="print the pi_result JSON contract instead of digits")
    parser.add_argument("--list-identities", action="store_true",
                        help="list known formulas with their Lehmer measure and exit")
    parser.add_argument("-v", "--verbose", action="count", default=0)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if args.list_identities:
        for key, identity in IDENTITIES.items():
            print(f"{key:<8} E={identity.lehmer_measure():.3f}  {identity.describe()}")
        return 0

    if args.digits <= 0:
        parser.error(f"--digits must be positive, got {args.digits}")

    try:
        big_real = BigRealConfig.for_limb_digits(
            args.limb_digits,
            max_safe_divisor=args.max_divisor,
            checked=not args.unchecked,
        )
        config = ComposerConfig(guard_limbs=args.guard_limbs, big_real=big_real)
        if args.identity_file is not None:
            identity = load_identity_file(args.identity_file)
        else:
            identity = get_identity(args.identity)
    except (ValueError, OSError, ValidationError) as e:
        parser.error(str(e))

    composer = PiComposer(config)
    size = limb_count_for_digits(args.digits, big_real)
    logger.info("size=%d limbs, guard=%d", size, config.guard_limbs)
    try:
        if args.json:
            result = composer.compute(args.digits, identity)
        else:
            pi = composer.compose(identity, size + config.guard_limbs)
    except BigRealContractViolation as e:
        parser.error(str(e))

    if args.json:
        data = result.to_contract()
        validate_pi_result(data)
        print(json.dumps(data))
        return 0

    print(identity.describe())
    print()
    # запасные разряды не печатаются
    sys.stdout.write(format_big_real(pi.truncated(size)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
