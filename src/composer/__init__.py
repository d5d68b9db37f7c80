"""
Pi Composer: сборка Pi из арккотангенсов, печать и командная строка.
"""

from src.composer.pi_composer import (
    ComposerConfig,
    PiComposer,
    compute_pi,
    limb_count_for_digits,
)
from src.composer.printer import LIMBS_PER_LINE, format_big_real, format_decimal

__all__ = [
    "ComposerConfig",
    "PiComposer",
    "compute_pi",
    "limb_count_for_digits",
    "LIMBS_PER_LINE",
    "format_big_real",
    "format_decimal",
]
