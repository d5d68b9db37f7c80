"""
Domain models and value objects.

Contains Machin-like identities and the Pi request/result models.
"""

from src.core.domain.identity import (
    GAUSS,
    HUTTON_1,
    HUTTON_2,
    IDENTITIES,
    MACHIN,
    ArctanTerm,
    MachinIdentity,
    get_identity,
)
from src.core.domain.pi_result import PiRequest, PiResult

__all__ = [
    # Identities
    "ArctanTerm",
    "MachinIdentity",
    "GAUSS",
    "HUTTON_1",
    "HUTTON_2",
    "MACHIN",
    "IDENTITIES",
    "get_identity",
    # Request / result
    "PiRequest",
    "PiResult",
]
