"""
presence — a value container for "maybe a value".

Say "this might be missing" in a return type instead of returning None,
and deal with the missing case once, at the end of a chain:

    from presence import Optional

    def find_port(config: dict) -> Optional[int]:
        return Optional.of_nullable(config.get("port"))

    port = (
        find_port(config)
        .map(int)
        .filter(lambda p: 0 < p < 65536)
        .or_else(8080)
    )
"""

import logging

from presence.optional import EMPTY, Empty, Optional, Present
from presence.errors import (
    ErrorCode,
    NoSuchElementError,
    NullResultError,
    NullValueError,
    OptionalError,
)
from presence.assertions import OptionalAssertions

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Optional",
    "Present",
    "Empty",
    "EMPTY",
    "ErrorCode",
    "OptionalError",
    "NullValueError",
    "NoSuchElementError",
    "NullResultError",
    "OptionalAssertions",
]

__version__ = "1.0.0"
