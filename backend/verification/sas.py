"""
SAS Verification - Code Derivation
==================================
Renders the bytes produced by the SAS key derivation into something two
people can compare out loud or side by side.

Two forms are supported:
- decimal: 5 bytes -> three 13-bit groups -> three numbers in 1000..9191
- emoji:   6 bytes -> seven 6-bit groups  -> seven entries of the emoji table

Bits are read most-significant-first across byte boundaries, the same way
base64 slices its input. Both peers must slice identically or honest users
will see different codes, so the shifts and masks below are protocol
constants, not tunables.

Neither function keeps state: the same bytes always render the same code.
"""

import itertools
import logging
from typing import List, Tuple

from .emoji import EmojiRepresentation, emoji_for_code
from .exceptions import InvalidInputLength


logger = logging.getLogger(__name__)


DECIMAL_SAS_LENGTH = 5
EMOJI_SAS_LENGTH = 6
EMOJI_SAS_SYMBOLS = 7
DECIMAL_OFFSET = 1000  # keeps every number four digits wide
DEFAULT_SEPARATOR = ' '


def _sas_prefix(secret_bytes, length):
    """
    First `length` bytes of the input as immutable unsigned octets.
    Surplus bytes are ignored; short input is rejected, never padded.
    Iterables are consumed only as far as the prefix, so a keystream
    iterator may be passed directly.
    """
    if isinstance(secret_bytes, (str, int)):
        raise TypeError(f'SAS input must be bytes, got {type(secret_bytes).__name__}')
    try:
        buffer = memoryview(secret_bytes)
    except TypeError:
        data = bytes(itertools.islice(secret_bytes, length))
    else:
        data = bytes(buffer.cast('B')[:length])
    if len(data) < length:
        logger.warning('Rejected SAS input: %d bytes, need %d', len(data), length)
        raise InvalidInputLength(length, len(data))
    return data


# ══════════════════════════════════════════════════
# DECIMAL FORM
# ══════════════════════════════════════════════════

def decimal_numbers(secret_bytes) -> Tuple[int, int, int]:
    """
    Three display numbers from the first 5 SAS bytes.

    With bytes B0..B4 (39 of the 40 bits used, low bit of B4 dropped):
        (B0 << 5 | B1 >> 3) + 1000
        ((B1 & 0x7) << 10 | B2 << 2 | B3 >> 6) + 1000
        ((B3 & 0x3F) << 7 | B4 >> 1) + 1000
    """
    b0, b1, b2, b3, b4 = _sas_prefix(secret_bytes, DECIMAL_SAS_LENGTH)
    first = (b0 << 5 | b1 >> 3) + DECIMAL_OFFSET
    second = ((b1 & 0x7) << 10 | b2 << 2 | b3 >> 6) + DECIMAL_OFFSET
    third = ((b3 & 0x3F) << 7 | b4 >> 1) + DECIMAL_OFFSET
    return first, second, third


def to_decimal_code(secret_bytes, separator=DEFAULT_SEPARATOR) -> str:
    """Decimal SAS as text, e.g. '4821 1093 7710'."""
    numbers = decimal_numbers(secret_bytes)
    logger.debug('Rendered decimal SAS')
    return separator.join(str(n) for n in numbers)


# ══════════════════════════════════════════════════
# EMOJI FORM
# ══════════════════════════════════════════════════

def emoji_indices(secret_bytes) -> Tuple[int, ...]:
    """Seven 6-bit table indices from the first 6 SAS bytes (42 of 48 bits)."""
    b0, b1, b2, b3, b4, b5 = _sas_prefix(secret_bytes, EMOJI_SAS_LENGTH)
    return (
        (b0 & 0xFC) >> 2,
        (b0 & 0x03) << 4 | (b1 & 0xF0) >> 4,
        (b1 & 0x0F) << 2 | (b2 & 0xC0) >> 6,
        b2 & 0x3F,
        (b3 & 0xFC) >> 2,
        (b3 & 0x03) << 4 | (b4 & 0xF0) >> 4,
        (b4 & 0x0F) << 2 | (b5 & 0xC0) >> 6,
    )


def to_emoji_code(secret_bytes) -> List[EmojiRepresentation]:
    """
    Emoji SAS: seven table entries in slice order.
    Peers compare position by position, so order is part of the code.
    """
    code = [emoji_for_code(index) for index in emoji_indices(secret_bytes)]
    logger.debug('Rendered emoji SAS (%d symbols)', len(code))
    return code
