"""Data masking for Micro QR Code symbols."""

from __future__ import annotations

from collections.abc import Callable

from fluentkit.microqr_spec import format_info, symbol_width

MASK_COUNT = 4

_PATTERNS: tuple[Callable[[int, int], int], ...] = (
    lambda x, y: y & 1,
    lambda x, y: ((y // 2) + (x // 3)) & 1,
    lambda x, y: (((x * y) & 1) + (x * y) % 3) & 1,
    lambda x, y: (((x + y) & 1) + ((x * y) % 3)) & 1,
)


def _check_mask(mask: int) -> None:
    if not 0 <= mask < MASK_COUNT:
        raise ValueError(f"Micro QR mask out of range: {mask}")


def write_format_information(
    version: int, width: int, frame: bytearray, mask: int, level: int
) -> None:
    """Write the format information bits for the mask into ``frame`` in place."""
    bits = format_info(mask, version, level)
    for i in range(8):
        frame[width * (i + 1) + 8] = 0x84 | (bits & 1)
        bits >>= 1
    for i in range(7):
        frame[width * 8 + 7 - i] = 0x84 | (bits & 1)
        bits >>= 1


def make_masked_frame(width: int, frame: bytes | bytearray, mask: int) -> bytearray:
    """Return a copy of ``frame`` with the data modules XORed by the mask pattern."""
    _check_mask(mask)
    pattern = _PATTERNS[mask]
    masked = bytearray(width * width)
    for y in range(width):
        for x in range(width):
            cell = frame[y * width + x]
            if cell & 0x80:
                masked[y * width + x] = cell
            else:
                masked[y * width + x] = cell ^ (pattern(x, y) == 0)
    return masked


def make_mask(version: int, frame: bytes | bytearray, mask: int, level: int) -> bytearray:
    """Apply the mask and write the matching format information."""
    _check_mask(mask)
    width = symbol_width(version)
    masked = make_masked_frame(width, frame, mask)
    write_format_information(version, width, masked, mask, level)
    return masked


def evaluate_symbol(width: int, frame: bytes | bytearray) -> int:
    """Score a masked symbol by its dark modules on the bottom row and right column."""
    bottom = width * (width - 1)
    sum1 = sum(frame[bottom + x] & 1 for x in range(1, width))
    sum2 = sum(frame[y * width + width - 1] & 1 for y in range(1, width))
    low, high = (sum1, sum2) if sum1 <= sum2 else (sum2, sum1)
    return low * 16 + high


def select_mask(version: int, frame: bytes | bytearray, level: int) -> bytearray | None:
    """Return the masked frame with the highest score, or None if none scores above zero."""
    width = symbol_width(version)
    best: bytearray | None = None
    best_score = 0
    for mask in range(MASK_COUNT):
        candidate = make_mask(version, frame, mask, level)
        score = evaluate_symbol(width, candidate)
        if score > best_score:
            best_score = score
            best = candidate
    return best