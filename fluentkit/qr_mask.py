"""Data masking and mask selection for QR Code symbols."""

from __future__ import annotations

from collections.abc import Callable, Sequence

MASK_COUNT = 8

# Demerit coefficients.
N1 = 3
N2 = 3
N3 = 40
N4 = 10

_PATTERNS: tuple[Callable[[int, int], int], ...] = (
    lambda x, y: (x + y) & 1,
    lambda x, y: y & 1,
    lambda x, y: x % 3,
    lambda x, y: (x + y) % 3,
    lambda x, y: ((y // 2) + (x // 3)) & 1,
    lambda x, y: ((x * y) & 1) + (x * y) % 3,
    lambda x, y: (((x * y) & 1) + (x * y) % 3) & 1,
    lambda x, y: (((x * y) % 3) + ((x + y) & 1)) & 1,
)


def _check_mask(mask: int) -> None:
    if not 0 <= mask < MASK_COUNT:
        raise ValueError(f"QR mask out of range: {mask}")


def _apply(width: int, frame: bytes | bytearray, mask: int) -> tuple[bytearray, int]:
    pattern = _PATTERNS[mask]
    masked = bytearray(width * width)
    blacks = 0
    for y in range(width):
        for x in range(width):
            cell = frame[y * width + x]
            value = cell if cell & 0x80 else cell ^ (pattern(x, y) == 0)
            masked[y * width + x] = value
            blacks += value & 1
    return masked, blacks


def write_format_information(width: int, frame: bytearray, format_bits: int) -> int:
    """Write 15 format bits into ``frame`` in place; return twice the dark bit count."""
    blacks = 0
    bits = format_bits
    for i in range(8):
        if bits & 1:
            blacks += 2
            value = 0x85
        else:
            value = 0x84
        frame[width * 8 + width - 1 - i] = value
        if i < 6:
            frame[width * i + 8] = value
        else:
            frame[width * (i + 1) + 8] = value
        bits >>= 1
    for i in range(7):
        if bits & 1:
            blacks += 2
            value = 0x85
        else:
            value = 0x84
        frame[width * (width - 7 + i) + 8] = value
        if i == 0:
            frame[width * 8 + 7] = value
        else:
            frame[width * 8 + 6 - i] = value
        bits >>= 1
    return blacks


def make_masked_frame(width: int, frame: bytes | bytearray, mask: int) -> bytearray:
    """Return a copy of ``frame`` with the data modules XORed by the mask pattern."""
    _check_mask(mask)
    return _apply(width, frame, mask)[0]


def make_mask(width: int, frame: bytes | bytearray, mask: int, format_bits: int) -> bytearray:
    """Apply the mask and write the given format information."""
    masked = make_masked_frame(width, frame, mask)
    write_format_information(width, masked, format_bits)
    return masked


def calc_n1n3(run_length: Sequence[int]) -> int:
    """Demerit for long runs and finder-like 1:1:3:1:1 patterns in one line."""
    length = len(run_length)
    demerit = 0
    for i, run in enumerate(run_length):
        if run >= 5:
            demerit += N1 + (run - 5)
        if i & 1 and 3 <= i < length - 2 and run % 3 == 0:
            fact = run // 3
            if all(run_length[j] == fact for j in (i - 2, i - 1, i + 1, i + 2)):
                if i == 3 or run_length[i - 3] >= 4 * fact:
                    demerit += N3
                elif i + 4 >= length or run_length[i + 3] >= 4 * fact:
                    demerit += N3
    return demerit


def calc_n2(width: int, frame: bytes | bytearray) -> int:
    """Demerit for every 2x2 block of a single colour."""
    demerit = 0
    for y in range(1, width):
        for x in range(1, width):
            p = y * width + x
            cells = (frame[p], frame[p - 1], frame[p - width], frame[p - width - 1])
            b22 = cells[0] & cells[1] & cells[2] & cells[3]
            w22 = cells[0] | cells[1] | cells[2] | cells[3]
            if (b22 | (w22 ^ 1)) & 1:
                demerit += N2
    return demerit


def _run_length(cells: Sequence[int]) -> list[int]:
    runs: list[int] = [-1] if cells[0] & 1 else []
    runs.append(1)
    prev = cells[0]
    for cell in cells[1:]:
        if (cell ^ prev) & 1:
            runs.append(1)
            prev = cell
        else:
            runs[-1] += 1
    return runs


def run_length_h(width: int, frame: bytes | bytearray, row: int) -> list[int]:
    """Run lengths along a row; a leading -1 marks a row starting with a dark module."""
    return _run_length(frame[row * width:(row + 1) * width])


def run_length_v(width: int, frame: bytes | bytearray, column: int) -> list[int]:
    """Run lengths down a column; a leading -1 marks a column starting dark."""
    return _run_length(frame[column::width][:width])


def evaluate_symbol(width: int, frame: bytes | bytearray) -> int:
    """Total N1, N2 and N3 demerit of a masked symbol."""
    demerit = calc_n2(width, frame)
    demerit += sum(calc_n1n3(run_length_h(width, frame, y)) for y in range(width))
    demerit += sum(calc_n1n3(run_length_v(width, frame, x)) for x in range(width))
    return demerit


def select_mask(
    width: int, frame: bytes | bytearray, format_for_mask: Callable[[int], int]
) -> bytearray:
    """Return the masked frame with the lowest demerit; the first wins a tie."""
    area = width * width
    best: bytearray | None = None
    best_demerit: int | None = None
    for mask in range(MASK_COUNT):
        masked, blacks = _apply(width, frame, mask)
        blacks += write_format_information(width, masked, format_for_mask(mask))
        ratio = (200 * blacks + area) // area // 2
        demerit = (abs(ratio - 50) // 5) * N4 + evaluate_symbol(width, masked)
        if best_demerit is None or demerit < best_demerit:
            best_demerit = demerit
            best = masked
    assert best is not None
    return best