"""Layout of a repeated, rotated text watermark."""

from __future__ import annotations

from dataclasses import dataclass, field

from fluentkit.theme import Color


@dataclass
class Watermark:
    """Settings for a tiled text watermark drawn above other content."""

    text: str = ""
    gap: tuple[int, int] = (100, 100)
    offset: tuple[int, int] | None = None
    text_color: Color = field(default_factory=lambda: Color(222, 222, 222, 222))
    rotate: int = 22
    text_size: int = 16
    z: int = 9999

    def __post_init__(self) -> None:
        if self.offset is None:
            self.offset = (self.gap[0] // 2, self.gap[1] // 2)

    def positions(
        self, width: float, height: float, text_width: float, text_height: float
    ) -> list[tuple[float, float]]:
        """Centres of every copy of the text covering a ``width`` x ``height`` area.

        Copies are listed column of the grid first, then down each column.
        """
        step_x = int(text_width + self.gap[0])
        step_y = int(text_height + self.gap[1])
        if step_x <= 0 or step_y <= 0:
            raise ValueError("text size plus gap must be positive in both directions")
        columns = int(width / step_x + 1)
        rows = int(height / step_y + 1)
        offset_x, offset_y = self.offset  # type: ignore[misc]
        return [
            (
                step_x * c + offset_x + text_width / 2.0,
                step_y * r + offset_y + text_height / 2.0,
            )
            for c in range(columns)
            for r in range(rows)
        ]