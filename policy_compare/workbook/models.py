from dataclasses import dataclass, field


@dataclass(frozen=True)
class Sheet:
    """Cell values of one worksheet, row-major, empty cells as None."""

    name: str
    rows: list[list[object]] = field(default_factory=list)
