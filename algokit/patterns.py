"""Text patterns: a star pyramid, Hosoya's triangle and an encoded map."""

from __future__ import annotations

from functools import lru_cache

# Run lengths for the map, one character each: its code minus 64 is the
# length of the run. Runs alternate between blanks and '!' marks.
_MAP_RUNS = (
    "TFy!QJu ROo TNn(ROo)SLq SLq ULo+"
    "UHs UJq TNn*RPn/QPbEWS_JSWQAIJO^"
    "NBELPeHBFHT}TnALVlBLOFAkHFOuFETp"
    "HCStHAUFAgcEAelclcn^r^r\\tZvYxXy"
    "T|S~Pn SPm SOn TNn ULo0ULo#ULo-W"
    "Hq!WFs XDt!"
)
_MAP_WIDTH = 79


def star_pyramid(rows: int) -> str:
    """Return a left-aligned pyramid with ``i`` stars on row ``i``."""
    return "".join("* " * i + "\n" for i in range(1, rows + 1))


@lru_cache(maxsize=None)
def _hosoya(n: int, m: int) -> int:
    if (n, m) in {(0, 0), (1, 0), (1, 1), (2, 1)}:
        return 1
    if n > m:
        return _hosoya(n - 1, m) + _hosoya(n - 2, m)
    if n == m:
        return _hosoya(n - 1, m - 1) + _hosoya(n - 2, m - 2)
    return 0


def hosoya(n: int, m: int) -> int:
    """Return entry ``m`` of row ``n`` of Hosoya's triangle (0 when m > n)."""
    if n < 0 or m < 0:
        raise ValueError("row and column must be non-negative")
    return _hosoya(n, m)


def hosoya_triangle(height: int) -> list[list[int]]:
    """Return the first ``height`` rows of Hosoya's triangle."""
    return [[hosoya(i, j) for j in range(i + 1)] for i in range(height)]


def format_hosoya_triangle(height: int) -> str:
    """Return the triangle as text, each number followed by a space."""
    return "".join(
        "".join(f"{value} " for value in row) + "\n"
        for row in hosoya_triangle(height)
    )


def map_of_india() -> str:
    """Return the map of India drawn with '!' marks."""
    out: list[str] = []
    column = 0
    for index, code in enumerate(_MAP_RUNS):
        mark = " " if index % 2 == 0 else "!"
        for _ in range(ord(code) - 64):
            if column == _MAP_WIDTH:
                out.append("\n")
                column = 0
            else:
                out.append(mark)
                column += 1
    return "".join(out)