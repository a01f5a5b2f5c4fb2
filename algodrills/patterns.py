"""Text grids and pyramids built row by row."""

MARATHON_HEADER = (
    "Abhik's marathon journey intensifies! Let's see his detailed zig-zag pattern:"
)


def diagonal_pattern(n: int) -> list[str]:
    """Square of dashes with row numbers on both diagonals."""
    rows = []
    for i in range(n):
        cells = []
        for j in range(n):
            if i == j:
                cells.append(str(i + 1))
            elif i + j == n - 1:
                cells.append(str(n - i))
            else:
                cells.append("-")
        rows.append(" ".join(cells))
    return rows


def zigzag_pyramid(n: int) -> tuple[list[str], int]:
    """Right-aligned pyramid whose rows alternate counting up and down.

    Returns the printed lines (with a header line first when n exceeds ten)
    and the total number of numbers written.
    """
    lines = [MARATHON_HEADER] if n > 10 else []
    total = 0
    for i in range(1, n + 1):
        numbers = range(1, i + 1) if i % 2 == 1 else range(i, 0, -1)
        total += len(numbers)
        lines.append(" " * ((n - i) * 2) + "   ".join(map(str, numbers)))
    return lines, total


def seating_grid(n: int) -> tuple[list[str], int]:
    """Checkerboard of seated (1) and empty (0) places, with the seated count."""
    rows = []
    seated = 0
    for i in range(n):
        cells = ["1" if (i + j) % 2 == 0 else "0" for j in range(n)]
        seated += cells.count("1")
        rows.append(" ".join(cells))
    return rows, seated