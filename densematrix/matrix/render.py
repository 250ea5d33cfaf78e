"""Debug string rendering for Matrix."""

from typing import Any

from numpy.typing import NDArray


def format_matrix(data: NDArray[Any], rows: int, cols: int) -> str:
    """
    Render a row-major buffer as text.

    One line per row, each element's str() followed by a single space,
    then a trailing 'Rows: <rows>, cols: <cols>' line. Diagnostic only;
    there is no parser for this format.
    """
    lines = []
    for r in range(rows):
        lines.append(''.join(f"{data[r * cols + c]} " for c in range(cols)))
    lines.append(f"Rows: {rows}, cols: {cols}")
    return '\n'.join(lines) + '\n'
