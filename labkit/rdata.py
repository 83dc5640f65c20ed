"""Generate and print random training data."""

from __future__ import annotations

import random
import re
import sys
from collections.abc import Sequence

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def random_data(
    rows: int, columns: int, rng: random.Random | None = None
) -> tuple[list[list[float]], list[float]]:
    """Return ``rows`` random input rows of ``columns`` values and one target per row."""
    rng = rng if rng is not None else random.Random()
    inputs: list[list[float]] = []
    targets: list[float] = []
    for _ in range(rows):
        inputs.append([rng.random() for _ in range(columns)])
        targets.append(rng.random())
    return inputs, targets


def format_data(inputs: Sequence[Sequence[float]], targets: Sequence[float]) -> str:
    """Render each input row followed by its target, one row per line."""
    lines = []
    for row, target in zip(inputs, targets):
        values = "".join(f" {value:f} " for value in row)
        lines.append(f"{values}-> {target:f}\n")
    return "".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Print random data of the requested shape."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print("Usage, random_data rows columns")
        return 1
    rows, columns = _atoi(args[0]), _atoi(args[1])
    print(f"Creating ({rows}, {columns}) -> {rows} input output combination.")
    inputs, targets = random_data(rows, columns)
    sys.stdout.write(format_data(inputs, targets))
    return 0


if __name__ == "__main__":
    sys.exit(main())