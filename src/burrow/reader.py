import sys
from pathlib import Path
from typing import List, Optional


def read_puzzle_lines(path: Optional[str] = None) -> List[str]:
    """Read the textual burrow from a file, or from stdin when path is None or "-".

    Trailing blank lines are dropped. Leading spaces are kept since they
    position the lower room rows.

    Raises:
        FileNotFoundError: If the input file does not exist
    """
    if path is None or path == "-":
        text = sys.stdin.read()
    else:
        input_path = Path(path)
        if not input_path.is_file():
            raise FileNotFoundError(f"Puzzle input not found: {input_path}")
        text = input_path.read_text()

    lines = text.splitlines()
    while lines and not lines[-1].strip():
        lines.pop()
    return lines
