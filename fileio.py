"""
fileio.py
Write a string to a text file and read it straight back.
"""

import os
from typing import Union

GREETING = "Hola desde Node.js"
DEFAULT_PATH = "datos.txt"

PathLike = Union[str, os.PathLike]


def write_text(path: PathLike, content: str) -> None:
    """Create or overwrite `path` with exactly `content` (UTF-8, no newline translation)."""
    with open(path, 'w', encoding='utf-8', newline='') as f:
        f.write(content)

def read_text(path: PathLike) -> str:
    """Return the whole file decoded as UTF-8."""
    with open(path, 'r', encoding='utf-8', newline='') as f:
        return f.read()

def round_trip(path: PathLike = DEFAULT_PATH, content: str = GREETING) -> str:
    # OSError from either step is left to the caller
    write_text(path, content)
    return read_text(path)


if __name__ == "__main__":
    print(round_trip())
