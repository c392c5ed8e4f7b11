"""
Array.py
Array exercise: filter / find / map / sort / reduce over a small list of integers.

numpy does the elementwise work (masks, squaring) on an object array of Python ints,
the fold stays a plain left fold so the seed can be any value that supports + with an int.
"""

from functools import reduce
from typing import Any, Dict, List, Optional, Sequence

import numpy as np

DEFAULT_NUMBERS = [1, 2, 3, 4, 5, 6]
DEFAULT_SEED = 100


def _as_array(seq: Sequence[int]) -> np.ndarray:
    # object dtype over Python ints, so squares never wrap
    if isinstance(seq, np.ndarray):
        seq = seq.tolist()
    return np.array(list(seq), dtype=object)

def _even_mask(arr: np.ndarray) -> np.ndarray:
    return (arr % 2 == 0).astype(bool)


# -----------------------
# 1) filter / find / map
# -----------------------
def filter_even(seq: Sequence[int]) -> List[int]:
    """Keep the even numbers, original order. [1,2,3,4,5,6] -> [2,4,6]"""
    arr = _as_array(seq)
    return arr[_even_mask(arr)].tolist()

def find_first_even(seq: Sequence[int]) -> Optional[int]:
    """First even number, or None when there is none."""
    arr = _as_array(seq)
    idx = np.flatnonzero(_even_mask(arr))
    if idx.size == 0:
        return None
    return arr[idx[0]]

def square_all(seq: Sequence[int]) -> List[int]:
    # [1,2,3,4,5,6] -> [1,4,9,16,25,36]
    arr = _as_array(seq)
    return (arr ** 2).tolist()


# -----------------------
# 2) in-place sort
# -----------------------
def sort_ascending(seq):
    """Sort a list (or 1-D ndarray) ascending in place and hand the same object back."""
    seq.sort()
    return seq


# -----------------------
# 3) filter -> map -> reduce
# -----------------------
def sum_squares_of_evens_plus(seq: Sequence[int], seed: Any = DEFAULT_SEED) -> Any:
    """Sum of the squares of the even numbers, folded onto `seed`.

    seed=100 -> 100 + 4 + 16 + 36 = 156
    A seed that can't be added to an int ([] or {}) raises TypeError.
    """
    squares = square_all(filter_even(seq))
    return reduce(lambda acc, v: acc + v, squares, seed)


# -----------------------
# 4) Whole exercise
# -----------------------
def run_array_exercise(seq: Optional[Sequence[int]] = None, seed: Any = DEFAULT_SEED) -> Dict[str, Any]:
    """Run every step in order on a copy of `seq` and return the results by name."""
    numbers = list(DEFAULT_NUMBERS if seq is None else seq)
    return {
        'filter': filter_even(numbers),
        'find': find_first_even(numbers),
        'map': square_all(numbers),
        'sort': list(sort_ascending(numbers)),
        'reduce': sum_squares_of_evens_plus(numbers, seed),
    }


if __name__ == "__main__":
    for name, value in run_array_exercise().items():
        print(f"{name}: {value}")
