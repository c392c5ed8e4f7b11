"""
exercises.py
Command line runner for the two exercises:
  arrays - filter / find / map / sort / reduce on a list of integers
  file   - write a string to a file, read it back, print it

Example usage:
  python exercises.py arrays --numbers 6 5 4 3 2 1 --seed 0
  python exercises.py file --path /tmp/datos.txt
  python exercises.py all
"""

import argparse
from typing import Any, Dict, List, Optional

from Array import DEFAULT_NUMBERS, DEFAULT_SEED, run_array_exercise
from fileio import DEFAULT_PATH, GREETING, round_trip


# -----------------------
# 1) Runners
# -----------------------
def run_arrays(numbers: List[int], seed: int = DEFAULT_SEED) -> Dict[str, Any]:
    print("Running array exercise...")
    print(f"Input: {numbers}")
    results = run_array_exercise(numbers, seed)
    for name, value in results.items():
        print(f"{name}: {value}")
    return results

def run_file(path: str, content: str = GREETING) -> str:
    print(f"Writing and reading back {path}...")
    # write or read failures are fatal, nothing is caught here
    contents = round_trip(path, content)
    print(contents)
    return contents


# -----------------------
# CLI
# -----------------------
def parse_args(argv: Optional[List[str]] = None):
    p = argparse.ArgumentParser(description='Array and file round-trip exercises')
    sub = p.add_subparsers(dest='command', required=True)

    arrays = sub.add_parser('arrays', help='filter/find/map/sort/reduce on a list of integers')
    arrays.add_argument('--numbers', nargs='+', type=int, default=list(DEFAULT_NUMBERS), help='Integers to work on')
    arrays.add_argument('--seed', type=int, default=DEFAULT_SEED, help='Initial accumulator for the reduce step')

    file_ = sub.add_parser('file', help='write a string to a file and read it back')
    file_.add_argument('--path', default=DEFAULT_PATH, help='Target file')
    file_.add_argument('--content', default=GREETING, help='Text to write')

    sub.add_parser('all', help='run both exercises with their defaults')
    return p.parse_args(argv)

def main(argv: Optional[List[str]] = None) -> Dict[str, Any]:
    args = parse_args(argv)
    out = {}
    if args.command in ('arrays', 'all'):
        numbers = getattr(args, 'numbers', list(DEFAULT_NUMBERS))
        seed = getattr(args, 'seed', DEFAULT_SEED)
        out['arrays'] = run_arrays(numbers, seed)
    if args.command in ('file', 'all'):
        path = getattr(args, 'path', DEFAULT_PATH)
        content = getattr(args, 'content', GREETING)
        out['file'] = run_file(path, content)
    print("Done.")
    return out

def cli():
    main()

if __name__ == "__main__":
    main()
