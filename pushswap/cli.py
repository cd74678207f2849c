"""Command entry point: read numbers, print the operations that sort them."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from pushswap.parsing import PushSwapError, parse_arguments
from pushswap.printf import printf
from pushswap.sorter import is_sorted, push_swap
from pushswap.stacks import Stacks

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the program on ``argv`` (the arguments after the program name)."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        values = parse_arguments(args)
    except PushSwapError as error:
        printf("Error.\n%s", error.message, stream=sys.stdout)
        return EXIT_FAILURE
    stacks = Stacks(values, output=sys.stdout)
    if not is_sorted(stacks.a):
        push_swap(stacks)
    return EXIT_SUCCESS


if __name__ == "__main__":
    raise SystemExit(main())