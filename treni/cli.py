"""Command line entry point choosing the signalling mode to run."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from treni.etcs1 import run_etcs1
from treni.etcs2 import run_etcs2
from treni.rbc import run_rbc


def main(argv: Sequence[str] | None = None) -> int:
    """Run ETCS1, ETCS2, or the RBC server for ETCS2, as chosen by the arguments."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        if args == ["ETCS1"]:
            run_etcs1()
        elif args == ["ETCS2"]:
            run_etcs2()
        elif args == ["ETCS2", "RBC"]:
            run_rbc()
    except (OSError, LookupError, ValueError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())