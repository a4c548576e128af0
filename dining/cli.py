"""Command-line entry point for the simulation."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from dining.config import ConfigError, parse_config
from dining.simulation import run_simulation


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, run the simulation and return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        config = parse_config(args)
    except ConfigError as error:
        sys.stderr.write(f"{error}\n")
        return 1
    survived = run_simulation(config, sys.stdout)
    if config.num_meal is not None and survived:
        print(f"Each philosopher ate {config.num_meal} times")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())