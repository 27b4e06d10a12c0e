"""
`reactor-reboot`: replay a reboot instruction file and report the lit cubes.

Example:
  reactor-reboot input.txt                 # initialization window [-50, 50]^3
  reactor-reboot input.txt --full          # every step
  reactor-reboot input.txt --window -10 10 -10 10 -10 10 --trace
  reactor-reboot input.txt --config reactor.yaml

Exit codes: 0 ok, 1 malformed input/config or invariant violation, 2 missing file.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from .config import ReactorConfig, load_config
from .core.cuboid import Cuboid
from .core.errors import ReactorError
from .core.procedure import iter_run
from .core.volume import count_on
from .integration.parsing import format_reboot_step, load_reboot_steps
from .utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="reactor-reboot",
        description="Replay reactor reboot steps and count the cubes left on.",
    )
    p.add_argument("input", type=Path, help="Instruction file, one `on|off x=..,y=..,z=..` step per line")
    p.add_argument("--config", type=Path, help="YAML run configuration")
    scope = p.add_mutually_exclusive_group()
    scope.add_argument("--full", action="store_true", help="Replay every step (no window)")
    scope.add_argument(
        "--window",
        nargs=6,
        type=int,
        metavar=("X0", "X1", "Y0", "Y1", "Z0", "Z1"),
        help="Only apply steps fully inside this cuboid (default: [-50, 50]^3)",
    )
    p.add_argument("--check-invariants", action="store_true", help="Verify the disjoint cover after every step")
    p.add_argument("--trace", action="store_true", help="Print the lit count after every step")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--log-file", help="Also write logs to this file")
    return p


def _resolve_config(args: argparse.Namespace) -> ReactorConfig:
    cfg = load_config(args.config) if args.config else ReactorConfig()
    if args.full:
        cfg = replace(cfg, window=None)
    elif args.window:
        x0, x1, y0, y1, z0, z1 = args.window
        try:
            cfg = replace(cfg, window=Cuboid((x0, x1), (y0, y1), (z0, z1)))
        except ValueError as exc:
            raise ReactorError(f"invalid --window: {exc}") from exc
    if args.check_invariants:
        cfg = replace(cfg, check_invariants=True)
    return cfg


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    setup_logging(log_file=args.log_file, debug=args.debug)

    if args.config and not args.config.exists():
        logger.error("missing config file: %s", args.config)
        return 2
    if not args.input.exists():
        logger.error("missing input file: %s", args.input)
        return 2

    try:
        cfg = _resolve_config(args)
        if not args.debug:
            logging.getLogger().setLevel(cfg.log_level)
        steps = load_reboot_steps(args.input)
        logger.info("loaded %d steps from %s", len(steps), args.input)

        state = None
        for result in iter_run(steps, cfg.window, check_invariants=cfg.check_invariants):
            state = result.state
            if args.trace:
                mark = "+" if result.applied else "-"
                print(f"{mark} {result.index + 1:>4} {format_reboot_step(result.step)} lit={result.lit}")
    except ReactorError as exc:
        logger.error("reboot aborted: %s", exc)
        return 1
    except OSError as exc:
        logger.error("cannot read input: %s", exc)
        return 1

    lit = count_on(state) if state is not None else 0
    window = "all steps" if cfg.window is None else f"window {cfg.window}"
    print(f"Lit cubes ({window}): {lit}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
