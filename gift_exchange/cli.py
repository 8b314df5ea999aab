from __future__ import annotations

import argparse
import json
import logging
import pathlib
import sys

from .config import ensure_assets_exist
from .exchange import run_exchange
from .io import load_exchange_yaml, load_participants_csv, save_assignment_csv_bytes
from .models import ExchangeConfig, ExchangeSpec
from .validation import validate_participants

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _load_spec(args: argparse.Namespace) -> ExchangeSpec:
    path = pathlib.Path(args.source).expanduser().resolve()
    if not path.exists():
        raise SystemExit(f"Exchange file not found: {path}")
    try:
        if path.suffix.lower() == ".csv":
            participants, couples = load_participants_csv(str(path))
            return ExchangeSpec(participants=participants, significant_others=couples)
        if path.suffix.lower() in {".yml", ".yaml"}:
            return load_exchange_yaml(str(path))
    except ValueError as e:
        raise SystemExit(f"[error] {path.name}: {e}") from e
    raise SystemExit(f"Unsupported exchange file: {path.suffix} (use .yaml/.csv)")


def _cmd_draw(args: argparse.Namespace) -> None:
    spec = _load_spec(args)
    try:
        config = ExchangeConfig(
            max_assignment_attempts=args.max_attempts,
            max_total_restarts=args.max_restarts,
            random_seed=args.seed,
        )
    except ValueError as e:
        raise SystemExit(f"[error] {e}") from e
    result = run_exchange(spec, config)
    if result.error:
        for p in result.problems:
            print(f"[error] {p}", file=sys.stderr)
        raise SystemExit(f"[fail] {result.error}")

    if args.out:
        out = pathlib.Path(args.out).expanduser()
        out.write_bytes(save_assignment_csv_bytes(result.assignment))
        print(f"[ok] wrote {len(result.assignment)} assignment(s) to: {out}", file=sys.stderr)
    if args.json:
        print(json.dumps(result.assignment, ensure_ascii=False, indent=2))
    else:
        for giver, receiver in result.assignment.items():
            print(f"{giver} -> {receiver}")


def _cmd_check(args: argparse.Namespace) -> None:
    spec = _load_spec(args)
    problems = validate_participants(spec.participants, spec.significant_others, spec.rules)
    for p in problems:
        print(f"[error] {p}", file=sys.stderr)
    if problems:
        raise SystemExit(1)
    print(f"[ok] {len(spec.participants)} participant(s), {len(spec.significant_others)} couple(s), "
          f"{len(spec.rules)} rule(s)")


def _cmd_init(args: argparse.Namespace) -> None:
    created = ensure_assets_exist(args.assets_dir)
    print(json.dumps({"assets": list(created)}, ensure_ascii=False, indent=2))


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="gift-exchange")
    p.add_argument("-v", "--verbose", action="store_true", help="Log every restart of the draw.")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_draw = sub.add_parser("draw", help="Draw names from an exchange .yaml or participant .csv.")
    p_draw.add_argument("source")
    p_draw.add_argument("--seed", type=int, default=None, help="Default: OS randomness.")
    p_draw.add_argument("--max-attempts", type=int, default=ExchangeConfig().max_assignment_attempts)
    p_draw.add_argument("--max-restarts", type=int, default=ExchangeConfig().max_total_restarts)
    p_draw.add_argument("--out", default=None, help="Write Giver,Receiver CSV here.")
    p_draw.add_argument("--json", action="store_true", help="Print the draw as JSON.")
    p_draw.set_defaults(func=_cmd_draw)

    p_check = sub.add_parser("check", help="Validate participants and couples without drawing.")
    p_check.add_argument("source")
    p_check.set_defaults(func=_cmd_check)

    p_init = sub.add_parser("init", help="Write sample exchange.yaml / participants CSV (non-destructive).")
    p_init.add_argument("--assets_dir", default="assets")
    p_init.set_defaults(func=_cmd_init)

    return p


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING, format=LOG_FORMAT)
    args.func(args)
