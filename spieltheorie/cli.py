import argparse
import csv
import datetime
import json
import logging
import os
import sys
import time
from typing import Any, Dict, List, Sequence

from .engine import COOPERATE, MatchResult, Payoffs, iter_rounds, play_match
from .strategies import default_catalogue
from .tournament import list_available_strategies, make_rng, parse_rounds, run_tournament

logger = logging.getLogger(__name__)

SYMBOLS = {COOPERATE: "✅"}


def move_symbol(move: str) -> str:
    return SYMBOLS.get(move, "❌")


def write_csv(path: str, rows: List[Dict[str, Any]], fieldnames: Sequence[str] | None = None):
    keys = {k for row in rows for k in row.keys()}
    if fieldnames is None:
        field_list = sorted(keys)
    else:
        field_list = list(fieldnames)
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=field_list)
        w.writeheader()
        for row in rows:
            w.writerow({name: row.get(name, "") for name in field_list})


def parse_payoffs(text: str) -> Payoffs:
    try:
        pay = json.loads(text)
        return Payoffs(T=int(pay["T"]), R=int(pay["R"]), P=int(pay["P"]), S=int(pay["S"]))
    except (json.JSONDecodeError, KeyError, TypeError) as exc:
        raise ValueError(f"Invalid payoffs {text!r}: {exc}") from exc


def format_standings(standings: List[Dict[str, Any]]) -> str:
    lines = ["Final results (sorted by score):", "-" * 42]
    for i, row in enumerate(standings, start=1):
        lines.append(f"{i}. {row['strategy']}: {row['total_score']} points")
    return "\n".join(lines)


def format_outcome(result: MatchResult) -> str:
    lines = [
        "Final result:",
        f"{result.player_a}: {result.score_a} points",
        f"{result.player_b}: {result.score_b} points",
    ]
    winner = result.winner
    lines.append(f"Winner: {winner}!" if winner else "Draw!")
    return "\n".join(lines)


def play_interactive(player_a, player_b, rounds: int, payoffs: Payoffs, delay: float, out=None) -> MatchResult:
    """Print the match round by round while it is being played."""
    out = out or sys.stdout
    result = MatchResult(player_a=player_a.name(), player_b=player_b.name(), rounds=rounds)
    print(f"{'Round':>5}  {result.player_a:>20}  {result.player_b:>20}  {'Score A':>7}  {'Score B':>7}", file=out)
    for record in iter_rounds(player_a, player_b, rounds, payoffs):
        result.moves_a.append(record.move_a)
        result.moves_b.append(record.move_b)
        result.trace.append(record)
        result.score_a, result.score_b = record.score_a, record.score_b
        print(
            f"{record.round + 1:>5}  {move_symbol(record.move_a):>20}  {move_symbol(record.move_b):>20}"
            f"  {record.score_a:>7}  {record.score_b:>7}",
            file=out,
        )
        if delay > 0:
            time.sleep(delay)
    return result


def _out_dir() -> str:
    out_dir = os.environ.get("OUT_DIR", "out")
    os.makedirs(out_dir, exist_ok=True)
    return out_dir


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Iterated Prisoner's Dilemma: single matches and all-vs-all tournaments")
    parser.add_argument("--mode", type=str, default="tournament", choices=["tournament", "match"], help="All-vs-all tournament or a single match")
    parser.add_argument("--rounds", type=str, default="200", help="Number of rounds per match")
    parser.add_argument("--a", type=str, default="Tit-for-Tat", help="Strategy A (match mode)")
    parser.add_argument("--b", type=str, default="Random", help="Strategy B (match mode)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--payoffs", type=str, default='{"T":10,"R":7,"P":1,"S":0}', help="JSON for payoffs")
    parser.add_argument("--only", type=str, default="", help="Comma separated strategy names to include")
    parser.add_argument("--exclude", type=str, default="", help="Comma separated strategy names to exclude")
    parser.add_argument("--format", type=str, default="text", choices=["text", "csv", "json"], help="Output format")
    parser.add_argument("--delay", type=float, default=0.0, help="Pause in seconds between printed rounds (match mode)")
    parser.add_argument(
        "--log-level",
        type=str,
        default=os.environ.get("SPIELTHEORIE_LOG_LEVEL", "WARNING"),
        help="Logging level",
    )
    parser.add_argument("--labels", action="store_true", help="List strategy names and exit")
    return parser


def _run_match(args, rounds: int, payoffs: Payoffs) -> None:
    catalogue = default_catalogue(rng=make_rng(args.seed))
    player_a = catalogue.create(args.a)
    player_b = catalogue.create(args.b)

    if args.format == "text":
        result = play_interactive(player_a, player_b, rounds, payoffs, args.delay)
        print()
        print(format_outcome(result))
        return

    result = play_match(player_a, player_b, rounds, payoffs)
    tag = f"match_{datetime.datetime.now(datetime.timezone.utc).strftime('%Y%m%d-%H%M%S')}"
    out_dir = _out_dir()
    if args.format == "csv":
        rows = [record.to_dict() for record in result.trace]
        write_csv(os.path.join(out_dir, f"{tag}_rounds.csv"), rows, fieldnames=list(rows[0]))
    else:
        with open(os.path.join(out_dir, f"{tag}.json"), "w", encoding="utf-8") as f:
            json.dump({"params": vars(args), "result": result.to_dict()}, f, indent=2)
    print(f"Done. See output in {out_dir}")


def _run_tournament(args, rounds: int, payoffs: Payoffs) -> None:
    only_list = [x for x in args.only.split(",") if x.strip()] if args.only else []
    exclude_list = [x for x in args.exclude.split(",") if x.strip()] if args.exclude else []

    if args.format == "text":
        print("Processing...")
    result = run_tournament(
        rounds=rounds,
        seed=args.seed,
        payoffs=payoffs,
        only=only_list,
        exclude=exclude_list,
    )
    standings = result["standings"]

    if args.format == "text":
        print(format_standings(standings))
        return

    tag = f"pd_{datetime.datetime.now(datetime.timezone.utc).strftime('%Y%m%d-%H%M%S')}"
    out_dir = _out_dir()
    if args.format == "csv":
        write_csv(os.path.join(out_dir, f"{tag}_matches.csv"), result["matches"])
        write_csv(os.path.join(out_dir, f"{tag}_standings.csv"), standings, fieldnames=["strategy", "total_score"])
        with open(os.path.join(out_dir, f"{tag}_summary.json"), "w", encoding="utf-8") as f:
            json.dump({
                "params": vars(args),
                "strategies": result["strategies"],
                "standings": standings[:5],
            }, f, indent=2)
        print(f"Done. See CSVs and JSON in {out_dir}")
    else:
        with open(os.path.join(out_dir, f"{tag}_results.json"), "w", encoding="utf-8") as f:
            json.dump({"params": vars(args), **result}, f, indent=2)
        print(f"Done. See JSON in {out_dir}")


def main(argv: Sequence[str] | None = None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.debug("Arguments: %s", vars(args))

    if args.labels:
        for info in list_available_strategies():
            print(info["name"])
        return

    try:
        rounds = parse_rounds(args.rounds)
        payoffs = parse_payoffs(args.payoffs)
        if args.mode == "match":
            _run_match(args, rounds, payoffs)
        else:
            _run_tournament(args, rounds, payoffs)
    except ValueError as exc:
        raise SystemExit(str(exc))


if __name__ == "__main__":
    main()
