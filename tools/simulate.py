"""
Headless batch simulator (RTP validation).

Plays many seeded rounds with no rendering and prints win rate, average profit and
realized RTP (total returned / total wagered). Seeds are a deterministic function of
the round index, so two runs with the same flags print the same numbers.

Examples:
  python tools/simulate.py --rounds 10000 --win-prob 0.5 --mode 2
  python tools/simulate.py --rounds 2000 --mode 4 --booster glove --csv rtp.csv
  python tools/simulate.py --preset
"""

from __future__ import annotations

import argparse
import csv
import sys
import time
from pathlib import Path

# Ensure imports work when running as `python tools/simulate.py`
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from game.sim.batch import run_batch  # noqa: E402
from game.systems.boosters import BoosterType  # noqa: E402

# (rounds, win_prob, mode, booster) reference configurations
PRESET_RUNS = [
    (10_000, 0.5, 2, None),
    (10_000, 0.5, 4, None),
    (10_000, 0.7, 2, "shield"),
    (10_000, 0.3, 2, None),
]


def _pct(v: float) -> str:
    return f"{v * 100.0:0.2f}%"


def _run_and_report(rounds: int, win_prob: float, mode: int, booster, csv_path: str = "") -> dict:
    booster_type = BoosterType.parse(booster)
    print("\n=== Circle Warriors Simulation ===")
    print(
        f"Rounds: {rounds} | Mode: 1vs{mode - 1} | WinProb: {win_prob * 100:0.0f}% | "
        f"Booster: {booster_type.value if booster_type else 'none'}"
    )
    print("----------------------------------")

    t0 = time.perf_counter()
    kwargs = {"booster": booster_type} if booster_type is not None else {}
    summary = run_batch(
        rounds=rounds,
        win_probability=win_prob,
        mode=mode,
        has_booster=booster_type is not None,
        **kwargs,
    )
    elapsed = time.perf_counter() - t0

    row = summary.to_dict()
    print(f"Win Rate:       {_pct(summary.win_rate)}  (target: {win_prob * 100:0.0f}%)")
    print(f"Avg Profit:     {summary.avg_profit:0.3f} FUN per round")
    print(f"Total Wagered:  {summary.total_wagered:0.0f} FUN")
    print(f"Total Returned: {summary.total_returned:0.0f} FUN")
    print(f"RTP:            {_pct(summary.rtp)}")
    print(f"[simulate] {elapsed:0.2f}s wall ({(elapsed * 1000.0) / max(1, rounds):0.3f} ms/round)")
    print("==================================")

    if csv_path:
        out_path = Path(csv_path)
        write_header = not out_path.exists()
        with out_path.open("a", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            header = ["win_prob", "mode", "booster", *row.keys()]
            if write_header:
                w.writerow(header)
            w.writerow([win_prob, mode, booster_type.value if booster_type else "none", *row.values()])
        print("[simulate] wrote:", str(out_path))

    return row


def main() -> int:
    ap = argparse.ArgumentParser(description="Headless batch simulator (win rate / RTP)")
    ap.add_argument("--rounds", type=int, default=10_000)
    ap.add_argument("--win-prob", type=float, default=0.5, help="configured win probability [0,1]")
    ap.add_argument("--mode", type=int, default=2, choices=[2, 3, 4], help="warriors per round")
    ap.add_argument(
        "--booster",
        type=str,
        default="none",
        choices=["none", *[b.value for b in BoosterType]],
        help="pre-purchased booster side bet",
    )
    ap.add_argument("--csv", type=str, default="", help="optional path to append one row per run")
    ap.add_argument("--preset", action="store_true", help="run the standard reference configurations")
    ns = ap.parse_args()

    if ns.rounds <= 0:
        print("[simulate] ERROR: --rounds must be positive")
        return 2

    if ns.preset:
        for rounds, win_prob, mode, booster in PRESET_RUNS:
            _run_and_report(rounds, win_prob, mode, booster, ns.csv)
        return 0

    _run_and_report(ns.rounds, ns.win_prob, ns.mode, ns.booster, ns.csv)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
