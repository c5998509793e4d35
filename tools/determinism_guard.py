"""
Determinism guard (static check).

Purpose:
- Keep the round simulation reproducible from its seed, so the viewer and the headless
  batch runner play identical rounds and RTP numbers can be re-run exactly.

What we flag (in round simulation code):
- Wall-clock time: pygame.time.get_ticks(), time.time(), time.monotonic(), time.perf_counter(),
  datetime.now()/utcnow()
- Global / unseeded RNG: random.random/randint/uniform/choice/shuffle/...
- Python's hash() (process-randomized by default)
- pygame imports (the core must import and run without a display)

We intentionally DO NOT scan:
- game/ui/**, game/graphics/**, game/engine.py (the viewer can use wall-clock time)
- game/sim/determinism.py (the seeded RNG itself seeds from `secrets` when unseeded)
"""

from __future__ import annotations

import argparse
import ast
import json
import sys
from pathlib import Path
from typing import Iterable


PROJECT_ROOT = Path(__file__).resolve().parents[1]


DEFAULT_SCAN_PATHS = [
    PROJECT_ROOT / "game" / "entities",
    PROJECT_ROOT / "game" / "systems",
    PROJECT_ROOT / "game" / "round.py",
    PROJECT_ROOT / "game" / "arena.py",
    PROJECT_ROOT / "game" / "sim",
]

DEFAULT_EXCLUDE_PATHS = [
    PROJECT_ROOT / "game" / "ui",
    PROJECT_ROOT / "game" / "graphics",
    PROJECT_ROOT / "game" / "sim" / "determinism.py",
]

_RANDOM_FUNCS = {"random", "randint", "uniform", "choice", "choices", "shuffle", "seed", "randrange", "sample"}
_TIME_FUNCS = {"time", "monotonic", "perf_counter", "time_ns"}
_DATETIME_FUNCS = {"now", "utcnow", "today"}


def _rel(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(PROJECT_ROOT))
    except ValueError:
        return str(path)


def _excluded(path: Path, excludes: list[Path]) -> bool:
    p = path.resolve()
    for ex in excludes:
        ex = ex.resolve()
        if p == ex or ex in p.parents:
            return True
    return False


def collect_files(roots: Iterable[Path], excludes: list[Path]) -> list[Path]:
    out: set[Path] = set()
    for root in roots:
        if root.is_file() and root.suffix == ".py":
            candidates = [root]
        elif root.is_dir():
            candidates = list(root.rglob("*.py"))
        else:
            continue
        out.update(p for p in candidates if not _excluded(p, excludes))
    return sorted(out)


def _dotted(node: ast.AST) -> list[str] | None:
    """Name / Attribute chain as a list, e.g. pygame.time.get_ticks -> ["pygame", "time", "get_ticks"]."""
    if isinstance(node, ast.Name):
        return [node.id]
    if isinstance(node, ast.Attribute):
        base = _dotted(node.value)
        return None if base is None else [*base, node.attr]
    return None


def _finding(kind: str, file: Path, node, detail: str) -> dict:
    return {
        "kind": kind,
        "file": _rel(file),
        "line": int(getattr(node, "lineno", 0) or 0),
        "col": int(getattr(node, "col_offset", 0) or 0),
        "detail": detail,
    }


def _check_call(chain: list[str]) -> tuple[str, str] | None:
    if chain == ["pygame", "time", "get_ticks"]:
        return "wall_clock_time", "Read time from the round SimClock (game.sim.timebase), not pygame.time.get_ticks()."
    if len(chain) == 2 and chain[0] == "time" and chain[1] in _TIME_FUNCS:
        return "wall_clock_time", f"Avoid time.{chain[1]}() in simulation code; use SimClock.now_ms or dt."
    if "datetime" in chain and chain[-1] in _DATETIME_FUNCS:
        return "wall_clock_time", f"Avoid datetime {chain[-1]}() in simulation code; use sim time."
    if len(chain) == 2 and chain[0] == "random" and chain[1] in _RANDOM_FUNCS:
        return "global_rng", "Draw from the round Rng (game.sim.determinism.Rng) instead of random.*."
    if chain == ["hash"]:
        return "unstable_hash", "Python hash() is randomized per process; use ids or determinism.string_seed()."
    return None


def scan_file(file_path: Path) -> list[dict]:
    src = file_path.read_text(encoding="utf-8", errors="replace")
    try:
        tree = ast.parse(src, filename=str(file_path))
    except SyntaxError as e:
        return [_finding("parse_error", file_path, e, f"SyntaxError: {e}")]

    findings: list[dict] = []
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            if any(alias.name.split(".")[0] == "pygame" for alias in node.names):
                findings.append(_finding("pygame_in_core", file_path, node, "Simulation code must not import pygame."))
            continue
        if isinstance(node, ast.ImportFrom):
            if (node.module or "").split(".")[0] == "pygame":
                findings.append(_finding("pygame_in_core", file_path, node, "Simulation code must not import pygame."))
            continue
        if not isinstance(node, ast.Call):
            continue
        chain = _dotted(node.func)
        if not chain:
            continue
        hit = _check_call(chain)
        if hit is not None:
            findings.append(_finding(hit[0], file_path, node, hit[1]))

    return findings


def scan(roots: Iterable[Path] | None = None, excludes: list[Path] | None = None) -> list[dict]:
    roots = list(DEFAULT_SCAN_PATHS) if roots is None else list(roots)
    excludes = list(DEFAULT_EXCLUDE_PATHS) if excludes is None else list(excludes)
    findings: list[dict] = []
    for f in collect_files(roots, excludes):
        findings.extend(scan_file(f))
    return findings


def main() -> int:
    ap = argparse.ArgumentParser(description="Static determinism guard (round simulation code)")
    ap.add_argument(
        "--paths",
        nargs="*",
        default=[],
        help="Optional files or dirs to scan. Default: entities, systems, round driver, arena, sim helpers.",
    )
    ap.add_argument("--json", action="store_true", help="Emit machine-readable JSON")
    ns = ap.parse_args()

    findings = scan([Path(p) for p in ns.paths] if ns.paths else None)

    if ns.json:
        print(json.dumps({"findings": findings}, indent=2))
    elif not findings:
        print("[determinism_guard] PASS: no violations found")
    else:
        print(f"[determinism_guard] FAIL: {len(findings)} violation(s)")
        for v in findings:
            print(f"- {v['file']}:{v['line']}:{v['col']} [{v['kind']}] {v['detail']}")

    return 0 if not findings else 1


if __name__ == "__main__":
    sys.exit(main())
