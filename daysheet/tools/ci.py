from __future__ import annotations

import argparse
import os
import shutil
import subprocess
import sys
import time
from pathlib import Path
from typing import List, Optional, Tuple


def _repo_root() -> Path:
    # Expected location: <repo>/daysheet/tools/ci.py -> parents[2] == <repo>
    return Path(__file__).resolve().parents[2]


def _fmt_ms(ms: int) -> str:
    s = ms / 1000.0
    if s < 1:
        return f"{ms}ms"
    if s < 60:
        return f"{s:.2f}s"
    m = int(s // 60)
    ss = s - (m * 60)
    return f"{m}m{ss:04.1f}s"


def _run_step(*, label: str, cmd: List[str], cwd: Path, env: dict[str, str]) -> Tuple[int, str]:
    """Run one step; return (rc, combined_output)."""
    start = time.time()
    p = subprocess.run(cmd, cwd=str(cwd), env=env, capture_output=True, text=True)
    dur_ms = int((time.time() - start) * 1000)

    out = (p.stdout or "")
    err = (p.stderr or "")
    combined = (out + ("\n" if out and err else "") + err).strip()

    status = "OK" if p.returncode == 0 else "FAIL"
    print(f"[daysheet-ci] {status}: {label} ({_fmt_ms(dur_ms)})")
    if combined:
        # Unindented so unittest output stays copy/pasteable.
        print(combined)

    return p.returncode, combined


def _have(cmd: str) -> bool:
    return shutil.which(cmd) is not None


def build_steps(ns: argparse.Namespace, repo: Path) -> List[Tuple[str, List[str]]]:
    steps: List[Tuple[str, List[str]]] = []

    if not ns.skip_compileall:
        steps.append(("compileall", [sys.executable, "-m", "compileall", "-q", str(repo / "daysheet")]))

    if not ns.skip_lint:
        if _have("ruff"):
            steps.append(("ruff check", ["ruff", "check", "."]))
            if ns.format:
                steps.append(("ruff format --check", ["ruff", "format", "--check", "."]))
        else:
            print("[daysheet-ci] WARN: ruff not found; skipping lint")

    if not ns.skip_tests:
        steps.append(("unittest", [sys.executable, "-m", "unittest", "discover", "-s", "tests", "-p", ns.pattern]))

    return steps


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(
        prog="daysheet-ci",
        description="One-command CI gate (compileall, lint, contract tests).",
    )
    ap.add_argument("--skip-compileall", action="store_true", help="Skip python -m compileall.")
    ap.add_argument("--skip-lint", action="store_true", help="Skip ruff checks (if installed).")
    ap.add_argument("--skip-tests", action="store_true", help="Skip unit/contract tests.")
    ap.add_argument("--pattern", default="test_*.py", help="unittest discovery pattern (default: test_*.py)")
    ap.add_argument(
        "--format",
        action="store_true",
        help="Also run 'ruff format --check' (only if ruff is installed).",
    )

    ns = ap.parse_args(argv)

    repo = _repo_root()

    env = os.environ.copy()
    env["PYTHONPATH"] = str(repo)
    # Keep logging quiet and deterministic inside test subprocesses.
    env["DAYSHEET_LOG_LEVEL"] = "WARNING"

    steps = build_steps(ns, repo)

    started = time.time()
    any_fail = False
    for label, cmd in steps:
        rc, _ = _run_step(label=label, cmd=cmd, cwd=repo, env=env)
        if rc != 0:
            any_fail = True
            # Fail fast to reduce noise.
            break

    total_ms = int((time.time() - started) * 1000)
    if any_fail:
        print(f"[daysheet-ci] RESULT: FAIL ({_fmt_ms(total_ms)})")
        return 2

    print(f"[daysheet-ci] RESULT: OK ({_fmt_ms(total_ms)})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
