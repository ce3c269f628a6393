#!/usr/bin/env python3
from __future__ import annotations

import argparse
import stat
import subprocess
from datetime import datetime
from pathlib import Path
from typing import Optional

PREFIX = "[daysheet-hook]"

HOOK_BODY = '''#!/usr/bin/env bash
set -euo pipefail

# daysheet pre-commit gate: compileall + contract tests.
# Skip once with `git commit --no-verify` or DAYSHEET_SKIP_PRECOMMIT=1.
if [[ "${DAYSHEET_SKIP_PRECOMMIT:-0}" == "1" ]]; then
  exit 0
fi

ROOT="$(git rev-parse --show-toplevel 2>/dev/null || true)"
[[ -n "$ROOT" ]] || exit 0
cd "$ROOT"

"${PYTHON:-python3}" -m daysheet.tools.ci --skip-lint --pattern "test_contract_*.py"
'''


def find_hooks_dir() -> Optional[Path]:
    try:
        p = subprocess.run(["git", "rev-parse", "--git-path", "hooks"], capture_output=True, text=True)
    except OSError:
        return None
    out = (p.stdout or "").strip()
    if p.returncode != 0 or not out:
        return None
    return Path(out).resolve()


def _backup(hook: Path) -> Path:
    dst = hook.with_name(f"pre-commit.{datetime.now():%Y%m%d_%H%M%S}.bak")
    dst.write_bytes(hook.read_bytes())
    return dst


def install(hooks: Path, *, force: bool) -> int:
    hook = hooks / "pre-commit"
    if hook.exists():
        if not force:
            print(f"{PREFIX} ERROR: {hook} exists; rerun with --force to replace it (a backup is kept)")
            return 2
        print(f"{PREFIX} previous hook saved as {_backup(hook)}")

    hooks.mkdir(parents=True, exist_ok=True)
    hook.write_text(HOOK_BODY, encoding="utf-8", newline="\n")
    hook.chmod(hook.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    print(f"{PREFIX} installed {hook}")
    return 0


def uninstall(hooks: Path) -> int:
    hook = hooks / "pre-commit"
    if not hook.exists():
        print(f"{PREFIX} nothing to remove")
        return 0
    saved = _backup(hook)
    hook.unlink()
    print(f"{PREFIX} removed {hook} (saved as {saved})")
    return 0


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        prog="install_pre_commit_hook.py",
        description="Install a git pre-commit hook that runs the daysheet contract tests.",
    )
    ap.add_argument("--force", action="store_true", help="Replace an existing pre-commit hook (keeps a .bak copy).")
    ap.add_argument("--uninstall", action="store_true", help="Remove the pre-commit hook (keeps a .bak copy).")
    ap.add_argument("--print", dest="do_print", action="store_true", help="Print the hook script and exit.")
    ns = ap.parse_args(argv)

    if ns.do_print:
        print(HOOK_BODY.rstrip("\n"))
        return 0

    hooks = find_hooks_dir()
    if hooks is None:
        print(f"{PREFIX} ERROR: not inside a git work tree")
        return 2

    if ns.uninstall:
        return uninstall(hooks)
    return install(hooks, force=ns.force)


if __name__ == "__main__":
    raise SystemExit(main())
