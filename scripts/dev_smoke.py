#!/usr/bin/env python3
"""Quick smoke test for local development.

This script builds a small input tree, resolves it through the installed
``txtfile-reader`` CLI and writes a split plan, to verify the installation works.
"""
from __future__ import annotations

import json
import subprocess
import sys
import tempfile
from pathlib import Path


def gen_test_tree(tmp_path: Path) -> Path:
    """Create a few text files, one of them in a nested directory."""
    print("Generating test files...")
    root = tmp_path / "inputs"
    for relpath in ["part-1.csv", "part-2.csv", "part-3.csv", "notes.txt", "nested/part-4.csv"]:
        target = root / relpath
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text("id,name\n1,smoke\n", encoding="utf-8")
    print(f"Generated: {root}")
    return root


def run_resolve(spec: str) -> list:
    """Resolve one path specification and return the file list."""
    print(f"Resolving {spec} ...")
    result = subprocess.run(
        ["txtfile-reader", "resolve", spec, "--json"],
        capture_output=True,
        text=True,
    )
    if result.returncode != 0:
        print(f"ERROR: resolve failed: {result.stderr}")
        return []
    return json.loads(result.stdout)


def run_split(root: Path, plan_path: Path, advice: int) -> bool:
    """Split every file under ``root`` and write the plan manifest."""
    print(f"Splitting {root} with advice {advice} ...")
    result = subprocess.run(
        ["txtfile-reader", "split", str(root), "--advice", str(advice), "--out", str(plan_path)],
        capture_output=True,
        text=True,
    )
    if result.returncode != 0:
        print(f"ERROR: split failed: {result.stderr}")
        return False
    print(result.stdout.rstrip())
    return True


def print_summary(files: list, plan_path: Path) -> None:
    print("\n=== Summary ===")
    print(f"wildcard matches: {len(files)}")
    for name in files:
        print(f"  {name}")

    if not plan_path.exists():
        print("WARNING: split plan not found")
        return
    print(f"split plan: {plan_path}")
    for line in plan_path.read_text(encoding="utf-8").splitlines():
        record = json.loads(line)
        print(f"  group {record['group_index']}: {record['file_count']} file(s)")


def main() -> int:
    """Main entry point."""
    with tempfile.TemporaryDirectory() as tmpdir:
        tmp_path = Path(tmpdir)
        root = gen_test_tree(tmp_path)
        plan_path = tmp_path / "split.plan.jsonl"

        files = run_resolve(str(root / "part-?.csv"))
        if len(files) != 3:
            print(f"ERROR: expected 3 wildcard matches, got {len(files)}")
            return 1

        if not run_split(root, plan_path, advice=2):
            return 1

        print_summary(files, plan_path)

    print("\nSmoke test passed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
