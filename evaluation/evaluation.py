#!/usr/bin/env python3
"""
Evaluation runner for the Huffman text codec.

This evaluation script:
- Runs pytest on the tests/ folder against repository_after
- Collects individual test results with pass/fail status
- Generates a structured report with environment metadata

Run with:
    python evaluation/evaluation.py [--output PATH] [--tests DIR]
"""
import os
import sys
import json
import uuid
import platform
import subprocess
from datetime import datetime
from pathlib import Path


PROJECT_ROOT = Path(__file__).parent.parent
REPO_AFTER = PROJECT_ROOT / "repository_after"


def generate_run_id():
    """Generate a short unique run ID."""
    return uuid.uuid4().hex[:8]


def _git(*args):
    try:
        result = subprocess.run(
            ["git", *args],
            capture_output=True,
            text=True,
            cwd=str(PROJECT_ROOT),
            timeout=5
        )
    except (OSError, subprocess.TimeoutExpired):
        return None
    if result.returncode != 0:
        return None
    return result.stdout.strip()


def get_environment_info():
    """Interpreter and revision the test run used."""
    commit = _git("rev-parse", "HEAD")
    return {
        "python_version": platform.python_version(),
        "platform": platform.platform(),
        "git_commit": commit[:8] if commit else "unknown",
    }


def parse_pytest_verbose_output(output):
    """Parse pytest verbose output to extract test results."""
    tests = []
    status_words = {
        " PASSED": "passed",
        " FAILED": "failed",
        " ERROR": "error",
        " SKIPPED": "skipped",
    }

    for line in output.split('\n'):
        line_stripped = line.strip()

        # Match lines like: tests/test_huffman_service.py::test_single_symbol_source PASSED
        if '::' not in line_stripped:
            continue
        for status_word, outcome in status_words.items():
            if status_word in line_stripped:
                nodeid = line_stripped.split(status_word)[0].strip()
                tests.append({
                    "nodeid": nodeid,
                    "name": nodeid.split("::")[-1],
                    "outcome": outcome,
                })
                break

    return tests


def summarize(tests):
    return {
        "total": len(tests),
        "passed": sum(1 for t in tests if t["outcome"] == "passed"),
        "failed": sum(1 for t in tests if t["outcome"] == "failed"),
        "errors": sum(1 for t in tests if t["outcome"] == "error"),
        "skipped": sum(1 for t in tests if t["outcome"] == "skipped"),
    }


def run_pytest(tests_dir, timeout=300):
    """
    Run pytest on the tests folder with repository_after on PYTHONPATH.

    Returns:
        dict with test results
    """
    print(f"\n{'=' * 60}")
    print("RUNNING TESTS")
    print(f"{'=' * 60}")
    print(f"PYTHONPATH: {REPO_AFTER}")
    print(f"Tests directory: {tests_dir}")

    cmd = [
        sys.executable, "-m", "pytest",
        str(tests_dir),
        "-v",
        "--tb=short",
    ]

    env = os.environ.copy()
    env["PYTHONPATH"] = str(REPO_AFTER)

    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            cwd=str(PROJECT_ROOT),
            env=env,
            timeout=timeout
        )
    except subprocess.TimeoutExpired:
        print("❌ Test execution timed out")
        return {
            "success": False,
            "exit_code": -1,
            "tests": [],
            "summary": {"error": "Test execution timed out"},
            "stdout": "",
            "stderr": "",
        }

    stdout = result.stdout
    stderr = result.stderr
    tests = parse_pytest_verbose_output(stdout)
    summary = summarize(tests)

    print(f"\nResults: {summary['passed']} passed, {summary['failed']} failed, "
          f"{summary['errors']} errors, {summary['skipped']} skipped (total: {summary['total']})")

    for test in tests:
        status_icon = {
            "passed": "✅",
            "failed": "❌",
            "error": "💥",
            "skipped": "⏭️"
        }.get(test["outcome"], "❓")
        print(f"  {status_icon} {test['nodeid']}: {test['outcome']}")

    return {
        "success": result.returncode == 0,
        "exit_code": result.returncode,
        "tests": tests,
        "summary": summary,
        "stdout": stdout[-3000:],
        "stderr": stderr[-1000:],
    }


def report_path(started_at):
    """evaluation/YYYY-MM-DD/HH-MM-SS/report.json for a run started at started_at."""
    return (PROJECT_ROOT / "evaluation" / started_at.strftime("%Y-%m-%d")
            / started_at.strftime("%H-%M-%S") / "report.json")


def main(argv=None):
    """Main entry point for evaluation."""
    import argparse

    parser = argparse.ArgumentParser(description="Run the Huffman codec test evaluation")
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output JSON file path (default: evaluation/YYYY-MM-DD/HH-MM-SS/report.json)"
    )
    parser.add_argument(
        "--tests",
        type=str,
        default=str(PROJECT_ROOT / "tests"),
        help="Tests directory to run (default: tests/)"
    )
    args = parser.parse_args(argv)

    run_id = generate_run_id()
    started_at = datetime.now()

    print(f"Run ID: {run_id}")
    print(f"Started at: {started_at.isoformat()}")

    results = run_pytest(args.tests)
    success = results["success"]

    finished_at = datetime.now()
    duration = (finished_at - started_at).total_seconds()

    report = {
        "run_id": run_id,
        "started_at": started_at.isoformat(),
        "finished_at": finished_at.isoformat(),
        "duration_seconds": round(duration, 6),
        "success": success,
        "error": None if success else "Tests failed",
        "environment": get_environment_info(),
        "results": results,
    }

    output_path = Path(args.output) if args.output else report_path(started_at)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w") as f:
        json.dump(report, f, indent=2)
    print(f"\n✅ Report saved to: {output_path}")

    print(f"\n{'=' * 60}")
    print("EVALUATION COMPLETE")
    print(f"{'=' * 60}")
    print(f"Run ID: {run_id}")
    print(f"Duration: {duration:.2f}s")
    print(f"Success: {'✅ YES' if success else '❌ NO'}")

    return 0 if success else 1


if __name__ == "__main__":
    sys.exit(main())
