#!/usr/bin/env python3
"""
Case runner for the nzlit generator.

Runs the CLI over every tests/cases/test_*.nz literal list and verifies the
exit code and any output expectations in the file header:
- 0: Success (no errors, no warnings)
- 1: Success with warnings
- 2: Generation failed with errors

Usage:
    python tests/run_tests.py
    python tests/run_tests.py --verbose
    python tests/run_tests.py --filter widen
"""

import argparse
import json
import shlex
import subprocess
import sys
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path

from tqdm import tqdm

from case_metadata import check_output, parse_case_metadata


def get_expected_exit_code(case_file: Path) -> int:
    """Determine expected exit code based on filename convention.

    Convention:
    - test_*.nz: expect 0 (success, no warnings)
    - test_warn_*.nz: expect 1 (success with warnings)
    - test_err_*.nz: expect 2 (generation failed)
    """
    name = case_file.name
    if name.startswith("test_warn_"):
        return 1
    if name.startswith("test_err_"):
        return 2
    return 0


def run_single_case(case_file: Path, project_root: Path) -> tuple[str, bool, int, int, str]:
    """Run a single case file and return results."""
    name = case_file.name
    expected_exit_code = get_expected_exit_code(case_file)
    metadata = parse_case_metadata(case_file)

    cmd = [sys.executable, "-m", "nzlit", "--file", str(case_file), "--no-color"]
    if metadata.cmd_args:
        cmd.extend(shlex.split(metadata.cmd_args))

    try:
        result = subprocess.run(
            cmd,
            cwd=project_root,
            capture_output=True,
            text=True,
            timeout=metadata.timeout_seconds,
        )
    except subprocess.TimeoutExpired:
        return name, False, expected_exit_code, -1, "CASE TIMEOUT"
    except OSError as e:
        return name, False, expected_exit_code, -1, f"CASE ERROR: {e}"

    problems = check_output(metadata, result.stdout, result.stderr)
    passed = result.returncode == expected_exit_code and not problems

    output = ""
    if problems:
        output += "PROBLEMS:\n" + "\n".join(problems) + "\n"
    if result.stdout:
        output += f"STDOUT:\n{result.stdout}\n"
    if result.stderr:
        output += f"STDERR:\n{result.stderr}\n"

    return name, passed, expected_exit_code, result.returncode, output


def main():
    parser = argparse.ArgumentParser(description="Run nzlit generator cases")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Show detailed output for each case")
    parser.add_argument("-j", "--jobs", type=int, default=4,
                        help="Number of parallel jobs (default: 4)")
    parser.add_argument("--filter", type=str,
                        help="Only run cases whose name contains this pattern")
    parser.add_argument("--json", action="store_true",
                        help="Output results in JSON format")
    args = parser.parse_args()

    project_root = Path(__file__).parent.parent
    cases_dir = project_root / "tests" / "cases"

    case_files = sorted(cases_dir.rglob("test_*.nz"))
    if args.filter:
        case_files = [f for f in case_files if args.filter in f.name]

    if not case_files:
        if not args.json:
            print("No case files found!")
        return 1

    if not args.json:
        print(f"Running {len(case_files)} cases with {args.jobs} parallel jobs...")
        print()

    start_time = time.time()

    # Run cases in parallel with progress bar
    results = []
    show_progress = not args.json and not args.verbose
    with ThreadPoolExecutor(max_workers=args.jobs) as executor:
        futures = {executor.submit(run_single_case, f, project_root): f for f in case_files}
        pbar = None
        if show_progress:
            pbar = tqdm(total=len(case_files), desc="Running cases", unit="case",
                        bar_format="{l_bar}{bar}| {n_fmt}/{total_fmt} [{elapsed}<{remaining}]")
        for future in as_completed(futures):
            results.append(future.result())
            if pbar is not None:
                pbar.update(1)
        if pbar is not None:
            pbar.close()

    end_time = time.time()

    passed_cases = []
    failed_cases = []

    for name, passed, expected, actual, output in sorted(results):
        if passed:
            passed_cases.append(name)
            if args.verbose and not args.json:
                print(f"✓ {name} (expected: {expected}, actual: {actual})")
        else:
            failed_cases.append((name, expected, actual, output))
            if not args.json:
                print(f"✗ {name} (expected: {expected}, actual: {actual})")
                if args.verbose and output:
                    print(f"  Output: {output}")

    if args.json:
        json_output = {
            "total_cases": len(results),
            "passed": len(passed_cases),
            "failed": len(failed_cases),
            "duration_seconds": round(end_time - start_time, 2),
            "failed_cases": [
                {"name": name, "expected_exit_code": expected, "actual_exit_code": actual}
                for name, expected, actual, _ in failed_cases
            ],
        }
        print(json.dumps(json_output, indent=2))
        return 1 if failed_cases else 0

    print()
    print(f"Case Results ({end_time - start_time:.2f}s):")
    print(f"  Passed: {len(passed_cases)}")
    print(f"  Failed: {len(failed_cases)}")
    print(f"  Total:  {len(results)}")

    if failed_cases:
        print()
        print("Failed cases:")
        for name, expected, actual, _ in failed_cases:
            print(f"  {name}: expected {expected}, got {actual}")
        return 1

    print()
    print("All cases passed! ✓")
    return 0


if __name__ == "__main__":
    sys.exit(main())
