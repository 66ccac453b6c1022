#!/usr/bin/env python
"""
Simple Test Runner for bstreelib
================================

Runs all tests except slow ones.

Usage:
    python run_tests.py           # Run all non-slow tests
    python run_tests.py --slow    # Show info about slow tests
    python run_tests.py --all     # Run everything including slow tests
"""

import subprocess
import sys
import argparse
from pathlib import Path


def run_tests(include_slow=False):
    """Run the test suite."""
    cmd = [
        sys.executable, "-m", "pytest",
        "--tb=short",               # Short traceback format
        "--durations=10",           # Show 10 slowest tests
        "-v"                        # Verbose output
    ]

    if not include_slow:
        cmd.extend(["-m", "not slow"])
        print("Running all tests EXCEPT slow tests...")
    else:
        print("Running ALL tests including slow ones...")
    print("=" * 60)

    result = subprocess.run(cmd, cwd=Path(__file__).parent)
    return result.returncode


def show_slow_tests():
    """Show information about slow tests."""
    print("=" * 60)
    print("SLOW TESTS")
    print("=" * 60)
    print("\nThe following tests are marked as @pytest.mark.slow:")
    print("-" * 60)

    slow_tests = [
        ("test_traversal_strategies.py::TestDegenerateTrees",
         "Grows a 3,000-node chain by sorted inserts for every test",
         "~5-10s", "Checks traversals, height, depth and rebalance stay iterative"),
    ]

    for test_name, description, duration, reason in slow_tests:
        print(f"\n* {test_name}")
        print(f"   Description: {description}")
        print(f"   Duration: {duration}")
        print(f"   Why slow: {reason}")

    print("""
Run them with:
   python -m pytest -m slow -v
   python run_tests.py --all
""")


def main():
    parser = argparse.ArgumentParser(description="Test runner for bstreelib")
    parser.add_argument("--slow", action="store_true", help="Show info about slow tests")
    parser.add_argument("--all", action="store_true", help="Run all tests including slow ones")

    args = parser.parse_args()

    if args.slow:
        show_slow_tests()
        return 0

    return run_tests(include_slow=args.all)


if __name__ == "__main__":
    sys.exit(main())
