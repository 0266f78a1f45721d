#!/usr/bin/env python
"""Test runner for ContentGen SDK."""

import sys
import subprocess
import argparse


def main():
    """Run tests with various options."""
    parser = argparse.ArgumentParser(description="Run ContentGen SDK tests")
    parser.add_argument("--unit", action="store_true", help="Run unit tests only")
    parser.add_argument("--coverage", action="store_true", help="Generate coverage report")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    parser.add_argument("-k", dest="keyword", help="Only run tests matching the expression")

    args = parser.parse_args()

    # Build pytest command
    cmd = ["pytest", "tests/unit" if args.unit else "tests"]

    if args.keyword:
        cmd.extend(["-k", args.keyword])

    # Add verbosity
    if args.verbose:
        cmd.append("-vv")

    # Add coverage
    if args.coverage:
        cmd.extend([
            "--cov=contentgen_sdk",
            "--cov-report=term-missing",
            "--cov-report=html"
        ])

    # Run tests
    print(f"Running: {' '.join(cmd)}")
    result = subprocess.run(cmd, cwd=".")

    return result.returncode


if __name__ == "__main__":
    sys.exit(main())
