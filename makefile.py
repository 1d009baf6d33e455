#!/usr/bin/env python3
"""
makefile.py - Task runner for the ABCU advising project.

Usage:
    python makefile.py <target>

Requires: pip install -e .[dev]
"""

import os
import shutil
import subprocess
import sys
from collections import defaultdict

from colorama import Fore, Style
from colorama import init as _colorama_init

_colorama_init(autoreset=True)

SAMPLE_DATA = os.path.join("data", "abcu_courses.csv")


def print_header(title):
    print(f"\n{Fore.CYAN}{Style.BRIGHT}== {title} =={Style.RESET_ALL}")


def print_step(msg):
    print(f"{Fore.YELLOW}-->{Style.RESET_ALL} {msg}")


def print_success(msg):
    print(f"{Fore.GREEN}[OK]{Style.RESET_ALL} {msg}")


def run_cmd(args):
    """Run a command, exiting with its return code if it fails."""
    try:
        result = subprocess.run(args)
    except FileNotFoundError:
        print(f"{Fore.RED}[ERROR]{Style.RESET_ALL} Command not found: '{args[0]}'")
        sys.exit(127)
    if result.returncode != 0:
        sys.exit(result.returncode)


def target_test():
    print_header("Running All Tests")
    run_cmd([sys.executable, "-m", "pytest", "-v"])


def target_test_index():
    print_header("Running Index Tests")
    run_cmd([sys.executable, "-m", "pytest", "tests/test_index", "-v"])


def target_test_catalog():
    print_header("Running Catalog Tests")
    run_cmd([sys.executable, "-m", "pytest", "tests/test_catalog", "-v"])


def target_install():
    print_header("Installing Package (editable, with dev extras)")
    run_cmd([sys.executable, "-m", "pip", "install", "-e", ".[dev]"])
    print_success("Install complete!")


def target_clean():
    print_header("Cleaning Caches")
    for root, dirs, _ in os.walk("."):
        for name in dirs:
            if name in ("__pycache__", ".pytest_cache"):
                path = os.path.join(root, name)
                shutil.rmtree(path, ignore_errors=True)
                print_step(f"Removed {path}")
    print_success("Clean complete!")


def target_run():
    print_header("Running Advising Shell")
    print_step(f"Sample data: {SAMPLE_DATA}")
    run_cmd([sys.executable, "-m", "advising"])


TARGETS = {
    "test": (target_test, "Run all tests", "Testing"),
    "test-index": (target_test_index, "Run index tests only", "Testing"),
    "test-catalog": (target_test_catalog, "Run catalog tests only", "Testing"),
    "install": (target_install, "pip install -e .[dev]", "Tools"),
    "clean": (target_clean, "Remove __pycache__ and .pytest_cache", "Tools"),
    "run": (target_run, "Start the interactive shell", "Run"),
    "help": (None, "Show this help message", "Meta"),
}


def target_help():
    title = (
        Fore.CYAN
        + Style.BRIGHT
        + "ABCU Advising - Available Commands"
        + Style.RESET_ALL
    )
    print(f"\n{title}\n")
    groups = defaultdict(list)
    for name, (_, desc, group) in TARGETS.items():
        groups[group].append((name, desc))
    for group in ["Testing", "Run", "Tools", "Meta"]:
        if group not in groups:
            continue
        header = Fore.YELLOW + Style.BRIGHT + f"{group}:" + Style.RESET_ALL
        print(header)
        for name, desc in groups[group]:
            padded = name.ljust(24)
            print(f"  {Fore.GREEN}{padded}{Style.RESET_ALL}  {desc}")
        print()


TARGETS["help"] = (target_help, "Show this help message", "Meta")


def main():
    if len(sys.argv) < 2:
        target_help()
        sys.exit(0)

    name = sys.argv[1]

    if name not in TARGETS:
        print(f"{Fore.RED}[ERROR]{Style.RESET_ALL} Unknown target: '{name}'")
        print("  Run:  python makefile.py help  to list all available targets.")
        sys.exit(1)

    func, _, _ = TARGETS[name]
    func()


if __name__ == "__main__":
    main()
