"""Pytest configuration for Kalipso test suite."""

import shutil
import sys
from pathlib import Path

import pytest

# Add repo root to path for kalipso imports without installing
ROOT_DIR = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT_DIR))

TESTS_DIR = Path(__file__).parent


def parse_spec_file(path: Path) -> list[tuple[str, str, str]]:
    """Parse a .tests file into (name, input, expected) tuples.

    Format:

        === test name
        input lines
        ---
        expected lines
        ---
    """
    lines = path.read_text().split("\n")
    result: list[tuple[str, str, str]] = []
    i = 0
    while i < len(lines):
        line = lines[i]
        if line.startswith("=== "):
            test_name = line[4:].strip()
            i += 1
            input_lines: list[str] = []
            while i < len(lines) and not lines[i].startswith("---"):
                input_lines.append(lines[i])
                i += 1
            if i < len(lines) and lines[i] == "---":
                i += 1
            expected_lines: list[str] = []
            while i < len(lines) and not lines[i].startswith("---"):
                expected_lines.append(lines[i])
                i += 1
            if i < len(lines) and lines[i] == "---":
                i += 1
            test_input = "\n".join(input_lines)
            expected = "\n".join(expected_lines).strip()
            result.append((test_name, test_input, expected))
        else:
            i += 1
    return result


def discover_spec_tests(dirname: str) -> list[tuple[str, str, str]]:
    """Find all tests in a phase directory, returns (test_id, input, expected)."""
    results = []
    for test_file in sorted((TESTS_DIR / dirname).glob("*.tests")):
        for name, test_input, expected in parse_spec_file(test_file):
            results.append((f"{test_file.stem}/{name}", test_input, expected))
    return results


@pytest.fixture
def cc() -> str:
    """Path to a C compiler, skipping the test when none is installed."""
    path = shutil.which("gcc") or shutil.which("cc")
    if path is None:
        pytest.skip("no C compiler available")
    return path
