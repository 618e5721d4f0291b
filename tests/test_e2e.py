"""End-to-end tests: compile Kalipso to C, build with a C compiler, run."""

import subprocess
from pathlib import Path

import pytest

from kalipso import translate
from kalipso.build import compile_c, output_paths

PROGRAMS = [
    ("sum", "x = 5\ny = 10\nresult = x + y\nprint result\n", "", "15\n"),
    ("precedence", "a = 2\nprint a + 3 * 4\nprint (a + 3) * 4\n", "", "14\n20\n"),
    ("unset is zero", "print never_assigned\n", "", "0\n"),
    ("input", "input n\nsquare = n * n\nprint square\n", "12\n", "144\n"),
    ("two inputs", "input a\ninput b\nprint a - b\n", "3 10\n", "-7\n"),
    (
        "sixty four bit",
        "big = 3000000000\nprint big * 3\n",
        "",
        "9000000000\n",
    ),
    ("reassign", "x = 1\nx = x + 1\nx = x * 10\nprint x\n", "", "20\n"),
    ("comments", "# header\n\n  # indented\nprint 7 % 4\n", "", "3\n"),
]


@pytest.mark.parametrize(
    "source,stdin,expected",
    [pytest.param(src, stdin, exp, id=name) for name, src, stdin, exp in PROGRAMS],
)
def test_program_output(tmp_path: Path, cc: str, source: str, stdin: str, expected: str):
    c_path, exe_path = output_paths(str(tmp_path / "prog.kpso"))
    Path(c_path).write_text(translate(source))
    compile_c(c_path, exe_path, cc)
    result = subprocess.run(
        [exe_path], input=stdin, capture_output=True, text=True, timeout=30
    )
    assert result.returncode == 0
    assert result.stdout == expected
