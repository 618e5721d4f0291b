"""Output naming and native build tests."""

from pathlib import Path

import pytest

from kalipso.build import base_name, compile_c, executable_name, output_paths
from kalipso.errors import BuildError


@pytest.mark.parametrize(
    "path,expected",
    [
        ("prog.kpso", "prog"),
        ("dir/sub/prog.kpso", "dir/sub/prog"),
        ("prog.txt", "prog.txt"),
        ("prog", "prog"),
        ("my.prog.kpso", "my.prog"),
    ],
)
def test_base_name(path: str, expected: str):
    assert base_name(path) == expected


def test_output_paths_posix():
    assert output_paths("hello.kpso", "linux") == ("hello.c", "hello")


def test_output_paths_windows():
    assert output_paths("hello.kpso", "win32") == ("hello.c", "hello.exe")
    assert executable_name("x", "win32") == "x.exe"


def test_missing_compiler(tmp_path: Path):
    c_file = tmp_path / "p.c"
    c_file.write_text("int main() { return 0; }\n")
    with pytest.raises(BuildError) as exc:
        compile_c(str(c_file), str(tmp_path / "p"), str(tmp_path / "nope"))
    assert "cannot run" in exc.value.msg


def test_compiler_error_output(tmp_path: Path, cc: str):
    c_file = tmp_path / "broken.c"
    c_file.write_text("int main() { return }\n")
    with pytest.raises(BuildError) as exc:
        compile_c(str(c_file), str(tmp_path / "broken"), cc)
    assert "exited with status" in exc.value.msg
    assert exc.value.output != ""
