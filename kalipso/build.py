"""Output naming and native compiler invocation."""

from __future__ import annotations

import subprocess
import sys

from .errors import BuildError

SOURCE_EXT = ".kpso"
C_EXT = ".c"
DEFAULT_CC = "gcc"


def base_name(input_path: str) -> str:
    """Input path with a trailing .kpso removed. Other extensions are kept."""
    if input_path.endswith(SOURCE_EXT):
        return input_path[: -len(SOURCE_EXT)]
    return input_path


def executable_name(base: str, platform: str | None = None) -> str:
    plat = platform if platform is not None else sys.platform
    if plat == "win32":
        return base + ".exe"
    return base


def output_paths(input_path: str, platform: str | None = None) -> tuple[str, str]:
    """Returns (c_path, exe_path) for a source file."""
    base = base_name(input_path)
    return (base + C_EXT, executable_name(base, platform))


def compile_c(c_path: str, exe_path: str, cc: str = DEFAULT_CC) -> None:
    """Run `cc c_path -o exe_path`. Raises BuildError on failure."""
    cmd = [cc, c_path, "-o", exe_path]
    try:
        result = subprocess.run(cmd, capture_output=True, text=True)
    except OSError as e:
        raise BuildError("cannot run '" + cc + "': " + str(e)) from e
    if result.returncode != 0:
        raise BuildError(
            "'" + cc + "' exited with status " + str(result.returncode),
            (result.stdout + result.stderr).strip(),
        )
