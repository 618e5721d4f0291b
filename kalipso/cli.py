"""Kalipso CLI - compile .kpso files to C and build an executable."""

from __future__ import annotations

import os
import sys

from .backend import emit_c
from .build import DEFAULT_CC, compile_c, output_paths
from .errors import BuildError, CompileError
from .frontend import CompileLimits, compile_source, is_skippable, tokenize
from .serialize import program_to_dict, to_json, tokens_to_dict

PHASES: list[str] = ["tokens", "compile", "emit"]

USAGE: str = """\
kalipso [OPTIONS] INPUT

Compile a Kalipso (.kpso) program to C, then build it with a C compiler.

Options:
  -o, --output FILE   Write C code to FILE instead of INPUT.c
  --cc CC             C compiler to invoke (default: $CC or gcc)
  --no-build          Write the C file but do not invoke the C compiler
  --stop-at PHASE     Stop after phase and print its result: tokens, compile, emit
  --help              Show this help message
"""


class Options:
    """Parsed command-line options."""

    def __init__(self) -> None:
        self.input_file: str = ""
        self.output_file: str | None = None
        self.cc: str = os.environ.get("CC") or DEFAULT_CC
        self.build: bool = True
        self.stop_at: str | None = None


def parse_args(args: list[str]) -> Options | int:
    """Parse arguments. Returns Options, or an exit code when done early."""
    opts = Options()
    i = 0
    while i < len(args):
        arg = args[i]
        if arg == "--help" or arg == "-h":
            print(USAGE, end="")
            return 0
        elif arg == "-o" or arg == "--output" or arg == "--cc" or arg == "--stop-at":
            if i + 1 >= len(args):
                print("error: " + arg + " requires an argument", file=sys.stderr)
                return 2
            value = args[i + 1]
            if arg == "--cc":
                opts.cc = value
            elif arg == "--stop-at":
                opts.stop_at = value
            else:
                opts.output_file = value
            i += 2
        elif arg == "--no-build":
            opts.build = False
            i += 1
        elif arg.startswith("-") and arg != "-":
            print("error: unknown flag '" + arg + "'", file=sys.stderr)
            return 2
        elif opts.input_file == "":
            opts.input_file = arg
            i += 1
        else:
            print("error: unexpected argument '" + arg + "'", file=sys.stderr)
            return 2
    if opts.input_file == "":
        print("error: missing input file", file=sys.stderr)
        print(USAGE, end="", file=sys.stderr)
        return 2
    if opts.stop_at is not None and opts.stop_at not in PHASES:
        print("error: unknown phase '" + opts.stop_at + "'", file=sys.stderr)
        return 2
    return opts


def read_source(input_file: str) -> str | None:
    """Read source from a file, or stdin for '-'. None on error (already reported)."""
    if input_file == "-":
        raw = sys.stdin.buffer.read()
    else:
        try:
            with open(input_file, "rb") as f:
                raw = f.read()
        except OSError:
            print("error: cannot open '" + input_file + "'", file=sys.stderr)
            return None
    try:
        return raw.decode("utf-8")
    except ValueError:
        print("error: invalid utf-8 in input", file=sys.stderr)
        return None


def write_output(output: str, output_file: str | None) -> int:
    """Write output to file or stdout. Returns 0 on success, 1 on error."""
    if output_file is not None:
        try:
            with open(output_file, "w") as f:
                f.write(output)
        except OSError:
            print("error: cannot write '" + output_file + "'", file=sys.stderr)
            return 1
        return 0
    sys.stdout.write(output)
    return 0


def _print_compile_error(e: CompileError) -> None:
    print("error:" + str(e.lineno) + ":" + str(e.col) + ": " + e.msg, file=sys.stderr)


def run_phases(source: str, stop_at: str | None, limits: CompileLimits) -> str:
    """Run the pipeline up to stop_at. Raises CompileError."""
    if stop_at == "tokens":
        lines = source.split("\n")
        token_lines = []
        for idx, line in enumerate(lines):
            if not is_skippable(line):
                token_lines.append(tokenize(line, idx + 1, limits.max_tokens))
        return to_json(tokens_to_dict(token_lines)) + "\n"
    program = compile_source(source, limits)
    if stop_at == "compile":
        return to_json(program_to_dict(program)) + "\n"
    return emit_c(program)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parsed = parse_args(argv if argv is not None else sys.argv[1:])
    if isinstance(parsed, int):
        return parsed
    opts = parsed
    source = read_source(opts.input_file)
    if source is None:
        return 1
    try:
        output = run_phases(source, opts.stop_at, CompileLimits())
    except CompileError as e:
        _print_compile_error(e)
        return 1
    if opts.stop_at is not None:
        return write_output(output, opts.output_file)

    input_name = "a.kpso" if opts.input_file == "-" else opts.input_file
    c_path, exe_path = output_paths(input_name)
    if opts.output_file is not None:
        c_path = opts.output_file
    if write_output(output, c_path) != 0:
        return 1
    print("Generated C code: " + c_path)
    if not opts.build:
        return 0
    print("Compiling...")
    sys.stdout.flush()
    try:
        compile_c(c_path, exe_path, opts.cc)
    except BuildError as e:
        if e.output != "":
            print(e.output, file=sys.stderr)
        print("Compilation failed! " + e.msg, file=sys.stderr)
        return 1
    print("Success! Created executable: " + exe_path)
    if os.path.dirname(exe_path) == "":
        print("Run with: ./" + exe_path)
    else:
        print("Run with: " + exe_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
