"""Run ``infile < cmd1 | cmd2 > outfile``."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Mapping, Sequence

from pipeline2.paths import parse_command, resolve_command, search_path


class PipelineError(Exception):
    """Raised when the second stage of the pipeline cannot be run."""


def _locate(cmd: str, env: Mapping[str, str]) -> tuple[list[str], str]:
    argv = parse_command(cmd)
    path = resolve_command(search_path(env), argv[0])
    if path is None:
        raise FileNotFoundError(f"{argv[0]}: command not found")
    return argv, path


def _first_stage(infile: str, cmd: str, env: Mapping[str, str]) -> bytes:
    """Run the first command on ``infile`` and collect what it writes.

    Failures are reported on stderr; the second stage then reads nothing.
    """
    try:
        source = open(infile, "rb")
    except OSError as exc:
        print(f"Error on open input file: {exc}", file=sys.stderr)
        return b""
    with source:
        try:
            argv, path = _locate(cmd, env)
            result = subprocess.run(
                argv,
                executable=path,
                stdin=source,
                stdout=subprocess.PIPE,
                env=dict(env),
                check=False,
            )
        except (OSError, ValueError) as exc:
            print(f"execve failed: {exc}", file=sys.stderr)
            return b""
    return result.stdout


def run_pipeline(
    infile: str,
    first: str,
    second: str,
    outfile: str,
    env: Mapping[str, str],
) -> int:
    """Feed ``infile`` through ``first`` then ``second`` into ``outfile``.

    Returns the exit status of the second command.
    """
    data = _first_stage(infile, first, env)
    try:
        fd = os.open(outfile, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
    except OSError as exc:
        raise PipelineError(f"cannot open output file {outfile}: {exc}") from exc
    with os.fdopen(fd, "wb") as sink:
        try:
            argv, path = _locate(second, env)
            result = subprocess.run(
                argv,
                executable=path,
                input=data,
                stdout=sink,
                env=dict(env),
                check=False,
            )
        except (OSError, ValueError) as exc:
            raise PipelineError(f"cannot run {second!r}: {exc}") from exc
    code = result.returncode
    return code if code >= 0 else 128 - code


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: ``infile cmd1 cmd2 outfile``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        print("usage: pipeline2 infile cmd1 cmd2 outfile", file=sys.stderr)
        return 1
    infile, first, second, outfile = args
    try:
        return run_pipeline(infile, first, second, outfile, dict(os.environ))
    except PipelineError as exc:
        print(exc, file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())