# pipeline2

`pipeline2` runs two commands connected together. The first command reads an
input file. Its output is passed to the second command, which writes an output
file. The result is the same as this shell line:

```
< infile cmd1 | cmd2 > outfile
```

## Command line

```
pipeline2 infile "cmd1 args" "cmd2 args" outfile
```

The command takes exactly four arguments. With any other number it prints a
usage line on stderr and exits with status 1.

Each command is split on spaces into a program name and its arguments. Empty
fields are dropped. The commands do not go through a shell, so quoting,
globbing and variables are not handled. The program name is joined to each
directory of `PATH` in turn. The first path that exists is used. If none exists,
the last candidate is tried and the error is reported.

How it behaves:

- The first command runs to completion first. Its output is collected in memory
  and then given to the second command as its input.
- If the input file cannot be opened, or the first command cannot be started,
  a message goes to stderr. The second command still runs, with empty input.
- The output file is created if it is missing and truncated if it exists. A new
  file gets mode `0644`.
- If the output file cannot be opened, or the second command cannot be started,
  a message goes to stderr and the exit status is 1.
- Otherwise the exit status is that of the second command. When the second
  command is killed by a signal, the status is 128 plus the signal number.

Example:

```
pipeline2 input.txt "grep error" "wc -l" count.txt
```

## Library

```python
import os

from pipeline2.pipeline import PipelineError, run_pipeline
from pipeline2.paths import parse_command, resolve_command, search_path, split_fields

status = run_pipeline("input.txt", "grep error", "wc -l", "count.txt", dict(os.environ))
```

`pipeline2.paths`:

- `split_fields(text, sep)` splits `text` on one separator character and drops
  empty fields. It raises `ValueError` if `sep` is not exactly one character.
- `search_path(env)` returns the directories in the `PATH` entry of the mapping
  `env`. It returns `None` when `PATH` is not set.
- `resolve_command(directories, name)` returns the first `directory/name` that
  exists. If none exists, it returns the last candidate it tried. If there are
  no directories, or `directories` is `None`, it returns `None`.
- `parse_command(cmd)` splits a command string on spaces. It raises `ValueError`
  for an empty command.

`pipeline2.pipeline`:

- `run_pipeline(infile, first, second, outfile, env)` runs both commands with the
  environment `env` and returns the exit status of the second one. It raises
  `PipelineError` when the output file cannot be opened or the second command
  cannot be run.
- `main(argv=None)` is the entry point of the command. It returns the exit
  status.

## What it does not do

Only two commands are supported. Longer pipelines are not. There is no
here-document input mode, and nothing is appended to an existing output file.
The two commands do not run at the same time, because the first one's output
is buffered in memory.

## Tests

Install the package with its `test` extra, then run `pytest`.