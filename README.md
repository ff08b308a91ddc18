# pipex

`pipex` does the same job as the shell construct

```sh
< infile cmd1 | cmd2 > outfile
```

It opens `infile` for reading and starts `cmd1` with that file as its
standard input. The output of `cmd1` goes through a pipe into `cmd2`, and
whatever `cmd2` prints is written to `outfile`. Both commands run at the
same time. If `outfile` does not exist it is created with mode `0644`. If it
does exist it is truncated.

## Installation

```sh
pip install .
```

To also install the test dependencies:

```sh
pip install ".[test]"
```

## Command line

```sh
pipex infile "cmd1 args" "cmd2 args" outfile
```

It takes exactly four arguments. With any other number it prints
`argc should be 5` on standard error and exits with status 1.

Each command string is split on spaces, and leading spaces are ignored. There
is no quoting, escaping, globbing or variable expansion. A command is found
as follows:

- A command that begins with `.` or `/` is run as given.
- A command name with a `/` elsewhere in it is taken relative to the current
  directory.
- Any other name is looked up in the directories listed in `PATH`. The first
  directory that holds the name is used.

Examples:

```sh
pipex input.txt "grep error" "wc -l" count.txt
pipex input.txt "/bin/cat" "sort -r" sorted.txt
```

### Exit status and errors

Error messages go to standard error. The exit status is the status of the
second command. When that command could not be started, the status is one
of these:

- `127` if the second command was not found, was empty, or `PATH` is unset.
- `126` if the second command exists but is not executable.
- `1` if the output file could not be opened because permission was denied.
  Other failures to open the output file give `0`.

A failure in the first command is reported but does not set the status. If
the input file is missing, unreadable or a directory, the error is reported
and `cmd2` still runs, on empty input.

## Library use

```python
from pipex.pipeline import run_pipeline

status = run_pipeline("input.txt", "grep error", "wc -l", "count.txt", None)
```

`run_pipeline(infile, cmd1, cmd2, outfile, environ)` returns the exit
status described above. `environ` is the environment that the commands
receive and that `PATH` is read from. When it is `None`, the current process
environment is used. `pipex.pipeline.main(argv)` is the command-line entry
point. It returns the exit status and reads `sys.argv` when `argv` is
`None`.

`pipex.resolve` exposes the lookup rules on their own:

- `get_path_env(environ)` returns the `PATH` value from a mapping, or `None`
  if it is not set.
- `find_executable(name, path_env)` searches a colon-separated path string.
  It returns the first existing candidate, or `None` if there is none.
- `resolve_command(cmd, environ)` returns `(path, args)`.
- Both `find_executable` and `resolve_command` raise `CommandError` when a
  command cannot be run. Its `status` attribute holds 126 or 127. Its
  `positional` attribute is true when the failure only affects the exit
  status if it happens in the last command.

## Helpers

- `pipex.textops` contains `split`, `atoi`, `itoa`, `strtrim`, `strnstr`,
  `substr` and `strncmp`. These are string functions that follow the
  behaviour of their C namesakes. For example, `atoi` wraps its result to
  32 bits and `split` drops empty words.
- `pipex.linereader.LineReader(source, buffer_size=5)` reads a file
  descriptor in the range 0 to 1023, or any object with a `read(size)`
  method, one line at a time:
  - `next_line()` returns each line with its newline kept, and `None` at
    the end of the input.
  - Iterating over the reader yields the same lines.
- `pipex.printf` provides `cformat(fmt, *args)`, which returns the formatted
  string, and `printf(fmt, *args)`, which writes it to standard output and
  returns its length.
  - The supported conversions are `%c %s %d %i %u %x %X %p %%`.
  - Unknown conversions are dropped.
  - `%s` with `None` gives `(null)`, and `%p` with `None` or 0 gives `(nil)`.

## Limitations

- `pipex` joins exactly two commands.
- It does not support here-documents or appending to the output file.
- It does not parse shell syntax in command strings.