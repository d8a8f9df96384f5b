# pipexpy

`pipexpy` runs the shell pipeline `< infile cmd1 | cmd2 | ... | cmdN > outfile`
as a single command. Each command's standard output feeds the next command's
standard input, and the last command writes to the output file.

## Installation

```
pip install .
```

## Usage

Read from a file and write the result to another file, truncating it:

```
pipexpy infile "grep foo" "wc -l" outfile
```

This behaves like `< infile grep foo | wc -l > outfile`. Two or more commands
may be given between the input and output files.

Read input from standard input as a here-document, up to a line equal to the
limiter (or the end of input), then append the result to the output file:

```
pipexpy here_doc LIMIT "cat" "wc -l" outfile
```

This behaves like `cat << LIMIT | wc -l >> outfile`. In here-document mode
exactly two commands are accepted.

### How commands are found

A command string is split on spaces into words. If the first word is itself
an executable path, it is run as is; otherwise each directory in `PATH` is
searched for an executable of that name. A created output file gets mode
`0644`.

## Exit status and errors

- Normally the exit status is that of the last command; a last command
  killed by a signal gives `128` plus the signal number.
- `127` if the last command cannot be found.
- `1` for a wrong number of arguments, an unwritable output file, or a
  failure to start the last command.

Errors in earlier stages are reported but do not decide the exit status. A
missing or unreadable input file is reported and the first command then
reads empty input; a command that cannot be found is reported and skipped,
and the next command reads empty input.

Messages go to standard error in the form `message: subject`, for example
`command not found: nosuchcmd` or `no such file or directory: missing.txt`.
A wrong number of arguments prints `Number of argument is incorrect.`

## Library use

- `pipexpy.cli.parse_args(args)` turns the arguments after the program name
  into an `Invocation` (`commands`, `outfile`, `infile`, `limiter`), raising
  `pipexpy.errors.UsageError` on a wrong count.
- `pipexpy.pipeline.Pipeline(commands, outfile, infile=..., or limiter=...)`
  runs the commands; `run()` returns the exit status. Exactly one of
  `infile` and `limiter` must be given, and `env`, `stdin` and `stderr` may
  be supplied in place of the process's own.
- `pipexpy.command.resolve_command(raw_command, env)` returns the program to
  run and its argument list, raising `pipexpy.errors.CommandNotFoundError`.
- `pipexpy.heredoc.read_heredoc(stream, limiter)` collects here-document text.
- `pipexpy.files` holds the input and output file checks (`check_readable`,
  `check_writable`, `open_input`, `open_output`).

## What it does not do

Commands are split on single spaces only: there is no quoting, escaping,
variable or glob expansion, and no redirection beyond the input and output
files given on the command line.

## Running the tests

```
pip install .[test]
pytest
```