# cisfun

A small command-line shell. It reads one command per line, splits it on
spaces and runs the named program. A name containing a `/` is run as
given; any other name is looked up in the directories listed in `PATH`.

## Installing

```
pip install .
```

## Using it

Start it interactively:

```
cisfun
```

It shows the prompt `#cisfun$ ` and waits for a command. Pressing
Ctrl-C prints a new line and a fresh prompt; Ctrl-D (end of input, or a
line starting with the Ctrl-D character) leaves the shell. Empty lines are
skipped.

```
#cisfun$ ls -l /tmp
#cisfun$ env
#cisfun$ exit 3
```

Commands can also be piped in, one per line:

```
printf 'echo hello\nls /nonexistent\n' | cisfun
```

When input is not a terminal no prompt is printed. An unknown command is
then reported with the program name as it was invoked and the line number,
for example `cisfun: 2: foo: not found`. In interactive use the message is
`foo: command not found`.

The shell exits with the status of the last command it ran, reduced to the
range 0–255.

### What it understands

- Words are separated by spaces; runs of spaces count as one separator.
- A line whose first word starts with `#` is a comment and is ignored.
- `env` prints the environment, one `NAME=value` per line.
- `exit [n]` leaves the shell with status `n` (a leading `-` is allowed),
  or with the last command's status when `n` is missing. Any other
  non-digit in `n` prints `exit: numeric argument required` (prefixed with
  the program name when input is piped) and exits with status 2.
- A command that cannot be found or started gives status 127; a command
  ended by a signal gives status -1 (255 once the shell exits).

### What it does not do

There is no quoting, escaping, globbing, variable expansion, piping,
redirection, job control or command chaining, and tabs are not word
separators. The only commands handled by the shell itself are `env` and
`exit`; there is no `cd`, `setenv` or `alias`.

## From Python

The pieces are usable on their own:

- `cisfun.parser.parse_cmd(line)` splits a line into a `ParsedCommand`
  (`name` and `args`), or returns `None` for a blank line or comment.
- `cisfun.parser.read_command(stream)` reads one line from a stream.
- `cisfun.executor.get_full_path(cmd, env)` resolves a command against
  the `PATH` in `env`; `cisfun.executor.execute(cmd, env, argv, line_num,
  prog_name)` runs it and returns its status.
- `cisfun.builtins.is_builtin(cmd)` and `cisfun.builtins.run_builtin(cmd,
  args, env, out)` handle the builtin `env` command.
- `cisfun.shell.run_command(line, env, exit_status, line_num, prog_name)`
  runs one line and returns its exit status, raising `ShellExit` (with a
  `status` attribute) for `exit`.
- `cisfun.shell.interactive_mode(...)` and
  `cisfun.shell.non_interactive_mode(...)` run the read loops over any
  text stream; `cisfun.shell.main(argv)` is the command's entry point.

## Running the tests

```
pip install .[test]
pytest
```