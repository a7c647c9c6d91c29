# mysh

A small command shell for POSIX systems. It reads one command per line and
cleans the line up. Leading blanks are dropped, and runs of spaces and tabs
become one space. Trailing spaces and the newline are removed. The shell then
runs a built-in, or looks the program up on `PATH` and runs it.

## Installing

```
pip install .
```

## Running

```
mysh
```

The same loop can be started with `python -m mysh.shell`.

When standard input is a terminal, the shell writes the prompt `$> ` and reads
lines until end of input. It then writes the prompt again and goes on reading.
When input comes from a pipe or a file, the shell runs each line and exits
with status 0 at end of input:

```
printf 'setenv GREETING hello\nenv\n' | mysh
```

The shell takes no arguments. If it is given any, it exits with status 84.

## Built-in commands

| Command | Effect |
| --- | --- |
| `exit [n]` | Leave the shell. The status is the value of the leading digits of `n`, or 0 if `n` is not given |
| `env` | Print every environment entry as `NAME=value`, in order. This applies only when the line is exactly `env` |
| `setenv` | With no arguments, the same as `env` |
| `setenv NAME [VALUE]` | Set `NAME`. An existing entry is replaced where it stands. A new one is appended. The value is empty if it is not given |
| `unsetenv NAME...` | Remove each named variable. Names that are not set are ignored |
| `cd`, `cd ~`, `cd --` | Go to `$HOME`, and set `OLDPWD` and `PWD` |
| `cd -` | Go back to `$OLDPWD` |
| `cd DIR` | Go to `DIR`, and set `OLDPWD` and `PWD` |

A variable name must begin with an ASCII letter or an underscore. After that
it may hold only letters, digits, `-`, `.`, `/` and `_`. `setenv` takes at
most two arguments.

## Other commands

Any other first word is run as a program, with the shell's environment. A word
that names a file that can be read is run as it is. Any other word is looked
for in each directory of `PATH`, and the first executable match is used.

## Errors

Every error below prints its message on standard output. The shell then stops
with the status shown.

| Message | Status |
| --- | --- |
| `setenv: Variable name must begin with a letter.` | 1 |
| `setenv: Variable name must contain alphanumeric characters.` | 1 |
| `setenv: Too many arguments.` | 1 |
| `unsetenv: Too few arguments` | 1 |
| `DIR: Not a directory.` (`cd DIR` failed) | 1 |
| `: no such file or directory.` (`cd -` when `OLDPWD` equals `PWD`) | 1 |
| `<name>: Permission denied.` (the name is a directory) | 1 |
| `<name>: Command not found.` | 1 |
| `<name>: Exec format error. Wrong Architecture.` (the program could not be started) | 1 |
| `Segmentation fault` / `Segmentation fault (core dumped)` (the program was killed by a signal) | 139 |

If a program exits with status 1, the shell stops with status 1 as well.

## Using it from Python

```python
import io
from mysh.shell import Shell

out = io.StringIO()
shell = Shell({"PATH": "/usr/bin:/bin", "HOME": "/tmp"}, io.StringIO("env\n"), out)
status = shell.run()
print(status, out.getvalue())
```

- `mysh.shell.Shell` has `execute(line)`, which runs one line, and `run()`,
  which processes the whole input and returns the exit status.
- `mysh.environment.Environment` holds the variables. It has `get`, `set`,
  `unset` and `lines`. `validate_name` checks a variable name.
- `mysh.errors.ShellExit` is raised when the shell must stop. It carries
  `status` and `message`.
- `mysh.printf.sprintf` and `mysh.printf.printf` do printf-style formatting.
  They support the conversions `d i c f s x X o u p e E %%` and a `.N`
  precision.
- `mysh.textutil` holds the line-cleaning and `NAME=value` lookup helpers.

## What it does not do

mysh has no pipes, no redirections, no quoting or escapes, no variable
expansion, no globbing, no command separators and no job control. Each line is
split on single spaces and run as one command.