"""The interactive command loop."""

import os
import sys

from .cd import change_directory
from .environment import Environment
from .errors import ShellExit
from .executor import run_command
from .textutil import clean_line, leading_int, split_words


class Shell:
    """Reads command lines and runs builtins or external programs."""

    prompt = "$> "

    def __init__(self, environ=None, stdin=None, stdout=None):
        self.env = Environment(os.environ if environ is None else environ)
        self.stdin = sys.stdin if stdin is None else stdin
        self.stdout = sys.stdout if stdout is None else stdout

    def _write(self, text):
        self.stdout.write(text)
        self.stdout.flush()

    def _interactive(self):
        isatty = getattr(self.stdin, "isatty", None)
        return bool(isatty and isatty())

    def execute(self, line):
        """Run one command line; raises ShellExit when the shell must stop."""
        line = clean_line(line)
        args = split_words(line)
        command = args[0]
        if command == "exit":
            raise ShellExit(leading_int(args[1]) if len(args) > 1 else 0)
        if command == "setenv":
            for entry in self.env.setenv_command(args):
                self._write(entry + "\n")
            return
        if command == "unsetenv":
            self.env.unsetenv_command(args)
            return
        if line == "env":
            for entry in self.env.lines():
                self._write(entry + "\n")
            return
        if command == "cd":
            change_directory(self.env, line, args)
            return
        if command:
            self.stdout.flush()
            run_command(self.env, args)

    def run(self):
        """Process input until it ends or a command stops the shell."""
        interactive = self._interactive()
        try:
            while True:
                if interactive:
                    self._write(self.prompt)
                for line in self.stdin:
                    self.execute(line)
                if not interactive:
                    return 0
        except ShellExit as stop:
            if stop.message:
                self._write(stop.message + "\n")
            return stop.status & 0xFF


def main(argv=None):
    """Start the shell; extra arguments are refused with status 84."""
    args = sys.argv[1:] if argv is None else argv
    if args:
        return 84
    return Shell().run()


if __name__ == "__main__":
    raise SystemExit(main())