"""The shell's environment: ordered ``NAME=value`` entries and their builtins."""

from collections.abc import Mapping

from .errors import ShellExit
from .textutil import find_entry

_NAME_CHARS = frozenset(
    "-./0123456789"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
    " _"
)


def _is_ascii_letter(char):
    return char.isascii() and char.isalpha()


def validate_name(name):
    """Return ``name`` if it may be used as a variable name, else stop the shell."""
    if not name or (not _is_ascii_letter(name[0]) and name[0] != "_"):
        raise ShellExit(1, "setenv: Variable name must begin with a letter.")
    if any(char not in _NAME_CHARS for char in name):
        raise ShellExit(
            1, "setenv: Variable name must contain alphanumeric characters."
        )
    return name


class Environment:
    """Ordered list of ``NAME=value`` entries."""

    def __init__(self, entries=()):
        if isinstance(entries, Mapping):
            entries = (f"{name}={value}" for name, value in entries.items())
        self._entries = list(entries)

    def _index(self, name):
        return find_entry(self._entries, name + "=")

    def get(self, name):
        """Value of ``name``, or None when it is not set."""
        index = self._index(name)
        if index is None:
            return None
        return self._entries[index][len(name) + 1:]

    def set(self, name, value=""):
        """Replace the entry for ``name`` in place, or append a new one."""
        entry = f"{name}={value}"
        index = self._index(name)
        if index is None:
            self._entries.append(entry)
        else:
            self._entries[index] = entry

    def unset(self, *args):
        """Remove every named variable; names that are not set are ignored."""
        for name in args:
            index = self._index(name)
            if index is not None:
                del self._entries[index]

    def lines(self):
        """A copy of the entries, in order."""
        return list(self._entries)

    def setenv_command(self, args):
        """Run ``setenv`` with its words; return the lines it prints."""
        if len(args) == 1:
            return self.lines()
        name = validate_name(args[1])
        if len(args) > 3:
            raise ShellExit(1, "setenv: Too many arguments.")
        self.set(name, args[2] if len(args) == 3 else "")
        return []

    def unsetenv_command(self, args):
        """Run ``unsetenv`` with its words."""
        if len(args) < 2:
            raise ShellExit(1, "unsetenv: Too few arguments")
        self.unset(*args[1:])