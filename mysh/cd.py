"""The ``cd`` builtin."""

import os
from contextlib import suppress

from .errors import ShellExit

_HOME_FORMS = ("cd", "cd ~", "cd --")


def change_directory(env, line, args):
    """Change directory as asked by the cleaned ``line`` and its words."""
    previous = os.getcwd()
    if line in _HOME_FORMS:
        env.set("OLDPWD", previous)
        home = env.get("HOME")
        if home is not None:
            with suppress(OSError):
                os.chdir(home)
        env.set("PWD", os.getcwd())
        return
    if not line.startswith("cd "):
        return
    if line[3:] == "-":
        old = env.get("OLDPWD")
        if old == env.get("PWD"):
            raise ShellExit(1, ": no such file or directory.")
        if old is not None:
            with suppress(OSError):
                os.chdir(old)
        return
    target = args[1]
    try:
        os.chdir(target)
    except OSError:
        raise ShellExit(1, f"{target}: Not a directory.") from None
    env.set("OLDPWD", previous)
    env.set("PWD", os.getcwd())