"""Running external programs."""

import os

from .errors import ShellExit


def _is_readable_file(path):
    try:
        with open(path, "rb"):
            return True
    except OSError:
        return False


def resolve_command(env, args):
    """Return the word list with its first word turned into a program path."""
    name = args[0]
    if os.path.isdir(name):
        raise ShellExit(1, f"{name}: Permission denied.")
    if _is_readable_file(name):
        return list(args)
    search = env.get("PATH")
    for directory in search.split(":") if search is not None else ():
        candidate = f"{directory}/{name}"
        if os.access(candidate, os.X_OK):
            return [candidate, *args[1:]]
    raise ShellExit(1, f"{name}: Command not found.")


def check_status(status):
    """Stop the shell if a child's wait status calls for it."""
    if not os.WIFEXITED(status):
        if os.WCOREDUMP(status):
            raise ShellExit(139, "Segmentation fault (core dumped)")
        raise ShellExit(139, "Segmentation fault")
    if status == 256:
        raise ShellExit(1)
    return None


def run_command(env, args):
    """Run a program with the shell's environment and return its wait status."""
    argv = resolve_command(env, args)
    variables = {}
    for entry in env.lines():
        name, _, value = entry.partition("=")
        variables[name] = value
    try:
        pid = os.posix_spawn(argv[0], argv, variables)
    except OSError:
        raise ShellExit(
            1, f"{argv[0]}: Exec format error. Wrong Architecture."
        ) from None
    _, status = os.waitpid(pid, os.WUNTRACED)
    check_status(status)
    return status