"""Exception used to stop the shell with an exit status."""


class ShellExit(Exception):
    """Request to end the shell with ``status`` after reporting ``message``."""

    def __init__(self, status, message=""):
        super().__init__(message or f"exit status {status}")
        self.status = status
        self.message = message