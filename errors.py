class NavipodError(Exception):
    """Base class for navipod errors."""


class OutOfRange(NavipodError, IndexError):
    """Index into sections or rows outside bounds."""


class TerminalInitFailure(NavipodError):
    """Entering the exclusive display mode failed."""


class TerminalResetFailure(NavipodError):
    """Restoring the terminal to its prior mode failed."""
