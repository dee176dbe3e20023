"""Send text between processes one bit at a time over SIGUSR1 and SIGUSR2, with small string, output, list and printf helpers."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "client",
    "linked",
    "output",
    "printf",
    "protocol",
    "server",
    "strings",
]