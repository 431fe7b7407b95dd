"""Status-bar components, a status line generator, a file filter and a menu matcher."""

__version__ = "1.1.0"

__all__ = [
    "cpu",
    "disk",
    "files",
    "fmt",
    "keyboard",
    "memory",
    "menu",
    "network",
    "power",
    "sensors",
    "status",
    "stest",
    "system",
    "wifi",
]