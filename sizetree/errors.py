from __future__ import annotations


class SizeTreeError(Exception):
    pass


class ArgumentError(SizeTreeError):
    """The root path given on the command line can't be used."""


class ScanError(SizeTreeError):
    def __init__(self, path: str, reason: object):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class InternalInvariantError(SizeTreeError):
    """An entry showed up before its parent directory was registered."""
