# fping_stats/errors.py


class FpingError(Exception):
    """Base class for everything this package raises on purpose."""


class InvalidTarget(FpingError, ValueError):
    def __init__(self, target: str, message: str):
        super().__init__(message)
        self.target = target


class InvalidOption(FpingError, ValueError):
    pass


class ToolNotFound(FpingError, FileNotFoundError):
    pass
