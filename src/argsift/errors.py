## argsift — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘


class SiftError(Exception):
    exit_code: int = 255

    def __init__(self, message: str = "", *, sift_option=None, sift_alias=None, sift_token=None):
        """Base class for all errors raised while sifting arguments."""
        super().__init__(message)
        self.sift_option: str = sift_option
        self.sift_alias: str = sift_alias
        self.sift_token: str = sift_token


class SiftSetupError(SiftError, ValueError):
    """Caller-side mistakes, i.e. a missing or malformed option table."""
    exit_code = 1

class SiftSpecError(SiftSetupError):
    def __init__(self, message, *, sift_option=None, column=None, token=None):
        super().__init__(message, sift_option=sift_option, sift_token=token)
        self.column = column


class SiftUsageError(SiftError):
    """Problems with the arguments supplied by the user on the command-line."""
    exit_code = 255

class SiftMissingValue(SiftUsageError, ValueError):
    pass

class SiftIntegerError(SiftUsageError, ValueError):
    pass

class SiftLeftoverError(SiftUsageError):
    def __init__(self, message, *, leftover=None):
        super().__init__(message)
        self.leftover: list[str] = list(leftover or [])
