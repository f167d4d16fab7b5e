## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘


class OptionError(Exception):
    def __init__(self, message: str = "", *, opt=None, token=None):
        """Base class for all errors raised while interpreting a command line."""
        super().__init__(message)
        self.opt: str = opt
        self.token: str = token

class InvalidInputError(OptionError, TypeError):
    pass

class UnknownOptionError(OptionError, LookupError):
    pass

class MissingOptionArgumentError(OptionError, ValueError):
    pass
