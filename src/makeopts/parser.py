## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import functools

import lark
from .errors import InvalidInputError


# Same syntax as the `optstring` argument of POSIX getopt(): each character is an
# option letter, a colon right after a letter marks it as taking an option-argument.
# Colons may appear anywhere, including at the start or doubled.
GRAMMAR = r"""start: (LETTER | COLON)*

LETTER: /[^:]/
COLON: ":"
"""


@functools.cache
def _parser() -> lark.Lark:
    return lark.Lark(GRAMMAR, start='start', parser="lalr", lexer="contextual")


def parse_optspec(optstring: str) -> dict[str, bool]:
    """Map every character of `optstring` to whether the one after it is a colon.

    A character found more than once is decided by its first occurrence, so the
    lookup behaves like `optstring.index(c)` followed by a check of the next character.
    """
    if optstring is None or not isinstance(optstring, str):
        raise InvalidInputError('Invalid optstring')

    tokens = _parser().parse(optstring).children
    spec: dict[str, bool] = {}
    for token, following in zip(tokens, [*tokens[1:], None]):
        spec.setdefault(token.value, following is not None and following.type == 'COLON')
    return spec
