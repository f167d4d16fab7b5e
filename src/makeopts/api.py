## makeopts — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from .types import Option, Extraction, Macro, Configuration
from .errors import *
from .parser import parse_optspec
from .options import extract
from .configuration import parse, MAKE_OPTSPEC
