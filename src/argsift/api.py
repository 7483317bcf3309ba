## argsift — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from .types import OptionKind, OptionSpec, Classification, CommonFlags
from .errors import *
from .parser import parse_declaration, parse_table
from .classifier import classify, fail_on_leftovers, split_common
from .diagnostics import DiagnosticSink, NullSink
