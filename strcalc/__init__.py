import sys

from strcalc.buffer import Buffer
from strcalc.evaluator.evaluator import Evaluator
from strcalc.parser.parser import Parser
from strcalc.scanner.scanner import Scanner, TokenStream
from strcalc.token import Token
from strcalc.tree.printer import Printer
from strcalc.type import Type
from strcalc.util import RECURSION_LIMIT

sys.setrecursionlimit(max(sys.getrecursionlimit(), RECURSION_LIMIT))
