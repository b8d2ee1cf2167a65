import sys
from contextlib import redirect_stderr
from typing import TextIO

from strcalc.error.error import CompilerException
from strcalc.evaluator.evaluator import Evaluator
from strcalc.parser.parser import Parser
from strcalc.tree.printer import Printer


def main(
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Read a program from stdin, print its tree and the value it evaluates to.

    Returns:
        int: The exit status, 0 on success and 1 if the program was rejected.
    """
    if stdin is None:
        stdin = sys.stdin
        # Undecodable bytes become U+FFFD, which is then skipped with a warning
        if hasattr(stdin, "reconfigure"):
            stdin.reconfigure(errors="replace")
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    # Warnings and errors are written to sys.stderr
    with redirect_stderr(stderr):
        try:
            parser = Parser(stdin)
            tree = parser.parse()

            print(Printer().print(tree), file=stdout)
            with Evaluator(parser.program).evaluate(tree) as result:
                print(str(result), file=stdout)
        except CompilerException as e:
            stdout.flush()
            print(e, file=stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
