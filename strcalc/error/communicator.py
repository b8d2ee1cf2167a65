import sys

from strcalc.util import Colors, Span


# Class used to create messages, which can be communicated to the programmer
class Communicator:

    # Creates an appropriate message string from the given arguments
    @staticmethod
    def create_message(
        program: str,
        span: Span,
        class_name="CompilerError",
        before: str = "",
        after: str = "",
        n_before: int = 1,
        n_after: int = 1,
        color=Colors.RED,
    ) -> str:
        endc = Colors.ENDC
        if not Communicator.colored():
            color = endc = ""

        # Without a span the message is a single line
        error_lines = []
        if span is not None:
            # Only split on newlines, the scanner treats e.g. '\v' as whitespace
            lines = program.split("\n")
            error_lines = lines[
                max(0, span.start_ln - n_before - 1) : max(0, span.end_ln + n_after)
            ]
        final_error_lines = []
        start_line_no = max(1, span.start_ln - n_before) if span else 1
        end_line_no = start_line_no + len(error_lines) - 1
        for i, line in enumerate(error_lines, start=start_line_no):
            # Determine the number of spaces between e.g. '8.' and the code.
            # See the * in the following example:
            #    *8. 1 .
            # -> *9. 2 ^ 3 )
            #    10. . 4
            padding = " " * (len(str(end_line_no)) - len(str(i)))
            final_line = ""
            if span.start_ln <= i <= span.end_ln:
                # First line
                if i == span.start_ln:
                    final_line += f"-> {padding}{i}. {line[:span.start_col]}"

                    if span.multiline:
                        final_line += f"{color}{line[span.start_col:]}{endc}"
                    else:
                        final_line += (
                            f"{color}{line[span.start_col:span.end_col]}{endc}"
                        )
                        final_line += line[span.end_col :]

                # Lines in between the first and last line
                elif span.start_ln < i < span.end_ln:
                    final_line += f"-> {padding}{i}. {color}{line}{endc}"
                # The last line, of a multiline
                else:
                    final_line += (
                        f"-> {padding}{i}. {color}{line[:span.end_col]}{endc}"
                    )
                    final_line += line[span.end_col :]

            else:
                final_line += f"   {padding}{i}. {line}"
            final_error_lines.append(final_line)

        message = class_name + ": " + before
        if final_error_lines:
            message += "\n" + "\n".join(final_error_lines)
        if after:
            message += "\n" + after
        return message

    # Only color messages that end up in a terminal
    @staticmethod
    def colored() -> bool:
        isatty = getattr(sys.stderr, "isatty", None)
        return bool(isatty and isatty())

    # Writes all accumulated warnings to stderr
    @staticmethod
    def flush_warnings() -> None:
        for warning in WarningRaiser.WARNINGS:
            print(warning, file=sys.stderr)
        WarningRaiser.WARNINGS.clear()

    # Communicates all warnings and errors to the programmer
    # In case of any errors, the run will stop with an exception
    @staticmethod
    def communicate(stage_of_exception) -> None:
        Communicator.flush_warnings()

        errors = "\n\n".join(str(error) for error in ErrorRaiser.ERRORS)
        if errors:
            ErrorRaiser.ERRORS.clear()
            raise stage_of_exception(errors)


# Used to store all the accumulated warnings
class WarningRaiser:
    WARNINGS = []


# Used to store all the accumulated errors
class ErrorRaiser:
    ERRORS = []
