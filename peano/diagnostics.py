"""Error reports for the command line.

Formats a PeanoError as `file:line:col: error: message`, followed (for syntax
errors) by the offending source line with the bad position underlined.
"""

from __future__ import annotations

from termcolor import colored

from peano.errors import PeanoError, PeanoSyntaxError
from peano.reader.scanner import line_col

ERROR = "red"


def _style(text: str, color: str | None, attrs: list[str], enabled: bool) -> str:
    if not enabled:
        return text
    return colored(text, color, attrs=attrs)


def diagnose(source: str, offset: int, color: bool = True) -> str:
    """Return the source line containing `offset` with a caret under it."""
    line_no, column = line_col(source, offset)
    lines = source.splitlines()
    line = lines[line_no - 1] if line_no <= len(lines) else ""
    start = column - 1

    diagnosis = "  " + line[:start]
    diagnosis += _style(line[start:start + 1], ERROR, ["bold"], color)
    diagnosis += line[start + 1:] + "\n"
    diagnosis += "  " + " " * start + _style("^", ERROR, ["bold"], color)
    return diagnosis


def report(error: BaseException, source: str | None = None, path: str | None = None,
           color: bool = True) -> str:
    """Human-readable report for `error` raised while running `source`."""
    location = ""
    offset = getattr(error, "offset", None) if isinstance(error, PeanoSyntaxError) else None
    if path:
        location = path
        if source is not None and offset is not None:
            line_no, column = line_col(source, offset)
            location += f":{line_no}:{column}"
        location = _style(location + ": ", None, ["bold"], color)

    if isinstance(error, PeanoError):
        message = str(error)
    else:
        message = f"{type(error).__name__}: {error}"

    text = location + _style("error: ", ERROR, ["bold"], color) + message
    if source is not None and offset is not None:
        text += "\n" + diagnose(source, offset, color)
    return text
