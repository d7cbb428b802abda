"""Removal of common leading indentation from multi-line text."""

__all__ = ["MixedIndentationError", "dedent"]

_INDENT_CHARS = " \t"


class MixedIndentationError(ValueError):
    """Raised when spaces and tabs are mixed in the indentation."""


def _split_lines(text: str) -> list[str]:
    pieces = text.split("\n")
    # A CR directly before an LF belongs to the line ending.
    return [p[:-1] if p.endswith("\r") else p for p in pieces[:-1]] + [pieces[-1]]


def _leading_indent(line: str) -> tuple[int, str | None]:
    length = 0
    style = None
    for char in line:
        if char not in _INDENT_CHARS:
            break
        if style is None:
            style = char
        elif char != style:
            raise MixedIndentationError(
                f"Mixed spaces and tabs on same line: {line!r}"
            )
        length += 1
    return length, style


def _cut(line: str, count: int) -> str:
    raw = line.encode("utf-8")
    if len(raw) < count:
        return line
    try:
        return raw[count:].decode("utf-8")
    except UnicodeDecodeError:
        raise ValueError(
            f"indentation cut falls inside a character: {line!r}"
        ) from None


def dedent(text: str, keep_ws: int = 0) -> str:
    """Strip the common indentation of ``text``, keeping ``keep_ws`` columns.

    Blank lines become empty. A first line that does not start with
    whitespace takes no part in finding the indentation and receives
    ``keep_ws`` indentation characters of the detected style.
    """
    if not isinstance(text, str):
        raise TypeError(f"expected a string, got {type(text).__name__}")
    if isinstance(keep_ws, bool) or not isinstance(keep_ws, int):
        raise TypeError("keep_ws must be an integer")
    if keep_ws < 0:
        raise ValueError("keep_ws must not be negative")

    lines = _split_lines(text)

    min_indent: int | None = None
    indent_style: str | None = None
    first_line_needs_indent = False

    for index, line in enumerate(lines):
        if index == 0 and line[:1] not in (" ", "\t"):
            first_line_needs_indent = True
            continue
        if not line.strip():
            continue
        length, style = _leading_indent(line)
        if style is None:
            continue
        if indent_style is None:
            indent_style = style
        elif indent_style != style:
            raise MixedIndentationError(
                "Mixed indentation across lines: found both "
                f"{indent_style!r} and {style!r}"
            )
        min_indent = length if min_indent is None else min(min_indent, length)

    prefix = indent_style * keep_ws if indent_style else ""
    cut = 0 if min_indent is None else max(min_indent - keep_ws, 0)

    def reindent(index: int, line: str) -> str:
        if not line.strip():
            return ""
        if index == 0 and first_line_needs_indent:
            return prefix + line
        return _cut(line, cut)

    return "\n".join(reindent(index, line) for index, line in enumerate(lines))