"""
Structural write capability.

Anything with a ``write(str) -> int`` method is a Writer: io.StringIO,
sys.stdout, an open text file or the ByteCounter below. Nothing has to
inherit from Writer to satisfy it.
"""
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Writer(Protocol):
    def write(self, s: str) -> int:
        ...


class ByteCounter:
    """A Writer that throws its input away and keeps a running UTF-8 byte count."""

    def __init__(self, count: int = 0):
        self.count = count

    def write(self, s: str) -> int:
        n = len(s.encode("utf-8"))
        self.count += n
        return n

    def __int__(self) -> int:
        return self.count

    def __repr__(self) -> str:
        return f"ByteCounter({self.count})"


def fprintf(writer: Writer, fmt: str, *args: Any) -> int:
    """%-formats `fmt` with `args` and writes the result to `writer`."""
    return writer.write(fmt % args if args else fmt)


_ESCAPES = {
    "\a": "\\a", "\b": "\\b", "\f": "\\f", "\n": "\\n", "\r": "\\r",
    "\t": "\\t", "\v": "\\v", "\\": "\\\\", '"': '\\"',
}


def quote(s: str) -> str:
    """
    Double-quoted literal for `s`.

    Quotes, backslashes and the usual control characters get their short
    escapes; anything else that is not printable (DEL, C1 controls, line and
    paragraph separators, non-breaking spaces) becomes \\xNN, \\uNNNN or
    \\UNNNNNNNN. Printable non-ASCII text is kept as-is.
    """
    out = ['"']
    for ch in s:
        if ch in _ESCAPES:
            out.append(_ESCAPES[ch])
        elif ch.isprintable():
            out.append(ch)
        elif ch < " " or ch == "\x7f":
            out.append(f"\\x{ord(ch):02x}")
        elif ord(ch) < 0x10000:
            out.append(f"\\u{ord(ch):04x}")
        else:
            out.append(f"\\U{ord(ch):08x}")
    out.append('"')
    return "".join(out)
