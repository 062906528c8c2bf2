"""Bracket-depth scanner for directives with nested arguments.

@Damage and @Check arguments routinely contain inline roll formulas with
their own brackets (``@Damage[2d6[fire] plus 1d4[acid]]``), so their extent
cannot be found with a non-greedy regex. The scanner walks the text with a
position and a depth counter instead:

    @Damage[ 2d6 [ fire ] plus 1d4 [ acid ] ]
           1     2      1          2      1 0  <- depth after each bracket

An optional ``{label}`` may follow the closing bracket (after whitespace);
its extent is found the same way with brace depth.

Unterminated directives are left in the text verbatim and the scan resumes
right after the opening token, so nothing after them is lost.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, Optional


def find_closing(text: str, start: int, opener: str, closer: str) -> int:
    """Find the closer balancing an opener that ends just before ``start``.

    Args:
        text: Text to scan
        start: Index of the first character after the consumed opener
        opener: Opening delimiter, e.g. "["
        closer: Closing delimiter, e.g. "]"

    Returns:
        Index of the balancing closer, or -1 when the text ends first
    """
    depth = 1
    position = start
    length = len(text)
    while position < length:
        char = text[position]
        if char == opener:
            depth += 1
        elif char == closer:
            depth -= 1
            if depth == 0:
                return position
        position += 1
    return -1


@dataclass(frozen=True)
class ScannedDirective:
    """Extent of one scanned directive.

    Attributes:
        start: Index of the leading '@'
        end: Index just past the closing bracket, or past the label's
            closing brace when a label follows
        argument: Text between the outer brackets
        label: Text between the label braces, or None
    """

    start: int
    end: int
    argument: str
    label: Optional[str] = None


class BracketScanner:
    """Locate ``@Name[...]`` directives with bracket/brace depth tracking.

    Example:
        scanner = BracketScanner("Damage")
        scanner.replace(text, lambda d: f"<strong>{d.argument}</strong>")
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self.token = f"@{name}["

    def scan_at(self, text: str, start: int) -> Optional[ScannedDirective]:
        """Scan the directive whose token begins at ``start``.

        Returns:
            The scanned directive, or None when its bracket is never closed
        """
        argument_start = start + len(self.token)
        argument_end = find_closing(text, argument_start, "[", "]")
        if argument_end == -1:
            return None

        end = argument_end + 1
        label: Optional[str] = None

        probe = end
        while probe < len(text) and text[probe].isspace():
            probe += 1
        if probe < len(text) and text[probe] == "{":
            label_end = find_closing(text, probe + 1, "{", "}")
            # An unclosed brace is ordinary text, not a label.
            if label_end != -1:
                label = text[probe + 1 : label_end]
                end = label_end + 1

        return ScannedDirective(
            start=start,
            end=end,
            argument=text[argument_start:argument_end],
            label=label,
        )

    def iter_directives(self, text: str) -> Iterator[ScannedDirective]:
        """Yield every well-formed directive, left to right."""
        search_from = 0
        while True:
            index = text.find(self.token, search_from)
            if index == -1:
                return
            scanned = self.scan_at(text, index)
            if scanned is None:
                search_from = index + len(self.token)
                continue
            yield scanned
            search_from = scanned.end

    def replace(self, text: str, render: Callable[[ScannedDirective], str]) -> str:
        """Replace every well-formed directive with ``render(directive)``."""
        parts = []
        last = 0
        for scanned in self.iter_directives(text):
            parts.append(text[last : scanned.start])
            parts.append(render(scanned))
            last = scanned.end
        parts.append(text[last:])
        return "".join(parts)


__all__ = ["BracketScanner", "ScannedDirective", "find_closing"]
