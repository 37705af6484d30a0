"""A small structural model of CLAUDE.md.

A document is a raw preamble followed by an ordered list of sections. A
section starts at an ATX heading of level 1 or 2 that is not inside a fenced
code block and runs until the next such heading or the end of the text.
Deeper headings stay inside the enclosing section's body.

Parsing keeps every character, so ``MarkdownDocument.parse(text).render()``
always returns ``text`` unchanged.
"""

import re
from collections.abc import Iterator
from dataclasses import dataclass, replace

# Highest heading level that starts a new section
SECTION_LEVEL = 2

_HEADING_PATTERN = re.compile(r"^(#{1,6})[ \t]+(.+?)[ \t]*$")
_FENCE_PATTERN = re.compile(r"^ {0,3}(`{3,}|~{3,})")


def _ensure_newline(line: str) -> str:
    if line.endswith("\n"):
        return line
    return line + "\n"


def _parse_heading(line: str) -> tuple[int, str] | None:
    match = _HEADING_PATTERN.match(line.rstrip("\r\n"))
    if match is None:
        return None
    title = re.sub(r"[ \t]+#+$", "", match.group(2)).strip()
    if not title:
        return None
    return len(match.group(1)), title


def _scan_lines(text: str) -> Iterator[tuple[str, tuple[int, str] | None]]:
    """Yield each line with its heading, or None inside fences and for plain text."""
    fence: str | None = None
    for line in text.splitlines(keepends=True):
        fence_match = _FENCE_PATTERN.match(line)
        if fence_match is not None:
            marker = fence_match.group(1)
            if fence is None:
                fence = marker
            elif marker[0] == fence[0] and len(marker) >= len(fence):
                fence = None
            yield line, None
        elif fence is None:
            yield line, _parse_heading(line)
        else:
            yield line, None


@dataclass(frozen=True)
class Section:
    """One heading-delimited region of a document."""

    title: str
    level: int
    heading_line: str
    body: str

    @property
    def text(self) -> str:
        return self.heading_line + self.body

    def contains(self, marker: str) -> bool:
        return marker in self.text

    def append_line(self, line: str) -> "Section":
        """Return a copy with ``line`` placed after the last non-blank line.

        Blank lines that separate the section from whatever follows stay at
        the end.
        """
        lines = self.body.splitlines(keepends=True)
        insert_at = 0
        for index, existing in enumerate(lines):
            if existing.strip():
                insert_at = index + 1

        heading_line = self.heading_line
        if insert_at == 0:
            heading_line = _ensure_newline(heading_line)
        else:
            lines[insert_at - 1] = _ensure_newline(lines[insert_at - 1])

        lines.insert(insert_at, _ensure_newline(line))
        return replace(self, heading_line=heading_line, body="".join(lines))

    @staticmethod
    def create(title: str, body: str, *, level: int = SECTION_LEVEL) -> "Section":
        return Section(
            title=title,
            level=level,
            heading_line=f"{'#' * level} {title}\n",
            body=body,
        )


@dataclass(frozen=True)
class MarkdownDocument:
    """Preamble plus ordered sections; immutable, edited by returning copies."""

    preamble: str
    sections: tuple[Section, ...]

    @staticmethod
    def parse(text: str) -> "MarkdownDocument":
        preamble: list[str] = []
        sections: list[Section] = []
        heading: tuple[int, str, str] | None = None
        body: list[str] = []

        def flush() -> None:
            if heading is None:
                return
            level, title, heading_line = heading
            sections.append(Section(title, level, heading_line, "".join(body)))

        for line, parsed in _scan_lines(text):
            if parsed is not None and parsed[0] <= SECTION_LEVEL:
                flush()
                heading = (parsed[0], parsed[1], line)
                body = []
                continue

            if heading is None:
                preamble.append(line)
            else:
                body.append(line)

        flush()
        return MarkdownDocument("".join(preamble), tuple(sections))

    def render(self) -> str:
        return self.preamble + "".join(section.text for section in self.sections)

    def find_index(self, title: str) -> int | None:
        """Index of the first section whose heading text is ``title``."""
        for index, section in enumerate(self.sections):
            if section.title == title:
                return index
        return None

    def has_heading(self, title: str) -> bool:
        """Whether a heading of any level outside code fences reads ``title``."""
        return any(
            parsed is not None and parsed[1] == title
            for _, parsed in _scan_lines(self.render())
        )

    def find_section(self, title: str) -> Section | None:
        index = self.find_index(title)
        if index is None:
            return None
        return self.sections[index]

    def first_index_at_level(self, level: int) -> int | None:
        for index, section in enumerate(self.sections):
            if section.level == level:
                return index
        return None

    def replace_section(self, index: int, section: Section) -> "MarkdownDocument":
        sections = list(self.sections)
        sections[index] = section
        return replace(self, sections=tuple(sections))

    def insert_section(self, index: int, section: Section) -> "MarkdownDocument":
        """Insert before the section currently at ``index``.

        An index equal to the number of sections appends at the end. Appending
        terminates the previous block with a blank line so the new heading
        does not run into existing text.
        """
        sections = list(self.sections)
        preamble = self.preamble
        if index >= len(sections):
            if sections:
                last = sections[-1]
                sections[-1] = replace(last, body=_terminate_block(last.body, last.heading_line))
            else:
                preamble = _terminate_block(preamble, "")
            sections.append(section)
        else:
            sections.insert(index, section)
        return MarkdownDocument(preamble, tuple(sections))


def _terminate_block(text: str, heading_line: str) -> str:
    """Make ``heading_line + text`` end with a blank line, when it has content."""
    combined = heading_line + text
    if not combined.strip():
        return text
    if combined.endswith("\n\n"):
        return text
    if combined.endswith("\n"):
        return text + "\n"
    return text + "\n\n"
