"""Section and checklist helpers for daily-note markdown.

Only fixed ``## `` headings and ``- [ ]`` style checklist lines are
recognized. This works on raw lines, not a markdown AST.
"""

import re

_CHECKLIST_RE = re.compile(r"^(\s*)-\s+\[(.)\]")


def is_checklist_line(line: str) -> bool:
    """Return True if the line is a checklist item, whatever its mark."""
    return _CHECKLIST_RE.match(line) is not None


def is_checklist_complete(line: str) -> bool:
    """
    Return True if the checklist item carries any mark.

    ``- [ ]`` is pending; ``- [x]``, ``- [X]``, ``- [v]`` or any other single
    character counts as done. Lines that are not checklist items are never
    complete.
    """
    match = _CHECKLIST_RE.match(line)
    if match is None:
        return False
    return match.group(2) != " "


def extract_section(content: str, heading: str) -> list[str]:
    """
    Extract the lines of a section from markdown text.

    Args:
        content: Full note text
        heading: Heading line to look for, e.g. "## TODO（短期）"

    Returns:
        Lines strictly between the heading and the next ``##`` line (or end
        of text), spacing and blank lines preserved. Empty if the heading
        is not present.
    """
    target = heading.strip()
    section_lines: list[str] = []
    in_section = False

    for line in content.split("\n"):
        stripped = line.strip()
        if stripped == target:
            in_section = True
            continue
        if in_section and stripped.startswith("##"):
            break
        if in_section:
            section_lines.append(line)

    return section_lines


def filter_incomplete(lines: list[str]) -> list[str]:
    """Keep only unfinished checklist items, in their original order."""
    return [
        line
        for line in lines
        if is_checklist_line(line) and not is_checklist_complete(line)
    ]


def build_section(heading: str, lines: list[str]) -> str:
    """
    Join a heading and its lines into section text.

    An empty section is just the heading and a newline; otherwise a blank
    line separates the heading from the items.
    """
    if not lines:
        return f"{heading}\n"
    return f"{heading}\n\n" + "\n".join(lines)
