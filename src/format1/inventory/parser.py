"""FORMAT-1 parser: header classification and the section state machine.

Lines are consumed in order. Blank lines are skipped first, then header
lines switch the current section, and anything else goes to the parser
registered for that section. Lines no parser accepts are dropped (or, in
strict mode, raise Format1ParseError).
"""

import logging
import re
from collections.abc import Callable, Iterable
from pathlib import Path

from format1.inventory.models import Computer, ParseContext, Person, Section
from format1.inventory.normalize import parse_size, trim, unquote

logger = logging.getLogger(__name__)

_VERSION_RE = re.compile(r"^Version\s+(.*)$")
_COMMENT_RE = re.compile(r"^Comment\s+(.*)$")

# Checked in order; "Computer-People" never matches "Computer\s+".
_SECTION_HEADERS: list[tuple[re.Pattern[str], Section]] = [
    (re.compile(r"^People\s+"), Section.people),
    (re.compile(r"^Computer\s+"), Section.computer),
    (re.compile(r"^Computer-People\s+"), Section.relations),
]

_COMPUTER_RE = re.compile(r"^\s*([0-9]+)\s+(.*)$")
_QUOTED_CPU_RE = re.compile(r'^"([^"]*)"\s+(.*)$')

Handler = Callable[[ParseContext, str, int], bool]


class Format1ParseError(ValueError):
    """A line rejected in strict mode."""

    def __init__(self, message: str, line_number: int | None = None) -> None:
        self.line_number = line_number
        if line_number is not None:
            message = f"Line {line_number}: {message}"
        super().__init__(message)


def _field(line: str, index: int) -> str:
    """Whitespace-delimited field ``index`` (0-based), or empty string."""
    parts = line.split()
    return parts[index] if index < len(parts) else ""


def parse_person(ctx: ParseContext, line: str, lineno: int) -> bool:
    parts = trim(line).split(None, 1)
    tag = parts[0]
    name = unquote(trim(parts[1])) if len(parts) > 1 else ""
    ctx.add_person(Person(tag=tag, name=name))
    logger.debug("Line %d: person %s (%r)", lineno, tag, name)
    return True


def parse_computer(ctx: ParseContext, line: str, lineno: int) -> bool:
    """Parse ``<id> <cpu> [ram [hdd [ssd]]]``; the CPU may be double-quoted."""
    m = _COMPUTER_RE.match(line)
    if not m:
        return False
    tag, payload = m.group(1), trim(m.group(2))

    quoted = _QUOTED_CPU_RE.match(payload)
    if quoted:
        cpu, rest = quoted.group(1), trim(quoted.group(2))
    else:
        head = payload.split(None, 1)
        cpu = head[0] if head else ""
        rest = trim(head[1]) if len(head) > 1 else ""

    sizes = [parse_size(tok) for tok in rest.split()[:3]]
    sizes += [""] * (3 - len(sizes))
    ram, hdd, ssd = sizes

    ctx.add_computer(Computer(tag=tag, cpu=cpu, ram=ram, hdd=hdd, ssd=ssd))
    logger.debug("Line %d: computer %s cpu=%r", lineno, tag, cpu)
    return True


def parse_relation(ctx: ParseContext, line: str, lineno: int) -> bool:
    computer_tag, person_tag = _field(line, 0), _field(line, 1)
    ctx.add_relation(computer_tag, person_tag)
    logger.debug("Line %d: computer %s -> person %s", lineno, computer_tag, person_tag)
    return True


_HANDLERS: dict[Section, Handler] = {
    Section.people: parse_person,
    Section.computer: parse_computer,
    Section.relations: parse_relation,
}


def _apply_header(ctx: ParseContext, line: str, lineno: int) -> bool:
    """Handle Version/Comment/section header lines. Returns True if consumed."""
    m = _VERSION_RE.match(line)
    if m:
        ctx.metadata.version = trim(m.group(1))
        return True
    m = _COMMENT_RE.match(line)
    if m:
        ctx.metadata.comment = trim(m.group(1))
        return True
    for pattern, section in _SECTION_HEADERS:
        if pattern.match(line):
            declared = _field(line, 1)
            ctx.enter_section(section, declared)
            logger.debug("Line %d: entering %s section (declared %s)", lineno, section, declared)
            return True
    return False


def _check_strict(ctx: ParseContext, line: str, lineno: int) -> None:
    """Raise Format1ParseError for a line the tolerant parser would accept loosely."""
    if ctx.section == Section.relations:
        computer_tag, person_tag = _field(line, 0), _field(line, 1)
        if not person_tag:
            raise Format1ParseError(f"relation needs two fields: {line!r}", lineno)
        if computer_tag not in ctx.computers:
            raise Format1ParseError(f"relation names unknown computer {computer_tag!r}", lineno)
        if person_tag not in ctx.people:
            raise Format1ParseError(f"relation names unknown person {person_tag!r}", lineno)


def _skip(ctx: ParseContext, line: str, lineno: int, reason: str, strict: bool) -> None:
    if strict:
        raise Format1ParseError(f"{reason}: {line!r}", lineno)
    ctx.skipped_lines.append(lineno)
    logger.debug("Line %d skipped (%s)", lineno, reason)


def parse_inventory(lines: Iterable[str], strict: bool = False) -> ParseContext:
    """Run the section state machine over ``lines`` and return the collected context.

    Raises:
        Format1ParseError: only when ``strict`` is set.
    """
    ctx = ParseContext()
    for lineno, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not trim(line):
            continue
        if _apply_header(ctx, line, lineno):
            continue

        handler = _HANDLERS.get(ctx.section)
        if handler is None:
            _skip(ctx, line, lineno, "outside any section", strict)
            continue
        if strict:
            _check_strict(ctx, line, lineno)
        if not handler(ctx, line, lineno):
            _skip(ctx, line, lineno, f"not a valid {ctx.section} record", strict)

    logger.info(
        "Parsed %d people, %d computers, %d relations (%d lines skipped)",
        ctx.person_count,
        ctx.computer_count,
        ctx.relation_count,
        len(ctx.skipped_lines),
    )
    return ctx


def parse_file(path: str | Path, encoding: str = "utf-8", strict: bool = False) -> ParseContext:
    """Parse a FORMAT-1 file from disk.

    Raises:
        OSError: if the file cannot be read.
        Format1ParseError: only when ``strict`` is set.
    """
    with open(path, encoding=encoding) as f:
        return parse_inventory(f, strict=strict)
