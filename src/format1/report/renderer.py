"""Plain-text report for a parsed FORMAT-1 file."""

import logging

from format1.inventory.models import Computer, ParseContext, Person

logger = logging.getLogger(__name__)

NO_NAME = "(no name)"


def format_person(person: Person, placeholder: str = NO_NAME) -> str:
    name = person.name or placeholder
    return f"Person(name='{name}', tag='{person.tag}')"


def format_computer(computer: Computer) -> str:
    return (
        f"Computer(tag='{computer.tag}', CPU='{computer.cpu}', RAM='{computer.ram}', "
        f"HDD='{computer.hdd}', SSD='{computer.ssd}')"
    )


def declared_computers(ctx: ParseContext) -> list[Computer]:
    """Computers of the current Computer block, in declaration order."""
    return [ctx.computers[tag] for tag in ctx.computer_order]


def computers_owned_by(ctx: ParseContext, person_tag: str) -> list[Computer]:
    """Declared computers whose owner equals ``person_tag`` (plain string match)."""
    return [c for c in declared_computers(ctx) if c.owner == person_tag]


def unowned_computers(ctx: ParseContext) -> list[Computer]:
    """Declared computers never named by any relation record.

    Membership in the owned set decides, whether or not the owner is a
    declared person.
    """
    return [c for c in declared_computers(ctx) if c.tag not in ctx.owned]


def render_report(ctx: ParseContext, placeholder: str = NO_NAME) -> str:
    """Render the full report; the result ends with a blank line."""
    lines: list[str] = ["Report from FORMAT-1 file:"]
    if ctx.metadata.version:
        lines.append(f"Version: {ctx.metadata.version}")
    if ctx.metadata.comment:
        lines.append(f"Comment: {ctx.metadata.comment}")
    lines.append("")

    lines.append("People and their computers:")
    if not ctx.person_order:
        lines.append("  (no people found)")
        lines.append("")
    # Declaration order of the current People block, not a 1..count lookup by id
    for tag in ctx.person_order:
        lines.append("- " + format_person(ctx.people[tag], placeholder))
        owned = computers_owned_by(ctx, tag)
        for computer in owned:
            lines.append("  - " + format_computer(computer))
        if not owned:
            lines.append("  (no computers)")
        lines.append("")

    lines.append("Unowned computers:")
    unowned = unowned_computers(ctx)
    for computer in unowned:
        lines.append("- " + format_computer(computer))
    if not unowned:
        lines.append("  (none)")
    lines.append("")

    logger.debug(
        "Rendered %d people, %d unowned computers", len(ctx.person_order), len(unowned)
    )
    return "\n".join(lines) + "\n"
