"""Inventory entities and the per-run parse context."""

import enum

from pydantic import BaseModel, ConfigDict, Field


class Section(enum.StrEnum):
    none = "none"
    people = "people"
    computer = "computer"
    relations = "relations"


class FileMetadata(BaseModel):
    version: str = ""
    comment: str = ""


class Person(BaseModel):
    """A person declared in the People section."""

    model_config = ConfigDict(frozen=True)

    tag: str
    name: str = ""  # empty is rendered as a placeholder


class Computer(BaseModel):
    """A computer declared in the Computer section.

    ``owner`` is only ever written by relation records.
    """

    tag: str
    cpu: str = ""
    ram: str = ""
    hdd: str = ""
    ssd: str = ""
    owner: str | None = None


class ParseContext(BaseModel):
    """Everything collected during one pass over a FORMAT-1 file.

    Lookup tables are keyed by identifier; the ``*_order`` lists keep the
    declaration sequence of the current section block, which is what the
    report enumerates.
    """

    metadata: FileMetadata = Field(default_factory=FileMetadata)
    section: Section = Section.none

    people: dict[str, Person] = Field(default_factory=dict)
    person_order: list[str] = Field(default_factory=list)

    computers: dict[str, Computer] = Field(default_factory=dict)
    computer_order: list[str] = Field(default_factory=list)

    # computer id -> person id, written by relation records only
    owners: dict[str, str] = Field(default_factory=dict)
    owned: set[str] = Field(default_factory=set)
    relations: list[tuple[str, str]] = Field(default_factory=list)

    # Informational "expected count" tokens from section headers, never checked
    declared: dict[Section, str] = Field(default_factory=dict)
    counts: dict[Section, int] = Field(default_factory=dict)

    skipped_lines: list[int] = Field(default_factory=list)

    @property
    def person_count(self) -> int:
        return self.counts.get(Section.people, 0)

    @property
    def computer_count(self) -> int:
        return self.counts.get(Section.computer, 0)

    @property
    def relation_count(self) -> int:
        return self.counts.get(Section.relations, 0)

    def enter_section(self, section: Section, declared: str) -> None:
        """Switch to ``section`` and restart its record count."""
        self.section = section
        self.declared[section] = declared
        self.counts[section] = 0
        if section == Section.people:
            self.person_order = []
        elif section == Section.computer:
            self.computer_order = []
        elif section == Section.relations:
            self.relations = []

    def add_person(self, person: Person) -> None:
        self.people[person.tag] = person
        if person.tag not in self.person_order:
            self.person_order.append(person.tag)
        self.counts[Section.people] = self.person_count + 1

    def add_computer(self, computer: Computer) -> None:
        # Ownership recorded by an earlier relation outlives re-declaration
        computer.owner = self.owners.get(computer.tag)
        self.computers[computer.tag] = computer
        if computer.tag not in self.computer_order:
            self.computer_order.append(computer.tag)
        self.counts[Section.computer] = self.computer_count + 1

    def add_relation(self, computer_tag: str, person_tag: str) -> None:
        self.owners[computer_tag] = person_tag
        self.owned.add(computer_tag)
        self.relations.append((computer_tag, person_tag))
        computer = self.computers.get(computer_tag)
        if computer is not None:
            computer.owner = person_tag
        self.counts[Section.relations] = self.relation_count + 1
