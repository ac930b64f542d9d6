"""Adapter for generic project CSV uploads.

Columns (0-indexed):
  0. name
  1. description
  2. url
  3. "Try it" link      (optional)
  4. video link         (optional)
  5. locality           (optional integer, sticky across rows)
  6. challenge list     (optional, comma separated, usually quoted)

Each imported project takes the next table number; the counter is written
back to the options store once, after every row has been accepted.
"""

import logging

from jury.core.database import OptionsStore
from jury.core.errors import MalformedRecord
from jury.core.models import Project, new_project
from jury.core.tables import LocalityRegistry, TableAllocator
from .base import BaseAdapter
from .csv_reader import read_records


logger = logging.getLogger(__name__)

MIN_PROJECT_FIELDS = 4


def split_challenges(raw: str) -> list[str]:
    """'AI, Best Hack' -> ['AI', 'Best Hack'];  '' -> []."""
    if raw == '':
        return []
    return [c.strip() for c in raw.split(',')]


def optional_field(record: list[str], index: int) -> str:
    """Field at index, or '' if the row is too short."""
    if index < len(record):
        return record[index]
    return ''


class ProjectCsvAdapter(BaseAdapter):
    """Parse projects from the generic project CSV layout.

    Args:
        store: Options store holding next_table_num.
        localities: Registry that every parsed locality is appended to.
        has_header: If True, the first row is a header and is skipped.
    """

    def __init__(self, store: OptionsStore, localities: LocalityRegistry,
                 has_header: bool = False):
        self.store = store
        self.localities = localities
        self.has_header = has_header

    def parse(self, content: str) -> list[Project]:
        if content == '':
            return []

        options = self.store.get_options()
        allocator = TableAllocator(options.next_table_num, self.localities)

        projects = []
        for record in read_records(content, self.has_header):
            if len(record) < MIN_PROJECT_FIELDS:
                raise MalformedRecord(
                    f'record contains less than {MIN_PROJECT_FIELDS} elements', record)

            allocator.update_locality(optional_field(record, 5))
            projects.append(new_project(
                record[0],
                allocator.allocate(),
                record[1],
                record[2],
                optional_field(record, 3),
                optional_field(record, 4),
                allocator.locality,
                split_challenges(optional_field(record, 6)),
            ))

        self.store.update_next_table_num(allocator.next_table_num,
                                         expected_version=options.version)
        allocator.commit()
        logger.info('Parsed %d projects', len(projects))
        return projects
