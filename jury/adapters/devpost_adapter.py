"""Adapter for Devpost "Projects data" CSV exports.

Columns (0-indexed):
  0. Project Title            - name
  1. Submission Url           - url
  2. Project Status           - "Draft" rows are skipped
  3. Judging Status           - ignored
  4. Highest Step Completed   - ignored
  5. Project Created At       - ignored
  6. About The Project        - description
  7. "Try it out" Links       - try_link
  8. Video Demo Link          - video_link
  9. Locality                 - locality (optional integer, sticky across rows)
  10. Opt-In Prizes           - challenge_list
  11+ Built With, Notes, colleges, custom questions - ignored

The first row is always the Devpost header.
"""

import logging

from jury.core.database import OptionsStore
from jury.core.errors import MalformedRecord
from jury.core.models import Project, new_project
from jury.core.tables import LocalityRegistry, TableAllocator
from .base import BaseAdapter
from .csv_reader import read_records
from .project_adapter import split_challenges


logger = logging.getLogger(__name__)

MIN_DEVPOST_FIELDS = 13
DRAFT_STATUS = 'Draft'


class DevpostCsvAdapter(BaseAdapter):
    """Parse submitted projects from a Devpost export.

    Unlike the generic layout, a locality is added to the registry only the
    first time it appears in an export.
    """

    def __init__(self, store: OptionsStore, localities: LocalityRegistry):
        self.store = store
        self.localities = localities

    def parse(self, content: str) -> list[Project]:
        if content == '':
            return []

        options = self.store.get_options()
        allocator = TableAllocator(options.next_table_num, self.localities, dedupe=True)

        projects = []
        drafts = 0
        for record in read_records(content, has_header=True):
            if len(record) < MIN_DEVPOST_FIELDS:
                raise MalformedRecord(
                    f'record does not contain {MIN_DEVPOST_FIELDS} or more elements '
                    '(invalid devpost csv)', record)

            if record[2] == DRAFT_STATUS:
                drafts += 1
                logger.debug('Skipping draft project %r', record[0])
                continue

            challenge_list = split_challenges(record[10])
            allocator.update_locality(record[9])

            projects.append(new_project(
                record[0],
                allocator.allocate(),
                record[6],
                record[1],
                record[7],
                record[8],
                allocator.locality,
                challenge_list,
            ))

        self.store.update_next_table_num(allocator.next_table_num,
                                         expected_version=options.version)
        allocator.commit()
        logger.info('Parsed %d Devpost projects (%d drafts skipped)', len(projects), drafts)
        return projects
