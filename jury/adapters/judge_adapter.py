"""Adapter for judge CSV uploads: name, email, notes."""

import logging

from jury.core.errors import MalformedRecord
from jury.core.models import Judge, new_judge
from .base import BaseAdapter
from .csv_reader import read_records


logger = logging.getLogger(__name__)

JUDGE_FIELDS = 3


class JudgeCsvAdapter(BaseAdapter):
    """Parse judges from rows of exactly three fields.

    Args:
        has_header: If True, the first row is a header and is skipped.
    """

    def __init__(self, has_header: bool = False):
        self.has_header = has_header

    def parse(self, content: str) -> list[Judge]:
        judges = []
        for record in read_records(content, self.has_header):
            if len(record) != JUDGE_FIELDS:
                raise MalformedRecord(
                    f'record does not contain {JUDGE_FIELDS} elements', record)
            name, email, notes = record
            judges.append(new_judge(name, email, notes))

        logger.info('Parsed %d judges', len(judges))
        return judges
