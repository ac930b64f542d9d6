"""Split raw CSV text into rows of fields, independent of what the rows mean."""

import csv
import io

from jury.core.errors import ParseError


# Devpost descriptions can run past the csv module's default 128 KiB field limit
MAX_FIELD_SIZE = 2**31 - 1
csv.field_size_limit(MAX_FIELD_SIZE)


def read_records(content: str, has_header: bool = False) -> list[list[str]]:
    """Parse comma-separated, double-quote-escaped text into rows.

    Rows may have different widths.  Blank lines are skipped.  A stray quote
    inside an unquoted field (ab"c) is kept as a literal character.  With
    has_header set, exactly one leading row is dropped.

    Raises:
        ParseError: on malformed quoting (unterminated quotes, text after a
                    closing quote).  Nothing is returned in that case.
    """
    if content == '':
        return []

    reader = csv.reader(io.StringIO(content, newline=''), strict=True)
    records = []
    try:
        for row in reader:
            if not row:
                continue
            records.append(row)
    except csv.Error as e:
        raise ParseError(str(e), line=reader.line_num) from e

    if has_header:
        records = records[1:]
    return records
