"""CSV exports of judges and projects.

Generates three CSV layouts:
  - Judge export (all judge fields, for download)
  - Project export (all project fields, table shown as "Table N")
  - Project import layout (re-importable through ProjectCsvAdapter)

Exporters never fail: missing values are written as 0 / false / empty.
"""

import csv
import io
from dataclasses import dataclass, field


JUDGE_HEADER = ['Name', 'Email', 'Notes', 'Code', 'Active', 'ReadWelcome',
                'Notes', 'Alpha', 'Beta', 'LastActivity']
PROJECT_HEADER = ['Name', 'Table', 'Description', 'URL', 'TryLink', 'VideoLink',
                  'ChallengeList', 'Mu', 'SigmaSq', 'Active', 'LastActivity']
PROJECT_IMPORT_HEADER = ['Name', 'Description', 'URL', 'TryLink', 'VideoLink',
                         'Locality', 'ChallengeList']

CSV_MIME_TYPE = 'text/csv'


@dataclass
class CsvDownload:
    filename: str
    body: bytes
    mime_type: str = CSV_MIME_TYPE
    headers: dict = field(default_factory=dict)


def _str(val) -> str:
    return '' if val is None else str(val)


def _bool(val) -> str:
    return 'true' if val else 'false'


def _float(val) -> str:
    return f'{float(val or 0.0):f}'


def _int(val) -> str:
    return str(int(val or 0))


def _write_rows(header: list[str], rows) -> bytes:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator='\n')
    writer.writerow(header)
    for row in rows:
        writer.writerow(row)
    return buf.getvalue().encode('utf-8')


def create_judge_csv(judges) -> bytes:
    """Serialize judges, one row each, under JUDGE_HEADER."""
    return _write_rows(JUDGE_HEADER, (
        [
            _str(j.name), _str(j.email), _str(j.notes), _str(j.code),
            _bool(j.active), _bool(j.read_welcome), _str(j.notes),
            _float(j.alpha), _float(j.beta), _int(j.last_activity),
        ]
        for j in judges
    ))


def create_project_csv(projects) -> bytes:
    """Serialize projects, one row each, under PROJECT_HEADER."""
    return _write_rows(PROJECT_HEADER, (
        [
            _str(p.name), f'Table {_int(p.location)}', _str(p.description), _str(p.url),
            _str(p.try_link), _str(p.video_link), ','.join(p.challenge_list or []),
            _float(p.mu), _float(p.sigma_sq), _bool(p.active), _int(p.last_activity),
        ]
        for p in projects
    ))


def create_project_import_csv(projects) -> bytes:
    """Serialize projects in the column order ProjectCsvAdapter reads (with header).

    Table numbers are not written; they are reassigned on import.
    """
    return _write_rows(PROJECT_IMPORT_HEADER, (
        [
            _str(p.name), _str(p.description), _str(p.url), _str(p.try_link),
            _str(p.video_link), _int(p.locality), ','.join(p.challenge_list or []),
        ]
        for p in projects
    ))


def csv_download(name: str, content: bytes) -> CsvDownload:
    """Wrap exported bytes with the filename and headers for an attachment."""
    filename = f'{name}.csv'
    return CsvDownload(
        filename=filename,
        body=content,
        headers={
            'Content-Disposition': f'attachment; filename={filename}',
            'Content-Type': CSV_MIME_TYPE,
        },
    )


def add_csv_data(name: str, content: bytes, sink):
    """Hand an export to a response sink: ``sink(status=, headers=, body=)``."""
    download = csv_download(name, content)
    return sink(status=200, headers=download.headers, body=download.body)
