"""End-to-end tests for the import/export CLI."""

import os
import sys
import pytest

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

from jury import process_csv
from jury.core.database import OptionsStore, RecordStore

REFERENCE_DIR = os.path.join(PROJECT_ROOT, 'tests', 'reference_data')


def test_devpost_import_then_export(tmp_path, capsys):
    out = str(tmp_path / 'out')
    process_csv.main(['--source', 'devpost',
                      '--data', os.path.join(REFERENCE_DIR, 'devpost_projects.csv'),
                      '--output', out])

    db_path = os.path.join(out, 'jury.db')
    assert OptionsStore(db_path).get_options().next_table_num == 13
    assert len(RecordStore(db_path).load_projects()) == 4
    assert 'Localities: [7, 12]' in capsys.readouterr().out

    process_csv.main(['--export', 'projects', '--output', out])
    with open(os.path.join(out, 'projects.csv')) as f:
        lines = f.read().splitlines()
    assert lines[0].startswith('Name,Table,Description')
    assert lines[1].startswith('Hydra,Table 7,')
    assert len(lines) == 5


def test_judge_import_then_export(tmp_path):
    out = str(tmp_path / 'out')
    process_csv.main(['--source', 'judge', '--header',
                      '--data', os.path.join(REFERENCE_DIR, 'judges.csv'),
                      '--output', out, '--export', 'judges'])
    with open(os.path.join(out, 'judges.csv')) as f:
        lines = f.read().splitlines()
    assert len(lines) == 4
    assert lines[1].startswith('Ada Lovelace,ada@example.com,Hardware track,')


def test_import_error_exits(tmp_path, capsys):
    bad = tmp_path / 'bad.csv'
    bad.write_text('Ada,ada@example.com\n')
    with pytest.raises(SystemExit) as exc:
        process_csv.main(['--source', 'judge', '--data', str(bad),
                          '--output', str(tmp_path / 'out')])
    assert exc.value.code == 1
    assert 'Import failed' in capsys.readouterr().out


def test_source_requires_data(tmp_path):
    with pytest.raises(SystemExit):
        process_csv.main(['--source', 'judge', '--output', str(tmp_path)])


def test_each_run_starts_with_empty_localities(tmp_path, capsys):
    out = str(tmp_path / 'out')
    data = os.path.join(REFERENCE_DIR, 'devpost_projects.csv')
    process_csv.main(['--source', 'devpost', '--data', data, '--output', out])
    capsys.readouterr()
    process_csv.main(['--source', 'devpost', '--data', data, '--output', out])
    assert 'Localities: [7, 12]\n' in capsys.readouterr().out
    assert OptionsStore(os.path.join(out, 'jury.db')).get_options().next_table_num == 17
