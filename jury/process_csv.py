#!/usr/bin/env python3
"""CLI entry point for importing and exporting judging CSVs.

Usage:
    python -m jury.process_csv --source devpost --data projects.csv --output ./output/
    python -m jury.process_csv --source judge --data judges.csv --header --output ./output/
    python -m jury.process_csv --export projects --output ./output/
"""

import argparse
import logging
import os
import sys

from jury.core.models import ImportConfig
from jury.core.database import OptionsStore, RecordStore
from jury.core.errors import CsvImportError
from jury.core.csv_exporter import create_judge_csv, create_project_csv, csv_download
from jury.core.tables import LocalityRegistry
from jury.adapters.judge_adapter import JudgeCsvAdapter
from jury.adapters.project_adapter import ProjectCsvAdapter
from jury.adapters.devpost_adapter import DevpostCsvAdapter


def build_adapter(config: ImportConfig, store: OptionsStore, localities: LocalityRegistry):
    if config.source_type == 'judge':
        return JudgeCsvAdapter(has_header=config.has_header)
    elif config.source_type == 'project':
        return ProjectCsvAdapter(store, localities, has_header=config.has_header)
    elif config.source_type == 'devpost':
        return DevpostCsvAdapter(store, localities)
    raise ValueError(f'Unknown source type: {config.source_type}')


def run_import(config: ImportConfig, data_paths: list[str],
               localities: LocalityRegistry) -> int:
    """Import each file and save its records; returns the number saved."""
    options_store = OptionsStore(config.db_path)
    record_store = RecordStore(config.db_path)
    adapter = build_adapter(config, options_store, localities)

    total = 0
    for data_path in data_paths:
        print(f"Parsing {data_path}...")
        records = adapter.parse_file(data_path)
        if config.source_type == 'judge':
            record_store.save_judges(records)
        else:
            record_store.save_projects(records)
        print(f"  -> {len(records)} {'judges' if config.source_type == 'judge' else 'projects'}")
        total += len(records)
    return total


def run_export(config: ImportConfig, kind: str) -> str:
    """Write judges.csv or projects.csv into the output directory."""
    record_store = RecordStore(config.db_path)
    if kind == 'judges':
        content = create_judge_csv(record_store.load_judges())
    else:
        content = create_project_csv(record_store.load_projects())

    download = csv_download(kind, content)
    out_path = os.path.join(config.output_dir, download.filename)
    with open(out_path, 'wb') as f:
        f.write(download.body)
    return out_path


def main(argv=None):
    parser = argparse.ArgumentParser(description='Import or export judging CSVs')
    parser.add_argument('--source', choices=['judge', 'project', 'devpost'],
                        help='Format of the files given with --data')
    parser.add_argument('--data', nargs='+', default=[], help='Input CSV file(s)')
    parser.add_argument('--header', action='store_true',
                        help='First row of each file is a header (devpost always has one)')
    parser.add_argument('--export', choices=['judges', 'projects'], default=None,
                        help='Write saved records to <output>/<judges|projects>.csv')
    parser.add_argument('--output', required=True, help='Output directory for generated files')
    parser.add_argument('--db', required=False, default=None,
                        help='Path to the SQLite database (default: {output}/jury.db)')
    parser.add_argument('--verbose', action='store_true', help='Enable debug logging')

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG,
                            format='%(asctime)s | %(levelname)s | %(name)s | %(message)s')

    if not args.source and not args.export:
        parser.error('one of --source or --export is required')
    if args.source and not args.data:
        parser.error('--source requires --data')

    os.makedirs(args.output, exist_ok=True)
    db_path = args.db if args.db else os.path.join(args.output, 'jury.db')
    os.makedirs(os.path.dirname(os.path.abspath(db_path)), exist_ok=True)

    config = ImportConfig(
        source_type=args.source or '',
        has_header=args.header or args.source == 'devpost',
        db_path=db_path,
        output_dir=args.output,
    )

    if args.source:
        # One registry per run, shared by every file imported in it
        localities = LocalityRegistry()
        try:
            total = run_import(config, args.data, localities)
        except CsvImportError as e:
            print(f"Import failed: {e}")
            sys.exit(1)
        print(f"Total: {total} records from {len(args.data)} files")
        if localities.values:
            print(f"Localities: {localities.values}")

    if args.export:
        out_path = run_export(config, args.export)
        print(f"Generated {out_path}")

    print("\nDone!")


if __name__ == '__main__':
    main()
