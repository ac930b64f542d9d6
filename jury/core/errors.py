"""Exceptions raised while importing CSV data."""


class CsvImportError(Exception):
    """Base class for every error that aborts an import."""


class ParseError(CsvImportError):
    """The text is not valid CSV (e.g. an unterminated quoted field)."""

    def __init__(self, message: str, line: int | None = None):
        self.line = line
        if line is not None:
            message = f'line {line}: {message}'
        super().__init__(message)


class MalformedRecord(CsvImportError):
    """A row does not have the number of fields its importer requires.

    ``record`` holds the row's fields joined with commas, for diagnostics.
    """

    def __init__(self, message: str, fields: list[str]):
        self.record = ','.join(fields)
        super().__init__(f"{message}: '{self.record}'")


class FormatError(CsvImportError):
    """A field that must be numeric could not be parsed."""

    def __init__(self, field_name: str, value: str):
        self.field_name = field_name
        self.value = value
        super().__init__(f'invalid {field_name} {value!r}: expected an integer')


class StaleOptionsError(CsvImportError):
    """The options row changed between the read and the write of an import."""

    def __init__(self, expected_version: int, actual_version: int):
        self.expected_version = expected_version
        self.actual_version = actual_version
        super().__init__(
            f'options were modified concurrently (read version {expected_version}, '
            f'now {actual_version}); retry the import')
