"""Abstract base adapter for importing records from CSV text."""

from abc import ABC, abstractmethod


class BaseAdapter(ABC):
    @abstractmethod
    def parse(self, content: str) -> list:
        """Parse CSV text and return the list of records it describes.

        Empty text yields an empty list.  Any error aborts the whole parse;
        no partial list is returned.
        """
        pass

    def parse_file(self, data_path: str) -> list:
        """Read a CSV file and parse it."""
        with open(data_path, 'r', encoding='utf-8-sig', newline='') as f:
            return self.parse(f.read())
