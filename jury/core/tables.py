"""Table number assignment and locality bookkeeping for project imports.

Each project import reads ``next_table_num`` once, hands out table numbers
from a local copy while walking the rows, and writes the final value back
once.  A row's locality can push the counter forward: if the locality is
larger than the next free table, numbering jumps to the locality first.

Localities are "sticky" within a batch: a row with an empty locality field
keeps using the last locality parsed earlier in the same batch (0 if none).
"""

import re

from .errors import FormatError


# Signed 64-bit, ASCII digits only
LOCALITY_RE = re.compile(r"[+-]?[0-9]+", re.ASCII)
LOCALITY_MIN = -2**63
LOCALITY_MAX = 2**63 - 1


class LocalityRegistry:
    """Ordered, append-only record of localities seen by project imports.

    The owner decides the scope (one per event, per CLI run, ...) and calls
    ``reset()`` when that scope ends.
    """

    def __init__(self, values=()):
        self._values = [int(v) for v in values]

    def append(self, locality: int):
        self._values.append(locality)

    def reset(self):
        self._values.clear()

    @property
    def values(self) -> list[int]:
        return list(self._values)

    def __contains__(self, locality) -> bool:
        return locality in self._values

    def __iter__(self):
        return iter(list(self._values))

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f'LocalityRegistry({self._values!r})'


class TableAllocator:
    """Per-import accumulator for the table counter and the sticky locality.

    Parsed localities are held back and only reach the registry on
    ``commit()``, so an import that fails part-way leaves it untouched.

    Args:
        next_table_num: Counter value read from the options store.
        localities: Registry that parsed localities are appended to.
        dedupe: If True, a locality is appended at most once per allocator
                (Devpost imports); otherwise every parsed value is appended.
    """

    def __init__(self, next_table_num: int, localities: LocalityRegistry,
                 dedupe: bool = False):
        self.next_table_num = next_table_num
        self.locality = 0
        self.localities = localities
        self.dedupe = dedupe
        self._seen = set()
        self._pending = []

    def update_locality(self, raw: str) -> int:
        """Parse a locality field and make it the current locality.

        An empty field leaves the previous locality in place.
        """
        raw = raw.strip()
        if not raw:
            return self.locality

        if not LOCALITY_RE.fullmatch(raw):
            raise FormatError('locality', raw)
        locality = int(raw)
        if not LOCALITY_MIN <= locality <= LOCALITY_MAX:
            raise FormatError('locality', raw)

        self.locality = locality
        if not self.dedupe:
            self._pending.append(locality)
        elif locality not in self._seen:
            self._seen.add(locality)
            self._pending.append(locality)
        return locality

    def allocate(self) -> int:
        """Return the table for the current row and advance the counter."""
        if self.next_table_num < self.locality:
            self.next_table_num = self.locality
        table = self.next_table_num
        self.next_table_num += 1
        return table

    def commit(self):
        """Append this batch's localities to the registry."""
        for locality in self._pending:
            self.localities.append(locality)
        self._pending = []
