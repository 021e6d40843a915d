"""Registry controller for IEEE OUI assignment lookups."""

import csv
import random
import re
from collections.abc import Iterable, Iterator
from itertools import islice
from pathlib import Path
from typing import TYPE_CHECKING, TextIO

from ..core.controller import BaseController
from ..core.errors import RegistryUnavailableError, VendorNotFoundError


if TYPE_CHECKING:
    from ..core.application import Application


LARGE_BLOCK = "MA-L"

_ASSIGNMENT = re.compile(r"^[0-9A-Fa-f]{6}$")


def parse_rows(lines: Iterable[str]) -> Iterator[tuple[int, str]]:
    """Yield ``(oui, organization)`` for every MA-L row of a registry CSV."""

    marker = f"{LARGE_BLOCK},"
    for row in csv.reader(line for line in lines if line.startswith(marker)):
        if len(row) < 3 or not _ASSIGNMENT.match(row[1]):
            continue
        yield int(row[1], 16), row[2]


class RegistryController(BaseController["Application"]):
    """Controller for scanning the IEEE registry file.

    The file is plain CSV as shipped by the ieee-data package; only large
    block (MA-L) assignments are considered.
    """

    @property
    def path(self) -> Path:
        return self.app.registry_path

    def _open(self) -> TextIO:
        try:
            return self.path.open(encoding="utf-8", errors="replace", newline="")
        except OSError as e:
            raise RegistryUnavailableError(self.path) from e

    def entries(self) -> Iterator[tuple[int, str]]:
        """Iterate over all ``(oui, organization)`` assignments."""

        with self._open() as f:
            yield from parse_rows(f)

    def _matches(self, f: TextIO, vendor: str) -> Iterator[int]:
        for oui, organization in parse_rows(f):
            if organization.startswith(vendor):
                yield oui

    def lookup(self, vendor: str, rng: random.Random) -> int:
        """Pick one of the vendor's assignments uniformly at random.

        The file is scanned twice: once to count the matches and once to
        fetch the randomly chosen one, so nothing but the current line is kept
        in memory.
        """

        with self._open() as f:
            count = sum(1 for _ in self._matches(f, vendor))
            if count == 0:
                raise VendorNotFoundError(vendor)

            self.note(f"{count} registry entries match {vendor!r}")
            index = rng.randrange(count)
            f.seek(0)
            oui = next(islice(self._matches(f, vendor), index, None), None)

        if oui is None:
            # file changed between the two passes
            raise VendorNotFoundError(vendor)
        return oui

    def vendors(self, prefix: str = "") -> list[str]:
        """Organization names starting with ``prefix``, sorted and unique."""

        return sorted({name for _, name in self.entries() if name.startswith(prefix)})
