"""Streaming reader for dbSNP catalog files (plain text or gzipped)."""

import gzip
import logging
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from .genome_loc import ContigLocator, GenomeLocator, GenomicLocationError
from .models import STANDARD_DBSNP_TRACK_NAME, DbSNPRecord
from .parser import DbSNPParser, MalformedRecordError

logger = logging.getLogger(__name__)


@dataclass
class ReaderStats:
    """Counts collected while reading a catalog file."""

    lines_read: int = 0
    records: int = 0
    malformed: int = 0
    bad_locations: int = 0

    @property
    def skipped(self) -> int:
        return self.malformed + self.bad_locations

    def to_dict(self) -> dict:
        return {
            "lines_read": self.lines_read,
            "records": self.records,
            "malformed": self.malformed,
            "bad_locations": self.bad_locations,
        }


class DbSNPReader:
    """Iterate over the records of a catalog file.

    Blank lines and ``#`` comment lines are ignored. With ``skip_malformed``
    a record that fails to parse or resolve is logged and counted, and
    reading continues with the next line; otherwise the error propagates.
    """

    def __init__(
        self,
        path: Path | str,
        locator: GenomeLocator | None = None,
        skip_malformed: bool = True,
        name: str = STANDARD_DBSNP_TRACK_NAME,
    ):
        self.path = Path(path)
        self.parser = DbSNPParser(locator or ContigLocator(), name=name)
        self.skip_malformed = skip_malformed
        self.stats = ReaderStats()

    def __iter__(self) -> Iterator[DbSNPRecord]:
        if not self.path.exists():
            raise FileNotFoundError(f"dbSNP file not found: {self.path}")

        open_func = gzip.open if str(self.path).endswith(".gz") else open

        with open_func(self.path, "rt") as f:
            for line_number, line in enumerate(f, start=1):
                if not line.strip() or line.startswith("#"):
                    continue
                self.stats.lines_read += 1

                try:
                    record = self.parser.parse(line)
                except MalformedRecordError as e:
                    if not self.skip_malformed:
                        raise
                    self.stats.malformed += 1
                    logger.warning("Skipping line %d of %s: %s", line_number, self.path.name, e)
                    continue
                except GenomicLocationError as e:
                    if not self.skip_malformed:
                        raise
                    self.stats.bad_locations += 1
                    logger.warning(
                        "Skipping line %d of %s: invalid location: %s",
                        line_number,
                        self.path.name,
                        e,
                    )
                    continue

                self.stats.records += 1
                yield record

        logger.info(
            "Read %d dbSNP records from %s (%d skipped)",
            self.stats.records,
            self.path.name,
            self.stats.skipped,
        )


def read_dbsnp(
    path: Path | str,
    locator: GenomeLocator | None = None,
    skip_malformed: bool = True,
    name: str = STANDARD_DBSNP_TRACK_NAME,
) -> Iterator[DbSNPRecord]:
    """Yield records from a catalog file; see DbSNPReader."""
    yield from DbSNPReader(path, locator, skip_malformed=skip_malformed, name=name)
