"""Genomic locations and the contig dictionary used to validate them."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class GenomicLocationError(ValueError):
    """Raised when a contig or coordinate range cannot be resolved."""

    pass


@dataclass(frozen=True)
class GenomeLoc:
    """A 1-based, closed interval on a single contig."""

    contig: str
    start: int
    stop: int

    def __str__(self) -> str:
        if self.start == self.stop:
            return f"{self.contig}:{self.start}"
        return f"{self.contig}:{self.start}-{self.stop}"

    @property
    def size(self) -> int:
        return self.stop - self.start + 1


class GenomeLocator(Protocol):
    """Protocol for turning contig + bounds into a validated location."""

    def resolve(self, contig: str, start: int, stop: int) -> GenomeLoc:
        """Return the location or raise GenomicLocationError."""
        ...


def _parse_length(value: str, path: Path, line_number: int) -> int:
    try:
        return int(value)
    except ValueError as e:
        raise GenomicLocationError(
            f"Invalid contig length '{value}' at line {line_number} of {path}"
        ) from e


class ContigLocator:
    """Resolve locations against an optional contig -> length dictionary.

    Without a dictionary any non-empty contig name is accepted and only the
    interval itself is checked.
    """

    def __init__(self, contigs: Mapping[str, int] | None = None):
        self.contigs = dict(contigs) if contigs is not None else None

    def resolve(self, contig: str, start: int, stop: int) -> GenomeLoc:
        if not contig:
            raise GenomicLocationError("Contig name is empty")
        if start < 1:
            raise GenomicLocationError(
                f"Start position must be >= 1, got {start} on {contig}"
            )
        if stop < start:
            raise GenomicLocationError(
                f"Stop position {stop} is before start {start} on {contig}"
            )

        if self.contigs is not None:
            if contig not in self.contigs:
                raise GenomicLocationError(
                    f"Unknown contig '{contig}': not present in the sequence dictionary"
                )
            length = self.contigs[contig]
            if stop > length:
                raise GenomicLocationError(
                    f"Stop position {stop} is past the end of {contig} (length {length})"
                )

        return GenomeLoc(contig=contig, start=start, stop=stop)

    @classmethod
    def from_fai(cls, fai_path: Path) -> "ContigLocator":
        """Build a locator from a samtools FASTA index (.fai).

        Only the first two columns (name, length) are used.
        """
        contigs: dict[str, int] = {}
        with open(fai_path) as f:
            for line_number, line in enumerate(f, start=1):
                parts = line.rstrip("\n").split("\t")
                if len(parts) < 2 or not parts[0]:
                    continue
                contigs[parts[0]] = _parse_length(parts[1], fai_path, line_number)

        logger.debug("Loaded %d contigs from %s", len(contigs), fai_path)
        return cls(contigs)

    @classmethod
    def from_sequence_dictionary(cls, dict_path: Path) -> "ContigLocator":
        """Build a locator from a Picard sequence dictionary (.dict)."""
        contigs: dict[str, int] = {}
        with open(dict_path) as f:
            for line_number, line in enumerate(f, start=1):
                if not line.startswith("@SQ"):
                    continue
                tags = dict(
                    field.split(":", 1)
                    for field in line.rstrip("\n").split("\t")[1:]
                    if ":" in field
                )
                if "SN" in tags and "LN" in tags:
                    contigs[tags["SN"]] = _parse_length(tags["LN"], dict_path, line_number)

        logger.debug("Loaded %d contigs from %s", len(contigs), dict_path)
        return cls(contigs)

    @classmethod
    def from_reference_index(cls, path: Path) -> "ContigLocator":
        """Dispatch on file suffix: .dict for sequence dictionaries, else .fai."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Reference index not found: {path}")
        if path.suffix == ".dict":
            return cls.from_sequence_dictionary(path)
        return cls.from_fai(path)
