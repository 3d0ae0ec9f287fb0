"""Parsing of dbSNP catalog lines (UCSC snpNNN table layout).

Example lines::

    585  chr1  432  432  rs56289060  0  +  -  -  -/C  genomic  insertion  unknown  0  0  unknown  between  1
    585  chr1  491  492  rs55998931  0  +  C  C  C/T  genomic  single     unknown  0  0  unknown  exact    1

Coordinates in the catalog are 0-based, half-open; records carry 1-based,
closed intervals.
"""

import logging
from collections.abc import Sequence

from .genome_loc import GenomeLocator
from .models import STANDARD_DBSNP_TRACK_NAME, DbSNPRecord

logger = logging.getLogger(__name__)

MIN_FIELDS = 18

# Column indices; 0 (bin), 5 (score) and 8 (UCSC ref allele) are unused.
CONTIG = 1
RAW_START = 2
RAW_STOP = 3
RS_ID = 4
STRAND = 6
REF_BASES = 7
OBSERVED = 9
MOL_TYPE = 10
VAR_TYPE = 11
VALIDATION_STATUS = 12
AV_HET = 13
AV_HET_SE = 14
FUNC = 15
LOC_TYPE = 16
WEIGHT = 17


class MalformedRecordError(ValueError):
    """Raised when a catalog line is too short or has unparseable numbers."""

    def __init__(self, reason: str, line: str):
        self.reason = reason
        self.line = line
        super().__init__(f"Badly formed dbSNP line ({reason}): {line!r}")


def split_line(line: str) -> list[str]:
    """Split a catalog line on tabs, or on whitespace if it has no tabs."""
    line = line.rstrip("\r\n")
    if "\t" in line:
        return line.split("\t")
    return line.split()


def parse_fields(
    fields: Sequence[str],
    locator: GenomeLocator,
    raw_line: str | None = None,
    name: str = STANDARD_DBSNP_TRACK_NAME,
) -> DbSNPRecord:
    """Build a record from the positional fields of one catalog line.

    Args:
        fields: Positional fields, at least 18
        locator: Resolves contig/start/stop into a validated location
        raw_line: Original line text, kept on errors for diagnostics
        name: Track name for the record

    Returns:
        DbSNPRecord with the allele list not yet computed

    Raises:
        MalformedRecordError: Too few fields or a non-numeric numeric field
        GenomicLocationError: Propagated unchanged from the locator
    """
    if raw_line is None:
        raw_line = "\t".join(fields)

    if len(fields) < MIN_FIELDS:
        raise MalformedRecordError(
            f"expected at least {MIN_FIELDS} fields, got {len(fields)}", raw_line
        )

    try:
        start = int(fields[RAW_START]) + 1
        stop = max(start, int(fields[RAW_STOP]))
        av_het = float(fields[AV_HET])
        av_het_se = float(fields[AV_HET_SE])
        weight = int(fields[WEIGHT])
    except ValueError as e:
        raise MalformedRecordError(str(e), raw_line) from e

    loc = locator.resolve(fields[CONTIG], start, stop)

    record = DbSNPRecord(
        loc=loc,
        rs_id=fields[RS_ID],
        strand=fields[STRAND],
        ref_bases=fields[REF_BASES],
        observed=fields[OBSERVED],
        mol_type=fields[MOL_TYPE],
        var_type=fields[VAR_TYPE],
        validation_status=fields[VALIDATION_STATUS],
        av_het=av_het,
        av_het_se=av_het_se,
        func=fields[FUNC],
        loc_type=fields[LOC_TYPE],
        weight=weight,
        name=name,
    )
    logger.debug("Parsed %s", record.to_simple_string())
    return record


def parse_line(
    line: str,
    locator: GenomeLocator,
    name: str = STANDARD_DBSNP_TRACK_NAME,
) -> DbSNPRecord:
    """Split and parse one raw catalog line."""
    return parse_fields(split_line(line), locator, raw_line=line.rstrip("\r\n"), name=name)


class DbSNPParser:
    """Parser bound to a locator and track name."""

    def __init__(self, locator: GenomeLocator, name: str = STANDARD_DBSNP_TRACK_NAME):
        self.locator = locator
        self.name = name

    def parse(self, line: str) -> DbSNPRecord:
        return parse_line(line, self.locator, name=self.name)

    def parse_fields(self, fields: Sequence[str], raw_line: str | None = None) -> DbSNPRecord:
        return parse_fields(fields, self.locator, raw_line=raw_line, name=self.name)
