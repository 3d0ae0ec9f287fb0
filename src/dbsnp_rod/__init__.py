"""dbsnp-rod: parse and classify dbSNP catalog records."""

from .genome_loc import ContigLocator, GenomeLoc, GenomeLocator, GenomicLocationError
from .models import STANDARD_DBSNP_TRACK_NAME, DbSNPRecord, DomainPreconditionError
from .parser import DbSNPParser, MalformedRecordError, parse_fields, parse_line
from .reader import DbSNPReader, ReaderStats, read_dbsnp
from .utils import first_real_snp

__version__ = "0.1.0"

__all__ = [
    "STANDARD_DBSNP_TRACK_NAME",
    "ContigLocator",
    "DbSNPParser",
    "DbSNPReader",
    "DbSNPRecord",
    "DomainPreconditionError",
    "GenomeLoc",
    "GenomeLocator",
    "GenomicLocationError",
    "MalformedRecordError",
    "ReaderStats",
    "__version__",
    "first_real_snp",
    "parse_fields",
    "parse_line",
    "read_dbsnp",
]
