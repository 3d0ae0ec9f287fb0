"""Search helpers over mixed collections of reference-ordered annotations."""

from collections.abc import Iterable, Iterator

from ..models import DbSNPRecord


def iter_snps(entries: Iterable[object] | None) -> Iterator[DbSNPRecord]:
    """Yield the dbSNP records in ``entries`` that are SNPs, in order."""
    if entries is None:
        return
    for entry in entries:
        if isinstance(entry, DbSNPRecord) and entry.is_snp():
            yield entry


def first_real_snp(entries: Iterable[object] | None) -> DbSNPRecord | None:
    """Return the first dbSNP record that is a SNP.

    Other annotation types and non-SNP dbSNP records are passed over.

    Args:
        entries: Annotations overlapping a site, possibly None

    Returns:
        The first matching record, or None if there is none
    """
    return next(iter_snps(entries), None)
