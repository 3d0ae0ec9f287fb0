"""Reference-first allele ordering for catalog records.

Observed alleles are stored as a single slash-delimited string (e.g. ``C/T``
or ``-/AC``) reported on the strand given in the record. Reverse-strand
entries are complemented as a whole string before splitting so that tokens
and separators stay paired.
"""

from collections.abc import Sequence

_COMPLEMENT = str.maketrans("ACGTacgt", "TGCAtgca")


def complement(bases: str) -> str:
    """Complement nucleotides, leaving any other character untouched."""
    return bases.translate(_COMPLEMENT)


def is_forward_strand(strand: str) -> bool:
    return strand == "+"


def strand_adjusted_observed(observed: str, strand: str) -> str:
    """Return the observed allele string oriented to the forward strand."""
    if is_forward_strand(strand):
        return observed
    return complement(observed)


def resolve_alleles(observed: str, ref_bases: str, strand: str) -> tuple[str, ...]:
    """Split observed alleles and move the reference allele to the front.

    Tokens are neither deduplicated nor checked against a base alphabet.
    When the reference is not among the tokens the order is left as read.

    Args:
        observed: Raw slash-delimited observed allele string
        ref_bases: Reference bases from the catalog
        strand: '+' or '-'

    Returns:
        Tuple of allele strings, reference first when present
    """
    alleles = strand_adjusted_observed(observed, strand).split("/")

    if ref_bases in alleles and alleles[0] != ref_bases:
        idx = alleles.index(ref_bases)
        alleles[0], alleles[idx] = alleles[idx], alleles[0]

    return tuple(alleles)


def alternate_alleles(alleles: Sequence[str], ref_bases: str) -> list[str]:
    """Return every allele that differs from the reference, in order."""
    return [allele for allele in alleles if allele != ref_bases]
