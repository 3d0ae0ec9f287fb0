"""Shared utility modules."""

from .rod_search import (
    first_real_snp,
    iter_snps,
)

__all__ = [
    "first_real_snp",
    "iter_snps",
]
