"""Classification of catalog entries from their categorical columns.

The catalog encodes variant class, location type and validation status as
free-text categories, e.g.:

| Column            | Example values                                        |
|-------------------|-------------------------------------------------------|
| varType           | single, in-del, insertion, deletion, mnp, mixed       |
| locType           | exact, between, range, rangeInsertion                 |
| validationStatus  | by-cluster,by-frequency, by-hapmap, by-2hit-2allele   |

Matching is by substring so that combined values such as
``by-cluster,by-hapmap`` are still recognised.
"""

from typing import Protocol


class Classifiable(Protocol):
    """Anything exposing the predicates used for descriptive tags."""

    def is_snp(self) -> bool: ...

    def is_indel(self) -> bool: ...

    def is_hapmap(self) -> bool: ...

    def is_2hit_2allele(self) -> bool: ...


def is_snp(var_type: str, loc_type: str) -> bool:
    return "single" in var_type and "exact" in loc_type


def is_insertion(var_type: str) -> bool:
    return "insertion" in var_type


def is_deletion(var_type: str) -> bool:
    return "deletion" in var_type


def is_indel(var_type: str) -> bool:
    return is_insertion(var_type) or is_deletion(var_type) or "in-del" in var_type


def is_hapmap(validation_status: str) -> bool:
    return "by-hapmap" in validation_status


def is_2hit_2allele(validation_status: str) -> bool:
    return "by-2hit-2allele" in validation_status


def classification_tags(record: Classifiable) -> list[str]:
    """Return descriptive tags in fixed order: SNP, Indel, Hapmap, 2Hit."""
    tags = []
    if record.is_snp():
        tags.append("SNP")
    if record.is_indel():
        tags.append("Indel")
    if record.is_hapmap():
        tags.append("Hapmap")
    if record.is_2hit_2allele():
        tags.append("2Hit")
    return tags
