"""Data models for dbSNP catalog records."""

from dataclasses import dataclass
from functools import cached_property

from . import classifier
from .alleles import alternate_alleles, is_forward_strand, resolve_alleles
from .genome_loc import GenomeLoc

STANDARD_DBSNP_TRACK_NAME = "dbsnp"

# Leading bin column written by to_catalog_line().
CATALOG_TRACK_BIN = 585


class DomainPreconditionError(RuntimeError):
    """Raised when a SNP-only accessor is used on a record that is not one."""

    pass


@dataclass(frozen=True)
class DbSNPRecord:
    """Represents a single dbSNP catalog entry."""

    loc: GenomeLoc
    rs_id: str
    strand: str
    ref_bases: str
    observed: str

    # Categorical columns
    mol_type: str
    var_type: str
    validation_status: str

    # Heterozygosity, passed through as read
    av_het: float
    av_het_se: float

    func: str
    loc_type: str
    weight: int

    name: str = STANDARD_DBSNP_TRACK_NAME

    @cached_property
    def allele_list(self) -> tuple[str, ...]:
        """All alleles at the site, reference first when it was observed."""
        return resolve_alleles(self.observed, self.ref_bases, self.strand)

    @property
    def alternate_allele_list(self) -> list[str]:
        """Alleles other than the reference, in allele-list order."""
        return alternate_alleles(self.allele_list, self.ref_bases)

    def get_location(self) -> GenomeLoc:
        return self.loc

    def get_reference(self) -> str:
        return self.ref_bases

    def on_fwd_strand(self) -> bool:
        return is_forward_strand(self.strand)

    def get_neg_log10_p_error(self) -> float:
        return 4.0  # -log10(0.0001)

    def get_non_ref_allele_frequency(self) -> float:
        # The catalog carries no allele frequency.
        return 0.0

    def get_heterozygosity(self) -> float:
        return self.av_het

    def get_ploidy(self) -> int:
        return 2

    def get_variant_type(self) -> str:
        return "SNP"

    # Classification

    def is_snp(self) -> bool:
        return classifier.is_snp(self.var_type, self.loc_type)

    def is_insertion(self) -> bool:
        return classifier.is_insertion(self.var_type)

    def is_deletion(self) -> bool:
        return classifier.is_deletion(self.var_type)

    def is_indel(self) -> bool:
        return classifier.is_indel(self.var_type)

    def is_biallelic(self) -> bool:
        return len(self.alternate_allele_list) == 1

    def is_reference(self) -> bool:
        # A catalog entry always denotes a variant site.
        return False

    def is_hapmap(self) -> bool:
        return classifier.is_hapmap(self.validation_status)

    def is_2hit_2allele(self) -> bool:
        return classifier.is_2hit_2allele(self.validation_status)

    def get_alternative_base_for_snp(self) -> str:
        """Return the single alternate base of a biallelic SNP.

        Raises:
            DomainPreconditionError: If the record is not a SNP, is not
                biallelic, or its alternate allele is not a single base
        """
        if not self.is_snp():
            raise DomainPreconditionError(f"Not a SNP; dbSNP record at {self.loc}")
        if not self.is_biallelic():
            raise DomainPreconditionError(f"Not biallelic; dbSNP record at {self.loc}")

        alts = self.alternate_allele_list
        if len(alts) == 1 and len(alts[0]) == 1:
            return alts[0]
        raise DomainPreconditionError(
            f"Alternate allele '{alts[0]}' is not a single base; dbSNP record at {self.loc}"
        )

    def get_reference_for_snp(self) -> str:
        """Return the single reference base of a SNP.

        Raises:
            DomainPreconditionError: If the record is not a SNP or its
                reference is not exactly one base
        """
        if not self.is_snp():
            raise DomainPreconditionError(f"Not a SNP; dbSNP record at {self.loc}")
        if len(self.ref_bases) != 1:
            raise DomainPreconditionError(
                f"Reference must be a single base at {self.loc}, was '{self.ref_bases}'"
            )
        return self.ref_bases

    # Formatting

    def to_tsv(self) -> str:
        """Full tab-separated form with a half-open stop coordinate."""
        return "\t".join(
            [
                self.loc.contig,
                str(self.loc.start),
                str(self.loc.stop + 1),
                self.rs_id,
                self.strand,
                self.ref_bases,
                self.observed,
                self.mol_type,
                self.var_type,
                self.validation_status,
                f"{self.av_het:f}",
                f"{self.av_het_se:f}",
                self.func,
                self.loc_type,
                str(self.weight),
            ]
        )

    def to_simple_string(self) -> str:
        return f"{self.rs_id}:{self.observed}:{self.strand}"

    def to_medium_string(self) -> str:
        """Location, id and joined alleles followed by classification tags."""
        s = f"{self.loc}:{self.rs_id}:{''.join(self.allele_list)}"
        for tag in classifier.classification_tags(self):
            s += f":{tag}"
        return s

    def to_catalog_line(self) -> str:
        """Re-emit the record in the catalog's own column layout (0-based start)."""
        return "\t".join(
            [
                str(CATALOG_TRACK_BIN),
                self.loc.contig,
                str(self.loc.start - 1),
                str(self.loc.stop),
                self.rs_id,
                "0",
                self.strand,
                self.ref_bases,
                self.ref_bases,
                self.observed,
                self.mol_type,
                self.var_type,
                self.validation_status,
                f"{self.av_het:f}",
                f"{self.av_het_se:f}",
                self.func,
                self.loc_type,
                str(self.weight),
            ]
        )

    def __str__(self) -> str:
        return self.to_tsv()
