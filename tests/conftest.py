"""Pytest configuration and fixtures for dbsnp-rod tests."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))

from fixtures.dbsnp_generator import (  # noqa: E402
    make_dbsnp_file,
    make_dbsnp_file_with_bad_lines,
    make_fai_file,
)

from dbsnp_rod.genome_loc import ContigLocator  # noqa: E402


@pytest.fixture
def locator() -> ContigLocator:
    """Permissive locator with no contig dictionary."""
    return ContigLocator()


@pytest.fixture
def hg38_locator() -> ContigLocator:
    """Locator restricted to chr1 and chr2."""
    return ContigLocator({"chr1": 248956422, "chr2": 242193529})


@pytest.fixture
def dbsnp_file(tmp_path: Path) -> Path:
    return make_dbsnp_file(tmp_path / "snp_sample.txt")


@pytest.fixture
def dbsnp_gz_file(tmp_path: Path) -> Path:
    return make_dbsnp_file(tmp_path / "snp_sample.txt.gz")


@pytest.fixture
def dbsnp_file_with_bad_lines(tmp_path: Path) -> Path:
    return make_dbsnp_file_with_bad_lines(tmp_path / "snp_bad.txt")


@pytest.fixture
def fai_file(tmp_path: Path) -> Path:
    return make_fai_file(tmp_path / "ref.fa.fai")
