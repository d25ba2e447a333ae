"""Pytest configuration and fixtures."""

import sys
import tempfile
from collections.abc import Callable, Generator
from pathlib import Path

import pytest

# Add src directory to path so tests use local code, not installed package
project_root = Path(__file__).parent.parent
src_dir = project_root / "src"
if str(src_dir) not in sys.path:
    sys.path.insert(0, str(src_dir))

from hgvsg.models.core import Contig, GenomicVariant  # noqa: E402

VCF_HEADER = """##fileformat=VCFv4.2
##contig=<ID=1,length=249250621>
##contig=<ID=2,length=243199373>
##contig=<ID=3,length=198022430>
##contig=<ID=17,length=81195210>
##contig=<ID=GL000220.1,length=161802>
##INFO=<ID=END,Number=1,Type=Integer,Description="End position of the variant">
##INFO=<ID=SVTYPE,Number=1,Type=String,Description="Type of structural variant">
##INFO=<ID=SVLEN,Number=1,Type=Integer,Description="Difference in length between REF and ALT alleles">
##ALT=<ID=DEL,Description="Deletion">
##ALT=<ID=INV,Description="Inversion">
##ALT=<ID=DUP:TANDEM,Description="Tandem duplication">
#CHROM\tPOS\tID\tREF\tALT\tQUAL\tFILTER\tINFO
"""

# (CHROM, POS, ID, REF, ALT, INFO) and the expected hg19 HGVS for each ALT
VCF_RECORDS = [
    ("17", 45221273, "rs62054816", "A", "C", ".", ["NC_000017.10:g.45221273A>C"]),
    ("1", 100, ".", "ATG", "A", ".", ["NC_000001.10:g.101_102delTG"]),
    ("1", 200, ".", "AT", "A", ".", ["NC_000001.10:g.201delT"]),
    ("1", 300, ".", "C", "CAA", ".", ["NC_000001.10:g.300_301insAA"]),
    ("1", 400, ".", "A", "AAA", ".", ["NC_000001.10:g.400_401dupAA"]),
    ("1", 500, ".", "AT", "GCC", ".", ["NC_000001.10:g.500delinsGCC"]),
    ("1", 600, ".", "AT", "GC", ".", ["NC_000001.10:g.600AT>GC"]),
    ("1", 700, ".", "A", "C,G", ".", ["NC_000001.10:g.700A>C", "NC_000001.10:g.700A>G"]),
    ("1", 800, ".", "A", ".", ".", []),
    (
        "2",
        500,
        "sv1",
        "N",
        "<DEL>",
        "END=1500;SVTYPE=DEL;SVLEN=-1000",
        ["NC_000002.11:g.500_1500del"],
    ),
    (
        "3",
        38626065,
        "sv2",
        "N",
        "<INV>",
        "END=38626082;SVTYPE=INV",
        ["NC_000003.11:g.38626065_38626082inv"],
    ),
    ("3", 1000, "sv3", "N", "<DUP:TANDEM>", "END=1100;SVTYPE=DUP", ["NC_000003.11:g.1000_1100dup"]),
    ("GL000220.1", 900, ".", "A", "T", ".", ["GL000220.1:g.900A>T"]),
]


def expected_hgvs() -> list[str]:
    return [hgvs for record in VCF_RECORDS for hgvs in record[-1]]


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_vcf(temp_dir: Path) -> Path:
    """Write a small VCF covering every HGVS category."""
    vcf_file = temp_dir / "variants.vcf"

    with open(vcf_file, "w") as f:
        f.write(VCF_HEADER)
        for chrom, pos, vid, ref, alt, info, _ in VCF_RECORDS:
            f.write(f"{chrom}\t{pos}\t{vid}\t{ref}\t{alt}\t.\tPASS\t{info}\n")

    return vcf_file


@pytest.fixture
def chr17() -> Contig:
    return Contig(name="17", accession="NC_000017.10")


@pytest.fixture
def make_variant(chr17: Contig) -> Callable[..., GenomicVariant]:
    """Factory for variants on chromosome 17 (GRCh37)."""

    def _make(start: int, ref: str, alt: str, **kwargs) -> GenomicVariant:
        kwargs.setdefault("contig", chr17)
        return GenomicVariant(start=start, ref=ref, alt=alt, **kwargs)

    return _make
