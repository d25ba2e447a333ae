"""Tests for the coordinate kernel."""

import pytest

from hgvsg.core.kernel import CoordinateKernel
from hgvsg.models.core import Contig, CoordinateSystem, VariantType

CHR1 = Contig(name="1", accession="NC_000001.10")


def test_convert_start_to_left_open():
    assert (
        CoordinateKernel.convert_start(100, CoordinateSystem.FULLY_CLOSED, CoordinateSystem.LEFT_OPEN)
        == 99
    )


def test_convert_end_to_right_open():
    assert (
        CoordinateKernel.convert_end(100, CoordinateSystem.FULLY_CLOSED, CoordinateSystem.RIGHT_OPEN)
        == 101
    )


def test_round_trip_start():
    start = CoordinateKernel.convert_start(
        12345, CoordinateSystem.FULLY_CLOSED, CoordinateSystem.FULLY_OPEN
    )
    assert (
        CoordinateKernel.convert_start(start, CoordinateSystem.FULLY_OPEN, CoordinateSystem.FULLY_CLOSED)
        == 12345
    )


class TestVcfToVariant:
    def test_literal_deletion(self):
        v = CoordinateKernel.vcf_to_variant(CHR1, pos=100, ref="ATG", alt="A", original_id="rs1")
        assert v.start == 100
        assert v.end == 102
        assert v.variant_type == VariantType.DEL
        assert v.coordinate_system == CoordinateSystem.FULLY_CLOSED
        assert v.id == "rs1"

    def test_literal_ignores_info_end_and_svlen(self):
        v = CoordinateKernel.vcf_to_variant(CHR1, pos=100, ref="A", alt="C", end=5000, svlen=10)
        assert v.end == 100
        assert v.svlen is None

    def test_symbolic_uses_end_and_svlen(self):
        v = CoordinateKernel.vcf_to_variant(
            CHR1, pos=500, ref="N", alt="<DEL>", end=1500, svtype="DEL", svlen=-1000
        )
        assert v.is_symbolic
        assert v.end == 1500
        assert v.change_length == -1000
        assert v.variant_type == VariantType.DEL

    def test_generic_symbolic_allele_takes_svtype(self):
        v = CoordinateKernel.vcf_to_variant(
            CHR1, pos=500, ref="N", alt="<CN0>", end=900, svtype="DEL"
        )
        assert v.variant_type == VariantType.DEL

    def test_symbolic_without_end_covers_padding_base(self):
        v = CoordinateKernel.vcf_to_variant(CHR1, pos=500, ref="N", alt="<INS>")
        assert v.end == 500


@pytest.mark.parametrize(
    "chrom,expected",
    [
        ("chr17", "17"),
        ("17", "17"),
        ("CHR1", "1"),
        ("chrM", "MT"),
        ("M", "MT"),
        ("chrx", "X"),
        ("GL000220.1", "GL000220.1"),
    ],
)
def test_normalize_chromosome(chrom, expected):
    assert CoordinateKernel.normalize_chromosome(chrom) == expected
