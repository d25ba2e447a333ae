"""
Coordinate Kernel: The source of truth for genomic coordinate systems.

Handles conversion between:
- VCF / HGVS (1-based, fully-closed [start, end])
- Left-open (start, end], numerically a 0-based start
- BED-like right-open and fully-open intervals

and builds GenomicVariant objects from VCF-style fields:
- Literal alleles: end is derived from POS + len(REF) - 1.
- Symbolic alleles (<DEL>, <INV>, breakends): end comes from INFO/END,
  type from the allele tag or INFO/SVTYPE.
"""

from hgvsg.models.core import (
    Contig,
    CoordinateSystem,
    GenomicVariant,
    VariantType,
    is_symbolic_allele,
)


class CoordinateKernel:
    """
    Stateless utility for coordinate transformations and normalization.
    """

    @staticmethod
    def convert_start(pos: int, source: CoordinateSystem, target: CoordinateSystem) -> int:
        """
        Express a start position from ``source`` in ``target``.

        Example: 1-based start 100 is 99 under LEFT_OPEN.
        """
        return pos + source.start_delta(target)

    @staticmethod
    def convert_end(pos: int, source: CoordinateSystem, target: CoordinateSystem) -> int:
        """Express an end position from ``source`` in ``target``."""
        return pos + source.end_delta(target)

    @staticmethod
    def vcf_to_variant(
        contig: Contig,
        pos: int,
        ref: str,
        alt: str,
        end: int | None = None,
        svtype: str | None = None,
        svlen: int | None = None,
        original_id: str | None = None,
    ) -> GenomicVariant:
        """
        Convert VCF fields (1-based POS) to a GenomicVariant.

        Args:
            contig: Contig the record is on
            pos: 1-based position from VCF
            ref: Reference allele
            alt: Alternate allele (literal or symbolic)
            end: INFO/END, required for symbolic alleles
            svtype: INFO/SVTYPE, used when the symbolic tag is not specific
            svlen: INFO/SVLEN
            original_id: Optional VCF ID

        Returns:
            GenomicVariant in the fully-closed coordinate system
        """
        if is_symbolic_allele(alt):
            vtype = VariantType.parse_symbolic(alt)
            if vtype == VariantType.SYMBOLIC and svtype:
                vtype = VariantType.parse_symbolic(f"<{svtype}>")
            # Symbolic records without END cover only the padding base.
            if end is None:
                end = pos
        else:
            vtype = VariantType.parse(ref, alt)
            # Literal END is implied by REF; INFO/END is ignored for these.
            end = None
            svlen = None

        return GenomicVariant(
            contig=contig,
            start=pos,
            end=end,
            ref=ref,
            alt=alt,
            variant_type=vtype,
            coordinate_system=CoordinateSystem.FULLY_CLOSED,
            id=original_id,
            svlen=svlen,
        )

    @staticmethod
    def normalize_chromosome(chrom: str) -> str:
        """
        Normalize chromosome name (remove 'chr' prefix, M -> MT).
        """
        if chrom.lower().startswith("chr"):
            chrom = chrom[3:]
        if chrom.upper() in ("M", "MT"):
            return "MT"
        if chrom.upper() in ("X", "Y"):
            return chrom.upper()
        return chrom
