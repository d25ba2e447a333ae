"""
Input Adapters: Reading variants from VCF.

Each ALT allele of a record becomes one GenomicVariant placed on a Contig
carrying the RefSeq accession of the selected genome assembly.
"""

import logging
from collections.abc import Iterator
from pathlib import Path

import pysam
from pydantic import ValidationError

from ..assembly import GenomeAssembly
from ..core.kernel import CoordinateKernel
from ..models.core import Contig, GenomicVariant

logger = logging.getLogger(__name__)


class VariantReader:
    """Abstract base class for variant readers."""

    def __iter__(self) -> Iterator[GenomicVariant]:
        raise NotImplementedError

    def close(self) -> None:
        pass


class VcfReader(VariantReader):
    """Reads variants from a VCF/BCF file (plain or bgzipped)."""

    def __init__(self, path: Path, assembly: GenomeAssembly = GenomeAssembly.HG19):
        self.path = path
        self.assembly = assembly
        if path.suffix.lower() not in (".vcf", ".gz", ".bcf"):  # .vcf.gz handled by pysam
            raise ValueError(f"Unsupported variant file format: {path.suffix}")
        self._vcf = pysam.VariantFile(str(path))
        self._contigs: dict[str, Contig] = {}
        self.skipped = 0

    def _contig(self, name: str) -> Contig:
        contig = self._contigs.get(name)
        if contig is None:
            header_contig = self._vcf.header.contigs.get(name)
            length = header_contig.length if header_contig is not None else None
            contig = self.assembly.contig(name, length=length)
            self._contigs[name] = contig
        return contig

    def __iter__(self) -> Iterator[GenomicVariant]:
        for record in self._vcf:
            if not record.alts:
                logger.warning("Skipping %s:%d with no ALT allele", record.chrom, record.pos)
                self.skipped += 1
                continue

            info = record.info
            svtype = info.get("SVTYPE") if "SVTYPE" in info else None
            svlen = info.get("SVLEN") if "SVLEN" in info else None
            # SVLEN is Number=A in VCF 4.3 but a scalar in older files.
            if isinstance(svlen, tuple):
                svlen = svlen[0] if svlen else None

            for alt in record.alts:
                try:
                    # pysam: record.pos is the 1-based VCF POS, record.stop is INFO/END
                    # for symbolic alleles.
                    yield CoordinateKernel.vcf_to_variant(
                        contig=self._contig(record.chrom),
                        pos=record.pos,
                        ref=record.ref,
                        alt=alt,
                        end=record.stop,
                        svtype=svtype,
                        svlen=svlen,
                        original_id=record.id,
                    )
                except ValidationError as e:
                    logger.warning(
                        "Skipping invalid variant %s:%d %s>%s: %s",
                        record.chrom,
                        record.pos,
                        record.ref,
                        alt,
                        e.errors()[0]["msg"],
                    )
                    self.skipped += 1

    def close(self) -> None:
        self._vcf.close()
