"""
Genome assemblies and their RefSeq chromosome accessions.

HGVS genomic descriptions are anchored to a versioned reference sequence
(e.g. ``NC_000017.10`` is chromosome 17 in GRCh37), so the same VCF contig
name maps to a different accession depending on the assembly.
"""

import logging
from enum import Enum

from .core.kernel import CoordinateKernel
from .models.core import Contig

logger = logging.getLogger(__name__)

__all__ = ["GenomeAssembly"]

_GRCH37_ACCESSIONS: dict[str, str] = {
    "1": "NC_000001.10", "2": "NC_000002.11", "3": "NC_000003.11",
    "4": "NC_000004.11", "5": "NC_000005.9", "6": "NC_000006.11",
    "7": "NC_000007.13", "8": "NC_000008.10", "9": "NC_000009.11",
    "10": "NC_000010.10", "11": "NC_000011.9", "12": "NC_000012.11",
    "13": "NC_000013.10", "14": "NC_000014.8", "15": "NC_000015.9",
    "16": "NC_000016.9", "17": "NC_000017.10", "18": "NC_000018.9",
    "19": "NC_000019.9", "20": "NC_000020.10", "21": "NC_000021.8",
    "22": "NC_000022.10", "X": "NC_000023.10", "Y": "NC_000024.9",
    "MT": "NC_012920.1",
}

_GRCH38_ACCESSIONS: dict[str, str] = {
    "1": "NC_000001.11", "2": "NC_000002.12", "3": "NC_000003.12",
    "4": "NC_000004.12", "5": "NC_000005.10", "6": "NC_000006.12",
    "7": "NC_000007.14", "8": "NC_000008.11", "9": "NC_000009.12",
    "10": "NC_000010.11", "11": "NC_000011.10", "12": "NC_000012.12",
    "13": "NC_000013.11", "14": "NC_000014.9", "15": "NC_000015.10",
    "16": "NC_000016.10", "17": "NC_000017.11", "18": "NC_000018.10",
    "19": "NC_000019.10", "20": "NC_000020.11", "21": "NC_000021.9",
    "22": "NC_000022.11", "X": "NC_000023.11", "Y": "NC_000024.10",
    "MT": "NC_012920.1",
}

_ALIASES: dict[str, str] = {
    "hg19": "hg19",
    "grch37": "hg19",
    "b37": "hg19",
    "hg38": "hg38",
    "grch38": "hg38",
    "b38": "hg38",
}

# Contig names already reported as unknown, so each is warned about once.
_warned_contigs: set[str] = set()


class GenomeAssembly(str, Enum):
    """Supported human reference assemblies."""

    HG19 = "hg19"
    HG38 = "hg38"

    @classmethod
    def parse(cls, value: str) -> "GenomeAssembly":
        """
        Parse an assembly name.

        Accepts hg19/GRCh37/b37 and hg38/GRCh38/b38, case-insensitively.

        Raises:
            ValueError: If the name is not a supported assembly.
        """
        key = _ALIASES.get(value.strip().lower())
        if key is None:
            raise ValueError(
                f"Unsupported genome assembly: {value!r}. Use one of hg19, GRCh37, hg38, GRCh38"
            )
        return cls(key)

    @property
    def accessions(self) -> dict[str, str]:
        return _GRCH37_ACCESSIONS if self is GenomeAssembly.HG19 else _GRCH38_ACCESSIONS

    def contig(self, name: str, length: int | None = None) -> Contig:
        """
        Build the Contig for a VCF/BAM chromosome name.

        "chr17", "17" and "CHR17" all resolve to the same accession; "chrM"
        resolves to MT. Names outside the primary assembly (alt contigs,
        decoys) get ``Contig.unknown`` and the name is used as accession.
        """
        key = CoordinateKernel.normalize_chromosome(name)
        accession = self.accessions.get(key)
        if accession is None:
            if name not in _warned_contigs:
                _warned_contigs.add(name)
                logger.warning(
                    "No %s RefSeq accession for contig %s; using the contig name", self.value, name
                )
            return Contig.unknown(name, length=length)
        ucsc_name = "chrM" if key == "MT" else f"chr{key}"
        return Contig(name=name, accession=accession, length=length, ucsc_name=ucsc_name)
