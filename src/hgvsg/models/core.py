"""
Core data models for hgvsg.
"""

import re
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Breakend alleles, e.g. G]17:198982], ]13:123456]T, .A or G.
_BREAKEND = re.compile(r"[\[\]]|^\.[A-Za-z]+$|^[A-Za-z]+\.$")


class CoordinateSystem(str, Enum):
    """
    Interval conventions a variant position can be expressed in.

    FULLY_CLOSED is the 1-based [start, end] convention used by VCF and HGVS.
    LEFT_OPEN is (start, end], numerically the 0-based start with a 1-based end.
    """

    FULLY_CLOSED = "FULLY_CLOSED"
    LEFT_OPEN = "LEFT_OPEN"
    RIGHT_OPEN = "RIGHT_OPEN"
    FULLY_OPEN = "FULLY_OPEN"

    @property
    def is_start_open(self) -> bool:
        return self in (CoordinateSystem.LEFT_OPEN, CoordinateSystem.FULLY_OPEN)

    @property
    def is_end_open(self) -> bool:
        return self in (CoordinateSystem.RIGHT_OPEN, CoordinateSystem.FULLY_OPEN)

    def start_delta(self, target: "CoordinateSystem") -> int:
        """Offset to add to a start position to express it in ``target``."""
        return int(self.is_start_open) - int(target.is_start_open)

    def end_delta(self, target: "CoordinateSystem") -> int:
        """Offset to add to an end position to express it in ``target``."""
        return int(target.is_end_open) - int(self.is_end_open)


class VariantType(str, Enum):
    """Type of genomic variant, including structural subtypes."""

    SNV = "SNV"
    MNV = "MNV"
    DEL = "DEL"
    DEL_ME = "DEL_ME"
    DEL_ME_ALU = "DEL_ME_ALU"
    DEL_ME_LINE1 = "DEL_ME_LINE1"
    DEL_ME_SVA = "DEL_ME_SVA"
    DEL_ME_HERV = "DEL_ME_HERV"
    INS = "INS"
    INS_ME = "INS_ME"
    INS_ME_ALU = "INS_ME_ALU"
    INS_ME_LINE1 = "INS_ME_LINE1"
    INS_ME_SVA = "INS_ME_SVA"
    INS_ME_HERV = "INS_ME_HERV"
    DUP = "DUP"
    DUP_TANDEM = "DUP_TANDEM"
    DUP_INV_DUP = "DUP_INV_DUP"
    DUP_INV_LEFT = "DUP_INV_LEFT"
    DUP_INV_RIGHT = "DUP_INV_RIGHT"
    INV = "INV"
    CNV = "CNV"
    CNV_GAIN = "CNV_GAIN"
    CNV_LOSS = "CNV_LOSS"
    CNV_LOH = "CNV_LOH"
    CNV_COMPLEX = "CNV_COMPLEX"
    BND = "BND"
    STR = "STR"
    TRA = "TRA"
    SYMBOLIC = "SYMBOLIC"
    UNKNOWN = "UNKNOWN"

    @property
    def base_type(self) -> "VariantType":
        """
        Collapse a subtype to its root type.

        DEL_ME_ALU -> DEL, DUP_TANDEM -> DUP, CNV_GAIN -> CNV. Types without
        subtypes are their own base type.
        """
        root = self.value.split("_", 1)[0]
        return VariantType(root) if root in VariantType.__members__ else self

    @classmethod
    def parse_symbolic(cls, allele: str) -> "VariantType":
        """
        Map a VCF symbolic allele such as ``<DEL:ME:ALU>`` to a VariantType.

        Unrecognised subtypes fall back to the most specific known parent, so
        ``<DUP:TANDEM:X>`` is DUP_TANDEM and ``<FOO>`` is SYMBOLIC.
        """
        if _BREAKEND.search(allele):
            return cls.BND
        tag = allele.strip("<>").upper().replace(":", "_")
        while tag:
            if tag in cls.__members__:
                return cls[tag]
            if "_" not in tag:
                break
            tag = tag.rsplit("_", 1)[0]
        return cls.SYMBOLIC

    @classmethod
    def parse(cls, ref: str, alt: str) -> "VariantType":
        """Infer the type of a ref/alt allele pair."""
        if is_symbolic_allele(alt):
            return cls.parse_symbolic(alt)
        if len(ref) == len(alt):
            return cls.SNV if len(ref) == 1 else cls.MNV
        return cls.DEL if len(ref) > len(alt) else cls.INS


def is_symbolic_allele(allele: str) -> bool:
    """True for ``<...>`` alleles and breakend notation."""
    if len(allele) > 1 and allele.startswith("<") and allele.endswith(">"):
        return True
    return bool(_BREAKEND.search(allele))


class Contig(BaseModel):
    """
    A reference sequence a variant is placed on.

    ``accession`` is the RefSeq accession used as the HGVS reference prefix,
    e.g. NC_000017.10.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    accession: str = Field(min_length=1)
    length: int | None = Field(default=None, ge=0)
    ucsc_name: str | None = None

    @classmethod
    def unknown(cls, name: str, length: int | None = None) -> "Contig":
        """A contig with no known accession; the name stands in for it."""
        return cls(name=name, accession=name, length=length)


class GenomicVariant(BaseModel):
    """
    A variant on a contig, as consumed by the HGVS formatter.

    Positions are held in ``coordinate_system`` (1-based fully-closed unless
    stated otherwise). For literal alleles ``end`` and ``variant_type`` may be
    omitted and are derived from ``start``, ``ref`` and ``alt``. Symbolic
    alleles (``<DEL>``, breakends) must supply ``end``.
    """

    model_config = ConfigDict(frozen=True)

    contig: Contig
    start: int
    end: int
    ref: str
    alt: str
    variant_type: VariantType
    coordinate_system: CoordinateSystem = CoordinateSystem.FULLY_CLOSED
    id: str | None = None
    svlen: int | None = None

    @model_validator(mode="before")
    @classmethod
    def derive_missing_fields(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        ref = data.get("ref", "")
        alt = data.get("alt", "")
        if data.get("variant_type") is None and isinstance(ref, str) and isinstance(alt, str):
            data["variant_type"] = VariantType.parse(ref, alt)
        if (
            data.get("end") is None
            and isinstance(alt, str)
            and isinstance(ref, str)
            and not is_symbolic_allele(alt)
            and isinstance(data.get("start"), int)
        ):
            cs = CoordinateSystem(data.get("coordinate_system", CoordinateSystem.FULLY_CLOSED))
            closed_start = data["start"] + cs.start_delta(CoordinateSystem.FULLY_CLOSED)
            closed_end = closed_start + len(ref) - 1
            data["end"] = closed_end + CoordinateSystem.FULLY_CLOSED.end_delta(cs)
        return data

    @model_validator(mode="after")
    def validate_variant(self) -> "GenomicVariant":
        start = self.start_with_coordinate_system(CoordinateSystem.FULLY_CLOSED)
        end = self.end_with_coordinate_system(CoordinateSystem.FULLY_CLOSED)
        if start < 1:
            raise ValueError(f"Start position ({start}) must be >= 1 in 1-based coordinates")
        if end < start - 1:
            raise ValueError(f"End position ({end}) must be >= start position ({start}) - 1")
        if not self.is_symbolic:
            if not self.ref and not self.alt:
                raise ValueError("REF and ALT alleles cannot both be empty")
            if "*" in self.ref or "*" in self.alt:
                raise ValueError("Spanning deletion allele '*' has no HGVS description")
            if self.variant_type == VariantType.SNV and not (len(self.ref) == len(self.alt) == 1):
                raise ValueError(
                    f"SNV requires single-base REF and ALT, got {self.ref!r}>{self.alt!r}"
                )
        return self

    @property
    def is_symbolic(self) -> bool:
        return is_symbolic_allele(self.alt)

    @property
    def change_length(self) -> int:
        """
        Signed length change of the variant.

        len(alt) - len(ref) for literal alleles. Symbolic alleles report SVLEN,
        or 0 when it was not given.
        """
        if self.is_symbolic:
            return self.svlen or 0
        return len(self.alt) - len(self.ref)

    def start_with_coordinate_system(self, target: CoordinateSystem) -> int:
        return self.start + self.coordinate_system.start_delta(target)

    def end_with_coordinate_system(self, target: CoordinateSystem) -> int:
        return self.end + self.coordinate_system.end_delta(target)


class HgvsConfig(BaseModel):
    """
    Configuration for a hgvsg run.
    """

    variant_file: Path
    output_file: Path
    assembly: str = "hg19"
    threads: int = Field(default=1, ge=1)

    @field_validator("variant_file")
    @classmethod
    def validate_file_exists(cls, v: Path) -> Path:
        if not v.exists():
            raise ValueError(f"File not found: {v}")
        return v

    @field_validator("output_file")
    @classmethod
    def validate_output_file(cls, v: Path) -> Path:
        if v.is_dir():
            raise ValueError(f"Output path must be a file, not a directory: {v}")
        return v

    @field_validator("assembly")
    @classmethod
    def validate_assembly(cls, v: str) -> str:
        from ..assembly import GenomeAssembly

        return GenomeAssembly.parse(v).value
