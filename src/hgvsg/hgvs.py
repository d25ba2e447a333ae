"""
HGVS genomic (g.) notation for GenomicVariant objects.

A variant can fit the pattern of more than one HGVS category. When that
happens the HGVS nomenclature prefers, in order: (1) deletion,
(2) inversion, (3) duplication, (4) conversion, (5) insertion. Conversions
are not detected. Substitutions and deletion-insertions are checked last.

Example:
    to_hgvs_genomic(snv)  # "NC_000017.10:g.45221273A>C"
"""

import logging
from collections.abc import Callable, Iterable
from enum import Enum

from .models.core import CoordinateSystem, GenomicVariant, VariantType

logger = logging.getLogger(__name__)

__all__ = ["MutationCategory", "classify", "describe", "to_hgvs_genomic", "format_variants"]


class MutationCategory(str, Enum):
    """HGVS description type selected for a variant."""

    DELETION = "del"
    INVERSION = "inv"
    DUPLICATION = "dup"
    INSERTION = "ins"
    SUBSTITUTION = "sub"
    DELINS = "delins"


# -- predicates --------------------------------------------------------------


def _is_deletion(variant: GenomicVariant) -> bool:
    # Deletion (del): one or more nucleotides are not present.
    return variant.variant_type.base_type == VariantType.DEL and (
        variant.is_symbolic or variant.ref.startswith(variant.alt)
    )


def _is_inversion(variant: GenomicVariant) -> bool:
    return variant.variant_type.base_type == VariantType.INV


def _alt_is_dup_of_ref(ref: str, alt: str) -> bool:
    if not ref or not alt:
        return False
    return all(base == ref[0] for base in alt)


def _is_duplication(variant: GenomicVariant) -> bool:
    # Duplication (dup): a copy of one or more nucleotides inserted directly 3'
    # of the original copy.
    if variant.is_symbolic:
        return variant.variant_type.base_type == VariantType.DUP
    # Only single-base homopolymer expansions are detectable from literal alleles.
    return len(variant.ref) == 1 and _alt_is_dup_of_ref(variant.ref, variant.alt)


def _is_insertion(variant: GenomicVariant) -> bool:
    return variant.variant_type.base_type == VariantType.INS and (
        variant.is_symbolic or variant.alt.startswith(variant.ref)
    )


def _is_substitution(variant: GenomicVariant) -> bool:
    return variant.variant_type == VariantType.SNV


def _is_delins(variant: GenomicVariant) -> bool:
    return (
        variant.variant_type != VariantType.SNV
        and len(variant.ref) != len(variant.alt)
        and not variant.alt.startswith(variant.ref)
    )


_PREDICATES: list[tuple[MutationCategory, Callable[[GenomicVariant], bool]]] = [
    (MutationCategory.DELETION, _is_deletion),
    (MutationCategory.INVERSION, _is_inversion),
    (MutationCategory.DUPLICATION, _is_duplication),
    (MutationCategory.INSERTION, _is_insertion),
    (MutationCategory.SUBSTITUTION, _is_substitution),
    (MutationCategory.DELINS, _is_delins),
]


def classify(variant: GenomicVariant) -> MutationCategory:
    """
    Select the HGVS category for a variant.

    The first matching category wins. Equal-length non-SNV replacements
    (e.g. MNVs) match nothing and are described as substitutions of the
    raw REF/ALT pair.
    """
    for category, predicate in _PREDICATES:
        if predicate(variant):
            return category
    logger.debug(
        "No HGVS category for %s:%d %s>%s (%s); describing as substitution",
        variant.contig.name,
        variant.start,
        variant.ref,
        variant.alt,
        variant.variant_type.value,
    )
    return MutationCategory.SUBSTITUTION


# -- renderers ---------------------------------------------------------------


def _prefix(variant: GenomicVariant) -> str:
    return f"{variant.contig.accession}:g."


def _start(variant: GenomicVariant) -> int:
    return variant.start_with_coordinate_system(CoordinateSystem.FULLY_CLOSED)


def _end(variant: GenomicVariant) -> int:
    return variant.end_with_coordinate_system(CoordinateSystem.FULLY_CLOSED)


def _trailing(longer: str, shorter: str, what: str) -> str:
    """Bases of ``longer`` after the shared ``shorter`` prefix."""
    seq = longer[len(shorter):]
    if not seq:
        raise ValueError(f"No {what} sequence: {shorter!r} leaves nothing of {longer!r}")
    return seq


def _substitution(variant: GenomicVariant) -> str:
    return f"{_prefix(variant)}{_start(variant)}{variant.ref}>{variant.alt}"


def _deletion(variant: GenomicVariant) -> str:
    # Format: prefix + position(s) deleted + "del", e.g. g.123_127delTCA
    if variant.is_symbolic:
        return f"{_prefix(variant)}{_start(variant)}_{_end(variant)}del"

    deleted = _trailing(variant.ref, variant.alt, "deleted")
    length = abs(variant.change_length)
    if length == 1:
        # POS is the retained anchor base; the deleted base follows it.
        return f"{_prefix(variant)}{_start(variant) + 1}del{deleted}"
    # The left-open start plus the deleted length places the span on the
    # deleted bases rather than on the anchor.
    start = variant.start_with_coordinate_system(CoordinateSystem.LEFT_OPEN) + length
    end = start + length - 1
    return f"{_prefix(variant)}{start}_{end}del{deleted}"


def _duplication(variant: GenomicVariant) -> str:
    if variant.is_symbolic:
        return f"{_prefix(variant)}{_start(variant)}_{_end(variant)}dup"

    duplicated = _trailing(variant.alt, variant.ref, "duplicated")
    start = _start(variant)
    length = abs(variant.change_length)
    if length == 1:
        return f"{_prefix(variant)}{start}dup{duplicated}"
    end = start + length - 1
    return f"{_prefix(variant)}{start}_{end}dup{duplicated}"


def _insertion(variant: GenomicVariant) -> str:
    start = _start(variant)
    if variant.is_symbolic:
        return f"{_prefix(variant)}{start}_{_end(variant)}ins"
    # Inserted bases sit between two flanking positions.
    inserted = _trailing(variant.alt, variant.ref, "inserted")
    return f"{_prefix(variant)}{start}_{start + 1}ins{inserted}"


def _inversion(variant: GenomicVariant) -> str:
    return f"{_prefix(variant)}{_start(variant)}_{_end(variant)}inv"


def _delins(variant: GenomicVariant) -> str:
    if not variant.alt:
        raise ValueError(f"Deletion-insertion needs inserted bases, got empty ALT for {variant.ref!r}")
    start = _start(variant)
    length = abs(variant.change_length)
    if length == 1:
        return f"{_prefix(variant)}{start}delins{variant.alt}"
    end = start + length
    return f"{_prefix(variant)}{start}_{end}delins{variant.alt}"


_RENDERERS: dict[MutationCategory, Callable[[GenomicVariant], str]] = {
    MutationCategory.DELETION: _deletion,
    MutationCategory.INVERSION: _inversion,
    MutationCategory.DUPLICATION: _duplication,
    MutationCategory.INSERTION: _insertion,
    MutationCategory.SUBSTITUTION: _substitution,
    MutationCategory.DELINS: _delins,
}


def describe(variant: GenomicVariant) -> tuple[MutationCategory, str]:
    """Classify a variant once and render it, returning ``(category, hgvs)``."""
    category = classify(variant)
    return category, _RENDERERS[category](variant)


def to_hgvs_genomic(variant: GenomicVariant) -> str:
    """
    Describe a variant in HGVS genomic notation.

    Args:
        variant: Variant with trimmed, left-aligned alleles.

    Returns:
        HGVS g. string, e.g. ``NC_000003.11:g.38626065_38626082inv``.

    Raises:
        ValueError: If the alleles leave no deleted, duplicated or inserted
            bases for a category that must name them.
    """
    return describe(variant)[1]


def format_variants(variants: Iterable[GenomicVariant], threads: int = 1) -> list[str]:
    """
    Describe many variants, optionally across worker threads.

    Results are in input order.
    """
    variants = list(variants)
    if threads <= 1:
        return [to_hgvs_genomic(v) for v in variants]

    from .parallel import ParallelProcessor

    processor = ParallelProcessor(n_jobs=threads, backend="threading")
    return processor.map(to_hgvs_genomic, variants, description="Formatting HGVS", show_progress=False)
