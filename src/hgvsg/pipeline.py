"""
Pipeline Orchestrator: Manages the execution flow of hgvsg.

This module handles:
1. Reading variants from a VCF.
2. Classifying and describing each variant in HGVS g. notation.
3. Writing results to a TSV file.
"""

import logging
from dataclasses import dataclass

from .assembly import GenomeAssembly
from .hgvs import MutationCategory, describe
from .io.input import VcfReader
from .io.output import HgvsWriter
from .models.core import GenomicVariant, HgvsConfig
from .parallel import BatchProcessor
from .utils.logging import console, timed

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """Counts reported at the end of a run."""

    variants: int = 0
    written: int = 0
    skipped: int = 0
    failed: int = 0


def describe_batch(
    variants: list[GenomicVariant],
) -> list[tuple[MutationCategory, str] | None]:
    """
    Classify and describe a batch of variants.

    Variants whose alleles cannot be described (precondition failures) yield
    None and are logged, so one bad record does not abort a whole file.
    """
    results: list[tuple[MutationCategory, str] | None] = []
    for variant in variants:
        try:
            results.append(describe(variant))
        except ValueError as e:
            logger.warning(
                "Cannot describe %s:%d %s>%s: %s",
                variant.contig.name,
                variant.start,
                variant.ref,
                variant.alt,
                e,
            )
            results.append(None)
    return results


class Pipeline:
    def __init__(self, config: HgvsConfig):
        self.config = config
        self.assembly = GenomeAssembly.parse(config.assembly)

    def run(self) -> PipelineResult:
        """Execute the pipeline."""
        console.print("[bold blue]Starting hgvsg pipeline[/bold blue]")
        console.print(f"Assembly: {self.assembly.value}")

        result = PipelineResult()

        # 1. Load Variants
        with console.status("[bold green]Loading variants...[/bold green]"):
            with timed("Reading variants", logger):
                reader = VcfReader(self.config.variant_file, assembly=self.assembly)
                try:
                    variants = list(reader)
                finally:
                    reader.close()

        result.variants = len(variants)
        result.skipped = reader.skipped
        console.print(f"Loaded [bold]{len(variants)}[/bold] variants.")

        if not variants:
            console.print("[bold red]No variants found. Exiting.[/bold red]")
            return result

        # 2. Describe
        with timed("Formatting HGVS", logger):
            processor = BatchProcessor(n_jobs=self.config.threads)
            described = processor.process_batches(
                describe_batch,
                variants,
                description="Formatting HGVS",
                show_progress=self.config.threads > 1,
            )

        # 3. Write Output
        with HgvsWriter(self.config.output_file) as writer:
            for variant, entry in zip(variants, described):
                if entry is None:
                    result.failed += 1
                    continue
                category, hgvs = entry
                writer.write(variant, category, hgvs)
            result.written = writer.rows_written

        if result.failed:
            console.print(
                f"[yellow]{result.failed} variants could not be described in HGVS.[/yellow]"
            )
        console.print(
            f"[bold green]Wrote {result.written} HGVS descriptions to "
            f"{self.config.output_file}[/bold green]"
        )
        return result
