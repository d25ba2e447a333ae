"""Parallel processing with joblib."""

import logging
import os
from collections.abc import Callable
from typing import Any

from joblib import Parallel, delayed
from rich.progress import BarColumn, Progress, SpinnerColumn, TaskProgressColumn, TextColumn

logger = logging.getLogger(__name__)

__all__ = ["BatchProcessor", "ParallelProcessor"]


class ParallelProcessor:
    """Thin wrapper around joblib with an optional rich progress bar."""

    def __init__(self, n_jobs: int = -1, backend: str = "threading"):
        """
        Initialize parallel processor.

        Args:
            n_jobs: Number of parallel jobs (-1 for all CPUs)
            backend: joblib backend ('threading', 'loky', 'multiprocessing')
        """
        self.n_jobs = n_jobs if n_jobs > 0 else (os.cpu_count() or 1)
        self.backend = backend

    def map(
        self,
        func: Callable,
        items: list[Any],
        description: str = "Processing",
        show_progress: bool = True,
    ) -> list[Any]:
        """
        Map function over items in parallel, preserving input order.

        Args:
            func: Function to apply
            items: Items to process
            description: Description for progress bar
            show_progress: Whether to show progress bar

        Returns:
            List of results
        """
        if not show_progress:
            return Parallel(n_jobs=self.n_jobs, backend=self.backend)(
                delayed(func)(item) for item in items
            )

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
        ) as progress:
            task = progress.add_task(f"[cyan]{description}...", total=len(items))

            results = []
            with Parallel(n_jobs=self.n_jobs, backend=self.backend) as parallel:
                for result in parallel(delayed(func)(item) for item in items):
                    results.append(result)
                    progress.update(task, advance=1)

            return results


class BatchProcessor:
    """Process items in batches to amortise per-task overhead."""

    def __init__(self, batch_size: int = 1000, n_jobs: int = -1, backend: str = "threading"):
        self.batch_size = batch_size
        self.processor = ParallelProcessor(n_jobs=n_jobs, backend=backend)

    def process_batches(
        self,
        func: Callable[[list[Any]], list[Any]],
        items: list[Any],
        description: str = "Processing batches",
        show_progress: bool = True,
    ) -> list[Any]:
        """
        Apply ``func`` to consecutive batches of items.

        Returns:
            Flattened list of results, in input order
        """
        batches = [items[i : i + self.batch_size] for i in range(0, len(items), self.batch_size)]

        logger.debug("Processing %d items in %d batches", len(items), len(batches))

        results: list[Any] = []
        for batch_result in self.processor.map(func, batches, description, show_progress):
            results.extend(batch_result)
        return results
