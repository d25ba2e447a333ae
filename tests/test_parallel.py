"""Tests for parallel processing helpers."""

from hgvsg.parallel import BatchProcessor, ParallelProcessor


def _square(x: int) -> int:
    return x * x


def _double_batch(batch: list[int]) -> list[int]:
    return [x * 2 for x in batch]


def test_map_preserves_order():
    processor = ParallelProcessor(n_jobs=4)
    assert processor.map(_square, list(range(20)), show_progress=False) == [
        x * x for x in range(20)
    ]


def test_map_with_progress():
    processor = ParallelProcessor(n_jobs=2)
    assert processor.map(_square, [1, 2, 3], description="Squaring") == [1, 4, 9]


def test_all_cpus_when_n_jobs_negative():
    assert ParallelProcessor(n_jobs=-1).n_jobs >= 1


def test_batches_are_flattened_in_order():
    processor = BatchProcessor(batch_size=3, n_jobs=2)
    items = list(range(10))
    assert processor.process_batches(_double_batch, items, show_progress=False) == [
        x * 2 for x in items
    ]
