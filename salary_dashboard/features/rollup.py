"""
Module: rollup

Purpose: Categorical grouping and reduction over employment records.

Pure functions for grouping records by one or two categorical keys and
reducing each group to a mean salary or a count. Keys come out in
first-encountered order and only keys with at least one record appear, so
reducers never see an empty group.
"""

from collections import defaultdict
from typing import Callable, Hashable, Iterable, Sequence, TypeVar

import numpy as np

from salary_dashboard.data.schemas import AggregateBucket, CategoryMean, EmploymentRecord
from salary_dashboard.features.job_groups import classify_job_title

K = TypeVar("K", bound=Hashable)
K2 = TypeVar("K2", bound=Hashable)

KeyFunc = Callable[[EmploymentRecord], K]
Reducer = Callable[[Sequence[EmploymentRecord]], float | int]


# =============================================================================
# KEY EXTRACTORS
# =============================================================================


def by_experience_level(record: EmploymentRecord) -> str:
    return record.experience_level.value


def by_company_size(record: EmploymentRecord) -> str:
    return record.company_size


def by_job_group(record: EmploymentRecord) -> str:
    return classify_job_title(record.job_title)


# =============================================================================
# REDUCERS
# =============================================================================


def mean_salary(group: Sequence[EmploymentRecord]) -> float:
    """Arithmetic mean of salary_in_usd over a non-empty group."""
    return float(np.mean([r.salary_in_usd for r in group]))


def count(group: Sequence[EmploymentRecord]) -> int:
    return len(group)


# =============================================================================
# ROLLUPS
# =============================================================================


def group_records(
    records: Iterable[EmploymentRecord],
    key: KeyFunc,
) -> dict[K, list[EmploymentRecord]]:
    """Partition records by key, preserving first-encountered key order."""
    groups: dict[K, list[EmploymentRecord]] = {}
    for record in records:
        groups.setdefault(key(record), []).append(record)
    return groups


def rollup(
    records: Iterable[EmploymentRecord],
    key: KeyFunc,
    reducer: Reducer,
) -> dict[K, float]:
    """
    Group records by one key and reduce each group.

    Args:
        records: Records to aggregate
        key: Key extractor, e.g. by_experience_level
        reducer: mean_salary or count (or any callable over a group)

    Returns:
        Mapping from key to reduced value, in first-encountered key order
    """
    return {k: reducer(group) for k, group in group_records(records, key).items()}


def rollup_buckets(
    records: Iterable[EmploymentRecord],
    key: KeyFunc,
    reducer: Reducer,
) -> list[AggregateBucket]:
    """Like rollup, but keeps each bucket's record count alongside the value."""
    return [
        AggregateBucket(key=k, value=reducer(group), count=len(group))
        for k, group in group_records(records, key).items()
    ]


def rollup_pairs(
    records: Iterable[EmploymentRecord],
    key1: KeyFunc,
    key2: Callable[[EmploymentRecord], K2],
) -> dict[K, dict[K2, int]]:
    """
    Count records by an ordered pair of keys.

    Returns:
        Mapping from first key to a mapping from second key to count. Both
        levels keep first-encountered order; empty cells are absent.
    """
    counts: dict[K, dict[K2, int]] = defaultdict(dict)
    for record in records:
        inner = counts[key1(record)]
        k2 = key2(record)
        inner[k2] = inner.get(k2, 0) + 1
    return dict(counts)


# =============================================================================
# CHART DATA
# =============================================================================


def _category_means(
    records: Iterable[EmploymentRecord],
    key: KeyFunc,
) -> list[CategoryMean]:
    return [
        CategoryMean(category=str(b.key), mean_value=b.value, count=b.count)
        for b in rollup_buckets(records, key, mean_salary)
    ]


def salary_by_experience(records: Iterable[EmploymentRecord]) -> list[CategoryMean]:
    """Bar chart data: mean salary per experience level, ascending by mean."""
    return sorted(_category_means(records, by_experience_level), key=lambda c: c.mean_value)


def salary_by_company_size(records: Iterable[EmploymentRecord]) -> list[CategoryMean]:
    """Pie chart data: mean salary per company size, in rollup order."""
    return _category_means(records, by_company_size)


def with_percentages(rows: Sequence[CategoryMean]) -> list[tuple[CategoryMean, float]]:
    """Pair each row with its percentage of the summed means."""
    total = sum(r.mean_value for r in rows)
    return [(r, r.percentage_of(total)) for r in rows]
