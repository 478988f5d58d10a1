"""
Reshaping of the salary matrix for plotting.

The matrix is wide (one column per year); seaborn line charts want one
row per (occupation, year) with the cluster labels alongside.
"""

import pandas as pd

from salary_clustering.data_loading import parse_year


def merge_cluster_assignments(*assignments):
    """
    Join several labelings into one table indexed by occupation.

    Each labeling stays its own column; nothing is reconciled between them.
    """
    if not assignments:
        raise ValueError("At least one cluster assignment is required")

    reference = set(assignments[0].index)
    for labels in assignments[1:]:
        if set(labels.index) != reference:
            raise ValueError(
                f"Assignment '{labels.name}' covers different occupations than '{assignments[0].name}'"
            )

    merged = pd.concat(assignments, axis=1)
    merged.index.name = 'occupation'
    return merged


def to_long_format(matrix, assignments=None):
    """
    Convert the wide occupation x year matrix into long form.

    Output columns: occupation, year, salary, then one column per labeling.
    Row count is always n_occupations * n_years.
    """
    wide = matrix.copy()
    wide.index.name = 'occupation'
    long_df = wide.reset_index().melt(
        id_vars='occupation',
        var_name='year',
        value_name='salary'
    )
    long_df['year'] = long_df['year'].map(parse_year)

    if assignments is not None:
        if isinstance(assignments, pd.Series):
            assignments = assignments.to_frame()
        labels = assignments.copy()
        labels.index.name = 'occupation'
        long_df = long_df.merge(
            labels.reset_index(),
            on='occupation',
            how='left',
            validate='many_to_one'
        )

    return long_df.sort_values(['occupation', 'year']).reset_index(drop=True)
