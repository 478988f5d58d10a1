import pandas as pd
import pytest

from salary_clustering.reshaping import merge_cluster_assignments, to_long_format


def _labels(matrix, name, values):
    return pd.Series(values, index=matrix.index, name=name)


def test_long_format_preserves_rows_and_values(salary_matrix):
    long_df = to_long_format(salary_matrix)

    assert len(long_df) == 22 * 15 == 330
    assert list(long_df.columns) == ['occupation', 'year', 'salary']
    assert long_df['year'].min() == 2001
    assert long_df['year'].max() == 2015

    back = long_df.pivot(index='occupation', columns='year', values='salary')
    back.columns = [str(c) for c in back.columns]
    pd.testing.assert_frame_equal(
        back.loc[salary_matrix.index, salary_matrix.columns],
        salary_matrix,
        check_names=False
    )


def test_long_format_with_assignments(salary_matrix):
    hclust = _labels(salary_matrix, 'hclust', [1] * 11 + [2] * 11)
    kmeans = _labels(salary_matrix, 'kmeans_2', [1, 2] * 11)
    assignments = merge_cluster_assignments(hclust, kmeans)

    long_df = to_long_format(salary_matrix, assignments)

    assert len(long_df) == 330
    assert list(long_df.columns) == ['occupation', 'year', 'salary', 'hclust', 'kmeans_2']
    per_occupation = long_df.groupby('occupation')[['hclust', 'kmeans_2']].nunique()
    assert (per_occupation == 1).all().all()
    first = salary_matrix.index[0]
    assert (long_df.loc[long_df['occupation'] == first, 'hclust'] == 1).all()


def test_long_format_with_single_series(salary_matrix):
    hclust = _labels(salary_matrix, 'hclust', [1] * 22)
    long_df = to_long_format(salary_matrix, hclust)
    assert 'hclust' in long_df.columns
    assert long_df['hclust'].notna().all()


def test_merge_keeps_labelings_separate(salary_matrix):
    a = _labels(salary_matrix, 'hclust', [1] * 22)
    b = _labels(salary_matrix, 'kmeans_2', [2] * 22)
    merged = merge_cluster_assignments(a, b)
    assert merged.shape == (22, 2)
    assert merged.index.name == 'occupation'
    assert (merged['hclust'] == 1).all()
    assert (merged['kmeans_2'] == 2).all()


def test_merge_rejects_mismatched_occupations(salary_matrix):
    a = _labels(salary_matrix, 'hclust', [1] * 22)
    b = a.iloc[:-1].rename('kmeans_2')
    with pytest.raises(ValueError, match="different occupations"):
        merge_cluster_assignments(a, b)


def test_merge_requires_input():
    with pytest.raises(ValueError):
        merge_cluster_assignments()
