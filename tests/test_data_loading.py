import pickle

import numpy as np
import pandas as pd
import pytest

from salary_clustering.data_loading import (
    SalaryDataError, load_salary_matrix, parse_year, summarize_salary_matrix
)


def test_load_csv(salary_csv, salary_matrix):
    loaded = load_salary_matrix(salary_csv)
    assert loaded.shape == (22, 15)
    assert loaded.index.name == 'occupation'
    assert list(loaded.columns) == list(salary_matrix.columns)
    np.testing.assert_allclose(loaded.values, salary_matrix.values)


def test_load_pickle(tmp_path, salary_matrix):
    path = tmp_path / "salaries.pkl"
    with open(path, 'wb') as f:
        pickle.dump(salary_matrix, f)
    loaded = load_salary_matrix(path)
    assert loaded.shape == (22, 15)
    assert loaded.dtypes.eq(float).all()


def test_missing_file(tmp_path):
    with pytest.raises(SalaryDataError, match="not found"):
        load_salary_matrix(tmp_path / "nope.csv")


def test_unsupported_extension(tmp_path):
    path = tmp_path / "salaries.xlsx"
    path.write_text("irrelevant")
    with pytest.raises(SalaryDataError, match="Unsupported file type"):
        load_salary_matrix(path)


def test_pickle_of_wrong_type(tmp_path):
    path = tmp_path / "salaries.pkl"
    with open(path, 'wb') as f:
        pickle.dump([1, 2, 3], f)
    with pytest.raises(SalaryDataError, match="DataFrame"):
        load_salary_matrix(path)


def test_missing_values_rejected(tmp_path, salary_matrix):
    broken = salary_matrix.copy()
    broken.iloc[3, 4] = np.nan
    path = tmp_path / "salaries.csv"
    broken.to_csv(path)
    with pytest.raises(SalaryDataError, match="missing"):
        load_salary_matrix(path)


def test_non_numeric_rejected(tmp_path, salary_matrix):
    broken = salary_matrix.astype(object)
    broken.iloc[0, 2] = "unknown"
    path = tmp_path / "salaries.csv"
    broken.to_csv(path)
    with pytest.raises(SalaryDataError, match="non-numeric"):
        load_salary_matrix(path)


def test_duplicate_occupations_rejected(tmp_path, salary_matrix):
    broken = pd.concat([salary_matrix, salary_matrix.iloc[[0]]])
    path = tmp_path / "salaries.csv"
    broken.to_csv(path)
    with pytest.raises(SalaryDataError, match="duplicate"):
        load_salary_matrix(path)


def test_empty_file_rejected(tmp_path):
    path = tmp_path / "salaries.csv"
    path.write_text("")
    with pytest.raises(SalaryDataError):
        load_salary_matrix(path)


@pytest.mark.parametrize("label, expected", [
    ("2001", 2001),
    ("X2016", 2016),
    (2005, 2005),
    ("total", "total"),
])
def test_parse_year(label, expected):
    assert parse_year(label) == expected


def test_summary(salary_matrix):
    summary = summarize_salary_matrix(salary_matrix)
    assert summary['n_occupations'] == 22
    assert summary['n_years'] == 15
    assert summary['years'][0] == 2001
    assert summary['years'][-1] == 2015
    assert len(summary['growth_pct']) == 22
    # every synthetic trajectory grows by at least 1% a year
    assert all(g > 0 for g in summary['growth_pct'].values())
    assert summary['per_year']['2001']['min'] <= summary['per_year']['2001']['mean']


def test_too_few_occupations_rejected(tmp_path, salary_matrix):
    path = tmp_path / "salaries.csv"
    salary_matrix.iloc[:5].to_csv(path)
    with pytest.raises(SalaryDataError, match="5 occupation"):
        load_salary_matrix(path)


def test_minimum_occupations_accepted(tmp_path, salary_matrix):
    path = tmp_path / "salaries.csv"
    salary_matrix.iloc[:11].to_csv(path)
    assert load_salary_matrix(path).shape == (11, 15)


def test_single_year_rejected(tmp_path, salary_matrix):
    path = tmp_path / "salaries.csv"
    salary_matrix.iloc[:, :1].to_csv(path)
    with pytest.raises(SalaryDataError, match="year column"):
        load_salary_matrix(path)


def test_infinite_values_rejected(tmp_path, salary_matrix):
    broken = salary_matrix.copy()
    broken.iloc[2, 3] = np.inf
    path = tmp_path / "salaries.csv"
    broken.to_csv(path)
    with pytest.raises(SalaryDataError, match="infinite"):
        load_salary_matrix(path)
