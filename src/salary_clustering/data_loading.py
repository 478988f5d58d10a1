"""
Loading and summary of the occupation salary matrix.

The input is a small wide table: one row per occupation, one column per
year, cells holding the mean annual salary. The data is already clean, so
loading only checks that it really is a complete numeric matrix and fails
with a descriptive message otherwise.
"""

import re
import pickle
from pathlib import Path

import numpy as np
import pandas as pd

from salary_clustering import config


class SalaryDataError(ValueError):
    """Raised when the salary file is missing or malformed."""


def load_salary_matrix(path):
    """
    Load the occupation x year salary matrix.

    Supported formats:
    - CSV with occupation names in the first column and year labels in the header
    - Pickled pandas DataFrame (.pkl / .pickle) indexed by occupation

    Returns a float DataFrame indexed by occupation.
    """
    path = Path(path)
    if not path.exists():
        raise SalaryDataError(f"Salary data file not found: {path}")

    suffix = path.suffix.lower()
    if suffix == '.csv':
        try:
            df = pd.read_csv(path, index_col=0)
        except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
            raise SalaryDataError(f"Could not parse {path}: {e}") from e
    elif suffix in ('.pkl', '.pickle'):
        try:
            with open(path, 'rb') as f:
                df = pickle.load(f)
        except (pickle.UnpicklingError, EOFError) as e:
            raise SalaryDataError(f"Could not unpickle {path}: {e}") from e
        if not isinstance(df, pd.DataFrame):
            raise SalaryDataError(
                f"Expected a pandas DataFrame in {path}, found {type(df).__name__}"
            )
    else:
        raise SalaryDataError(
            f"Unsupported file type '{suffix}' for {path} (expected .csv, .pkl or .pickle)"
        )

    return validate_salary_matrix(df, source=path)


def validate_salary_matrix(df, source="salary matrix",
                           min_occupations=config.MIN_OCCUPATIONS,
                           min_years=config.MIN_YEARS):
    """
    Check that the table is a complete, finite numeric matrix with unique
    row names and enough rows and columns for the clustering sweeps.

    Rationale: every downstream step (distances, linkage, k-means) assumes
    a dense numeric matrix, so malformed input is rejected up front.
    """
    if df.empty:
        raise SalaryDataError(f"{source} contains no data")

    n_occupations, n_years = df.shape
    if n_occupations < min_occupations:
        raise SalaryDataError(
            f"{source} has {n_occupations} occupation(s); at least {min_occupations} "
            f"are needed for k-means and PAM up to k={min_occupations - 1}"
        )
    if n_years < min_years:
        raise SalaryDataError(
            f"{source} has {n_years} year column(s); at least {min_years} are needed"
        )

    numeric = df.apply(pd.to_numeric, errors='coerce')
    bad_cells = numeric.isna() & df.notna()
    if bad_cells.any().any():
        columns = [str(c) for c in bad_cells.columns[bad_cells.any()]]
        raise SalaryDataError(
            f"{source} has non-numeric values in column(s): {', '.join(columns)}"
        )

    if numeric.isna().any().any():
        missing = int(numeric.isna().sum().sum())
        raise SalaryDataError(f"{source} has {missing} missing salary value(s)")

    infinite = int((~np.isfinite(numeric.values.astype(float))).sum())
    if infinite:
        raise SalaryDataError(f"{source} has {infinite} infinite salary value(s)")

    if numeric.index.duplicated().any():
        duplicates = sorted(set(numeric.index[numeric.index.duplicated()].astype(str)))
        raise SalaryDataError(
            f"{source} has duplicate occupation(s): {', '.join(duplicates)}"
        )

    numeric = numeric.astype(float)
    numeric.index = numeric.index.astype(str)
    numeric.index.name = 'occupation'
    numeric.columns = [str(c) for c in numeric.columns]
    return numeric


def parse_year(label):
    """Extract an integer year from labels like '2001' or 'X2001'."""
    match = re.search(r'\d{4}', str(label))
    if match is None:
        return label
    return int(match.group())


def summarize_salary_matrix(matrix):
    """
    Generate a JSON-ready summary of the salary matrix.

    Includes shape, labels, per-year statistics, and each occupation's
    growth from the first to the last year.
    """
    first_year, last_year = matrix.columns[0], matrix.columns[-1]
    growth = (matrix[last_year] - matrix[first_year]) / matrix[first_year] * 100

    per_year = {}
    for col in matrix.columns:
        per_year[str(parse_year(col))] = {
            "mean": round(float(matrix[col].mean()), 2),
            "min": float(matrix[col].min()),
            "max": float(matrix[col].max())
        }

    return {
        "n_occupations": int(matrix.shape[0]),
        "n_years": int(matrix.shape[1]),
        "occupations": matrix.index.tolist(),
        "years": [parse_year(c) for c in matrix.columns],
        "overall_mean_salary": round(float(np.mean(matrix.values)), 2),
        "per_year": per_year,
        "growth_pct": {occ: round(float(g), 2) for occ, g in growth.items()}
    }
