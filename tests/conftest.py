import matplotlib
matplotlib.use('Agg')

import numpy as np
import pandas as pd
import pytest


YEARS = [str(y) for y in range(2001, 2016)]

# Three salary tiers; gaps between tiers are far larger than the cut height
TIERS = [
    ("Low", 35000, 8),
    ("Mid", 75000, 8),
    ("High", 140000, 6),
]


def make_salary_matrix(seed=0):
    rng = np.random.default_rng(seed)
    rows = {}
    for tier_name, base, count in TIERS:
        for i in range(count):
            offset = rng.uniform(-3000, 3000)
            growth = 1.02 + rng.uniform(-0.003, 0.003)
            trajectory = [(base + offset) * growth ** t for t in range(len(YEARS))]
            noise = rng.normal(0, 500, size=len(YEARS))
            rows[f"{tier_name} occupation {i + 1}"] = np.round(np.array(trajectory) + noise, 2)
    df = pd.DataFrame.from_dict(rows, orient='index', columns=YEARS)
    df.index.name = 'occupation'
    return df


@pytest.fixture
def salary_matrix():
    return make_salary_matrix()


@pytest.fixture
def salary_csv(tmp_path, salary_matrix):
    path = tmp_path / "occupation_salaries.csv"
    salary_matrix.to_csv(path)
    return path


@pytest.fixture
def tier_of():
    def lookup(occupation):
        return occupation.split(" ")[0]
    return lookup
