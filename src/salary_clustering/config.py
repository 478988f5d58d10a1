from pathlib import Path

# Random seed for reproducibility
RANDOM_STATE = 42

# Data paths
DATA_PATH = Path("data")
SALARY_DATA_FILE = DATA_PATH / "occupation_salaries.csv"
OUTPUT_DIR = Path("outputs")

# Hierarchical clustering parameters
DISTANCE_METRIC = "euclidean"
LINKAGE_METHOD = "average"
CUT_HEIGHT = 100000  # in salary units, matrix is not rescaled

# Partitioning parameters
ELBOW_K_RANGE = range(1, 11)
SILHOUETTE_K_RANGE = range(2, 11)
FINAL_KMEANS_K = (2, 7)
KMEANS_N_INIT = 25

# Input shape: the largest k in any sweep needs more occupations than clusters
MIN_OCCUPATIONS = max(max(ELBOW_K_RANGE), max(SILHOUETTE_K_RANGE), max(FINAL_KMEANS_K)) + 1
MIN_YEARS = 2
