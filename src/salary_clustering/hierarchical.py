"""
Hierarchical clustering of occupations by salary trajectory.

Average-linkage agglomerative clustering over Euclidean distances between
occupations. The merge tree is kept for the dendrogram and cut at a fixed
height to obtain flat cluster labels.
"""

import numpy as np
import pandas as pd
from scipy.cluster.hierarchy import linkage, fcluster, cophenet
from scipy.spatial.distance import pdist, squareform

from salary_clustering import config


def order_cluster_labels(labels):
    """
    Renumber cluster labels 1..n in order of first appearance.

    Rationale: label values from different algorithms (and different random
    seeds) are arbitrary. Numbering by row order makes every labelling
    deterministic and comparable in tables and legends.
    """
    codes, _ = pd.factorize(np.asarray(labels))
    return codes.astype(int) + 1


def compute_distance_matrix(matrix, metric=config.DISTANCE_METRIC):
    """Pairwise distances between occupations as a labelled square DataFrame."""
    distances = squareform(pdist(matrix.values, metric=metric))
    return pd.DataFrame(distances, index=matrix.index, columns=matrix.index)


def build_linkage(matrix, method=config.LINKAGE_METHOD, metric=config.DISTANCE_METRIC):
    """
    Agglomerative clustering of the occupations.

    Returns the SciPy linkage matrix: (n-1) merges, each row holding the two
    merged clusters, the merge height and the size of the new cluster.
    """
    return linkage(pdist(matrix.values, metric=metric), method=method)


def cut_tree_at_height(linkage_matrix, occupations, height=config.CUT_HEIGHT):
    """
    Cut the merge tree at a fixed height.

    Every merge above the height is undone, so each occupation ends up in
    exactly one flat cluster.
    """
    raw = fcluster(linkage_matrix, t=height, criterion='distance')
    labels = order_cluster_labels(raw)
    return pd.Series(labels, index=pd.Index(occupations, name='occupation'), name='hclust')


def cophenetic_correlation(linkage_matrix, matrix, metric=config.DISTANCE_METRIC):
    """Correlation between tree (cophenetic) distances and the original distances."""
    corr, _ = cophenet(linkage_matrix, pdist(matrix.values, metric=metric))
    return float(corr)


def merge_heights(linkage_matrix):
    """Merge heights in the order the tree was built."""
    return linkage_matrix[:, 2].copy()
