"""
Clustering of occupations by average salary trajectory.

Stages: load the salary matrix, hierarchical clustering, k-means / PAM
segmentation, reshaping for plots, and figure generation.
"""

__version__ = "0.1.0"
