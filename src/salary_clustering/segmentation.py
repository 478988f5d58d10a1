"""
Partitional clustering of occupations: k-means and partitioning around medoids.
"""

import pickle

import numpy as np
import pandas as pd
from sklearn.cluster import KMeans
from sklearn.metrics import silhouette_score
from kmedoids import KMedoids
import warnings
warnings.filterwarnings('ignore')

from salary_clustering import config
from salary_clustering.hierarchical import order_cluster_labels


class OccupationClustering:
    """
    Occupation segmentation by salary trajectory.

    Design philosophy:
    - Cluster raw salary levels; the height cut and the elbow both read in salary units
    - Fix seeds so repeated runs give the same labels
    - Keep every fitted model so labelings can be compared side by side
    """

    def __init__(self, random_state=config.RANDOM_STATE, n_init=config.KMEANS_N_INIT):
        self.random_state = random_state
        self.n_init = n_init
        self.kmeans_models = {}
        self.elbow_results = None
        self.silhouette_results = None
        self.cluster_profiles = {}

    def _kmeans(self, n_clusters):
        return KMeans(
            n_clusters=n_clusters,
            random_state=self.random_state,
            n_init=self.n_init,
            max_iter=300
        )

    def elbow_analysis(self, matrix, k_range=config.ELBOW_K_RANGE):
        """
        Total within-cluster sum of squares for each k.

        Rationale: the point where adding clusters stops reducing the
        within-cluster variance much is a candidate number of groups.
        """
        print(f"\n{'='*70}")
        print("ELBOW ANALYSIS (K-MEANS)")
        print(f"{'='*70}")

        X = np.asarray(matrix, dtype=float)
        rows = []
        for k in k_range:
            model = self._kmeans(k).fit(X)
            rows.append({'n_clusters': int(k), 'inertia': float(model.inertia_)})
            print(f"  k={k:2d}: within-cluster SS = {model.inertia_:,.0f}")

        self.elbow_results = pd.DataFrame(rows)
        return self.elbow_results

    def silhouette_analysis(self, distances, k_range=config.SILHOUETTE_K_RANGE):
        """
        Average silhouette width of a PAM clustering for each k.

        Rationale: silhouette width compares each occupation's fit to its own
        cluster against the next-closest one. It is undefined for k=1 and
        for k equal to the number of occupations.
        """
        print(f"\n{'='*70}")
        print("SILHOUETTE ANALYSIS (PAM)")
        print(f"{'='*70}")

        D = np.asarray(distances, dtype=float)
        n_samples = D.shape[0]
        rows = []
        for k in k_range:
            if k < 2 or k >= n_samples:
                raise ValueError(
                    f"Silhouette width requires 2 <= k < {n_samples}, got k={k}"
                )
            pam = KMedoids(
                n_clusters=k,
                metric='precomputed',
                method='pam',
                init='build',
                random_state=self.random_state
            )
            labels = pam.fit(D).labels_
            width = silhouette_score(D, labels, metric='precomputed')
            rows.append({'n_clusters': int(k), 'avg_silhouette': float(width)})
            print(f"  k={k:2d}: average silhouette width = {width:.3f}")

        self.silhouette_results = pd.DataFrame(rows)
        return self.silhouette_results

    @staticmethod
    def best_silhouette_k(silhouette_df):
        """k with the largest average silhouette width."""
        return int(silhouette_df.loc[silhouette_df['avg_silhouette'].idxmax(), 'n_clusters'])

    def fit_kmeans(self, matrix, n_clusters, name=None):
        """
        Fit a final k-means model and return labels indexed by occupation.
        """
        print(f"\n{'='*70}")
        print(f"FITTING K-MEANS WITH {n_clusters} CLUSTERS")
        print(f"{'='*70}")

        model = self._kmeans(n_clusters)
        raw = model.fit_predict(np.asarray(matrix, dtype=float))
        self.kmeans_models[n_clusters] = model

        print(f"K-means converged in {model.n_iter_} iterations")
        print(f"Final within-cluster SS: {model.inertia_:,.0f}")

        labels = pd.Series(
            order_cluster_labels(raw),
            index=pd.Index(matrix.index, name='occupation'),
            name=name or f'kmeans_{n_clusters}'
        )

        print("\nCluster sizes:")
        for cluster_id, count in labels.value_counts().sort_index().items():
            print(f"  Cluster {cluster_id}: {count} ({count / len(labels) * 100:.1f}%)")

        return labels

    def create_cluster_profiles(self, matrix, labels):
        """
        Describe each cluster by its members and mean salary trajectory.

        Rationale: profiles turn label numbers into something readable,
        e.g. which occupations sit together and how fast their pay grew.
        """
        first_year, last_year = matrix.columns[0], matrix.columns[-1]
        profiles = {}

        for cluster_id in sorted(labels.unique()):
            members = labels.index[labels == cluster_id].tolist()
            cluster_data = matrix.loc[members]
            trajectory = cluster_data.mean(axis=0)
            growth = (trajectory[last_year] - trajectory[first_year]) / trajectory[first_year] * 100

            profiles[f'cluster_{cluster_id}'] = {
                'cluster_id': int(cluster_id),
                'size': int(len(members)),
                'percentage': float(len(members) / len(labels) * 100),
                'members': members,
                'mean_salary': float(cluster_data.values.mean()),
                'mean_trajectory': {str(year): float(v) for year, v in trajectory.items()},
                'growth_pct': float(growth)
            }

        self.cluster_profiles[labels.name] = profiles
        return profiles

    def save_model(self, filepath):
        """Save the fitted clustering object."""
        with open(filepath, 'wb') as f:
            pickle.dump(self, f)
        print(f"\nClustering model saved to: {filepath}")

    @staticmethod
    def load_model(filepath):
        """Load a fitted clustering object."""
        with open(filepath, 'rb') as f:
            return pickle.load(f)
