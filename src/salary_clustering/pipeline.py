"""
Occupation Salary Clustering Analysis

Runs the full analysis in one pass:
1. Load the occupation x year salary matrix
2. Euclidean distances and average-linkage hierarchical clustering, cut at a fixed height
3. Elbow sweep (k-means) and silhouette sweep (PAM)
4. Final k-means models at the chosen k values
5. Long-form table with all labelings and comparison charts
"""

import json
import sys
from pathlib import Path
import warnings
warnings.filterwarnings('ignore')

from salary_clustering import config
from salary_clustering.data_loading import (
    SalaryDataError, load_salary_matrix, summarize_salary_matrix
)
from salary_clustering.hierarchical import (
    compute_distance_matrix, build_linkage, cut_tree_at_height,
    cophenetic_correlation, merge_heights
)
from salary_clustering.segmentation import OccupationClustering
from salary_clustering.reshaping import merge_cluster_assignments, to_long_format
from salary_clustering.interpretation import interpret_clusters
from salary_clustering.visualization import (
    plot_dendrogram, plot_elbow_curve, plot_silhouette_curve,
    create_cluster_comparison_plots
)


def run_analysis(data_path=config.SALARY_DATA_FILE, output_dir=config.OUTPUT_DIR):
    """
    Main execution for the occupation clustering analysis.
    """
    print("Occupation Salary Clustering Analysis")
    print("=" * 70)

    output_dir = Path(output_dir)
    figures_dir = output_dir / "figures"
    model_dir = output_dir / "models"

    # Load data
    print(f"\nLoading salary matrix from {data_path}...")
    matrix = load_salary_matrix(data_path)
    print(f"Loaded {matrix.shape[0]} occupations x {matrix.shape[1]} years")
    summary = summarize_salary_matrix(matrix)
    figures_dir.mkdir(parents=True, exist_ok=True)
    model_dir.mkdir(parents=True, exist_ok=True)

    # Hierarchical clustering
    print("\n" + "=" * 70)
    print("HIERARCHICAL CLUSTERING")
    print("=" * 70)
    distances = compute_distance_matrix(matrix, metric=config.DISTANCE_METRIC)
    linkage_matrix = build_linkage(matrix, method=config.LINKAGE_METHOD,
                                   metric=config.DISTANCE_METRIC)
    hclust_labels = cut_tree_at_height(linkage_matrix, matrix.index, height=config.CUT_HEIGHT)
    cophenetic = cophenetic_correlation(linkage_matrix, matrix, metric=config.DISTANCE_METRIC)
    n_hclust = int(hclust_labels.nunique())
    print(f"Linkage: {config.LINKAGE_METHOD}, metric: {config.DISTANCE_METRIC}")
    print(f"Cophenetic correlation: {cophenetic:.3f}")
    print(f"Cutting at height {config.CUT_HEIGHT:,} gives {n_hclust} clusters")

    # Cluster number selection
    clustering = OccupationClustering()
    elbow_df = clustering.elbow_analysis(matrix, config.ELBOW_K_RANGE)
    silhouette_df = clustering.silhouette_analysis(distances, config.SILHOUETTE_K_RANGE)
    best_k = clustering.best_silhouette_k(silhouette_df)
    print(f"\nBest k by average silhouette width: {best_k}")

    # Final k-means models
    kmeans_labels = [clustering.fit_kmeans(matrix, k) for k in config.FINAL_KMEANS_K]

    # Combine labelings
    assignments = merge_cluster_assignments(hclust_labels, *kmeans_labels)
    long_df = to_long_format(matrix, assignments)
    print(f"\nLong-form table: {len(long_df)} rows "
          f"({matrix.shape[0]} occupations x {matrix.shape[1]} years)")

    # Profiles
    print("\n" + "=" * 70)
    print("CLUSTER PROFILES")
    print("=" * 70)
    profiles = {}
    interpretations = {}
    for column in assignments.columns:
        profiles[column] = clustering.create_cluster_profiles(matrix, assignments[column])
        interpretations[column] = interpret_clusters(profiles[column])
        print(f"\n{column}:")
        for cluster_key, info in interpretations[column].items():
            print(f"  {cluster_key}: {info['description']}")

    # Figures
    print("\n" + "=" * 70)
    print("GENERATING FIGURES")
    print("=" * 70)
    plot_dendrogram(linkage_matrix, matrix.index, config.CUT_HEIGHT, figures_dir)
    plot_elbow_curve(elbow_df, figures_dir)
    plot_silhouette_curve(silhouette_df, best_k, figures_dir)
    create_cluster_comparison_plots(long_df, list(assignments.columns), figures_dir)

    # Save results
    print("\n" + "=" * 70)
    print("SAVING RESULTS")
    print("=" * 70)
    clustering.save_model(model_dir / "occupation_clustering.pkl")

    results = {
        'data_summary': summary,
        'hierarchical': {
            'distance_metric': config.DISTANCE_METRIC,
            'linkage_method': config.LINKAGE_METHOD,
            'cut_height': config.CUT_HEIGHT,
            'n_clusters': n_hclust,
            'cophenetic_correlation': cophenetic,
            'merge_heights': [float(h) for h in merge_heights(linkage_matrix)]
        },
        'elbow': elbow_df.to_dict(orient='records'),
        'silhouette': silhouette_df.to_dict(orient='records'),
        'best_silhouette_k': best_k,
        'final_kmeans_k': list(config.FINAL_KMEANS_K),
        'cluster_sizes': {
            column: {str(k): int(v) for k, v in assignments[column].value_counts().sort_index().items()}
            for column in assignments.columns
        },
        'cluster_profiles': profiles,
        'cluster_interpretations': interpretations
    }

    with open(output_dir / 'clustering_results.json', 'w') as f:
        json.dump(results, f, indent=2)
    print(f"  Saved: {output_dir / 'clustering_results.json'}")

    assignments.to_csv(output_dir / 'cluster_assignments.csv')
    print(f"  Saved: {output_dir / 'cluster_assignments.csv'}")

    long_df.to_csv(output_dir / 'salary_long.csv', index=False)
    print(f"  Saved: {output_dir / 'salary_long.csv'}")

    print("\n" + "=" * 70)
    print("CLUSTERING ANALYSIS COMPLETE!")
    print("=" * 70)
    print(f"\nHierarchical clusters at height {config.CUT_HEIGHT:,}: {n_hclust}")
    print(f"Best silhouette k (PAM): {best_k}")
    print(f"All figures saved to: {figures_dir}")

    return results


def main():
    try:
        run_analysis(config.SALARY_DATA_FILE, config.OUTPUT_DIR)
    except SalaryDataError as e:
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
