import numpy as np
import matplotlib.pyplot as plt
import seaborn as sns
from scipy.cluster.hierarchy import dendrogram

# Set publication quality defaults
plt.rcParams['figure.dpi'] = 100
plt.rcParams['savefig.dpi'] = 300
plt.rcParams['font.size'] = 10
plt.rcParams['font.family'] = 'serif'
plt.rcParams['axes.labelsize'] = 10
plt.rcParams['axes.titlesize'] = 11
plt.rcParams['xtick.labelsize'] = 9
plt.rcParams['ytick.labelsize'] = 9
plt.rcParams['legend.fontsize'] = 9
plt.rcParams['figure.titlesize'] = 12

sns.set_palette("husl")


def _save_figure(fig, output_dir, name):
    output_dir.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_dir / f'{name}.pdf', bbox_inches='tight')
    fig.savefig(output_dir / f'{name}.png', bbox_inches='tight')
    plt.close(fig)
    print(f"  Created: {name}.pdf/png")


def plot_dendrogram(linkage_matrix, occupations, cut_height, output_dir):
    """
    Figure 1: Average-linkage dendrogram of occupations.

    Rationale: the tree shows at which salary distance groups merge; the
    dashed line marks the height used for the flat cut.
    """
    fig, ax = plt.subplots(figsize=(12, 6))

    dendrogram(
        linkage_matrix,
        labels=list(occupations),
        leaf_rotation=90,
        leaf_font_size=8,
        color_threshold=cut_height,
        above_threshold_color='grey',
        ax=ax
    )
    ax.axhline(y=cut_height, color='red', linestyle='--', linewidth=1.5,
               label=f'Cut height = {cut_height:,.0f}')
    ax.set_ylabel('Height (Euclidean distance)')
    ax.set_title('Hierarchical Clustering of Occupations (Average Linkage)')
    ax.legend(loc='upper right')
    ax.grid(axis='y', alpha=0.3)

    plt.tight_layout()
    _save_figure(fig, output_dir, 'fig1_dendrogram')


def plot_elbow_curve(elbow_df, output_dir):
    """
    Figure 2: Elbow method.
    """
    fig, ax = plt.subplots(figsize=(8, 5))

    ax.plot(elbow_df['n_clusters'], elbow_df['inertia'],
            marker='o', linewidth=2, markersize=8, color='#3498db')
    ax.set_xlabel('Number of Clusters')
    ax.set_ylabel('Total Within-Cluster Sum of Squares')
    ax.set_title('Elbow Method (K-Means)')
    ax.set_xticks(elbow_df['n_clusters'])
    ax.grid(alpha=0.3)

    plt.tight_layout()
    _save_figure(fig, output_dir, 'fig2_elbow')


def plot_silhouette_curve(silhouette_df, best_k, output_dir):
    """
    Figure 3: Average silhouette width per k (PAM).
    """
    fig, ax = plt.subplots(figsize=(8, 5))

    ax.plot(silhouette_df['n_clusters'], silhouette_df['avg_silhouette'],
            marker='o', linewidth=2, markersize=8, color='#2ecc71')
    ax.axvline(x=best_k, color='red', linestyle='--',
               label=f'Best k={int(best_k)}', linewidth=2)
    ax.set_xlabel('Number of Clusters')
    ax.set_ylabel('Average Silhouette Width')
    ax.set_title('Silhouette Analysis (PAM, Higher is Better)')
    ax.set_xticks(silhouette_df['n_clusters'])
    ax.legend()
    ax.grid(alpha=0.3)

    plt.tight_layout()
    _save_figure(fig, output_dir, 'fig3_silhouette')


def plot_cluster_trajectories(long_df, cluster_column, title, output_dir, filename):
    """
    Salary trajectory of every occupation, coloured by cluster.
    """
    n_clusters = long_df[cluster_column].nunique()
    palette = sns.color_palette("husl", n_clusters)

    fig, ax = plt.subplots(figsize=(10, 6))
    sns.lineplot(
        data=long_df,
        x='year',
        y='salary',
        hue=cluster_column,
        units='occupation',
        estimator=None,
        palette=palette,
        linewidth=1.2,
        alpha=0.8,
        ax=ax
    )

    years = np.sort(long_df['year'].unique())
    ax.set_xticks(years)
    ax.set_xticklabels(years, rotation=45)
    ax.set_xlabel('Year')
    ax.set_ylabel('Average Salary')
    ax.set_title(title)
    ax.legend(title='Cluster', loc='upper left', framealpha=0.9)
    ax.grid(alpha=0.3)

    plt.tight_layout()
    _save_figure(fig, output_dir, filename)


def create_cluster_comparison_plots(long_df, cluster_columns, output_dir):
    """
    Figures 4-6: one trajectory chart per labeling.

    Rationale: drawing the same lines under each labeling makes it easy to
    see where hierarchical and k-means groupings agree.
    """
    print("Generating cluster comparison plots...")

    titles = {
        'hclust': 'Hierarchical Clustering (Average Linkage, Height Cut)',
    }
    for idx, column in enumerate(cluster_columns, start=4):
        if column.startswith('kmeans_'):
            title = f"K-Means Clustering (k={column.split('_', 1)[1]})"
        else:
            title = titles.get(column, f'Clusters: {column}')
        plot_cluster_trajectories(long_df, column, title, output_dir,
                                  f'fig{idx}_trajectories_{column}')
