"""
Cluster Interpretation

Plain-language labels for the salary clusters, derived from their profiles:
where a cluster sits in the salary ranking and whether its pay grew faster
or slower than the typical cluster.
"""

import numpy as np


TIER_NAMES = {1: ["Single tier"], 2: ["High", "Low"], 3: ["High", "Middle", "Low"]}


def _tier_names(n_clusters):
    if n_clusters in TIER_NAMES:
        return TIER_NAMES[n_clusters]
    return [f"Tier {i}" for i in range(1, n_clusters + 1)]


def interpret_clusters(profiles):
    """
    Assign a salary tier and growth trend to each cluster profile.

    Rationale: cluster numbers carry no meaning on their own. Ranking by
    mean salary and comparing growth against the median cluster gives each
    group a short, readable description for the report.
    """
    ranked = sorted(profiles.items(), key=lambda item: item[1]['mean_salary'], reverse=True)
    names = _tier_names(len(ranked))
    median_growth = float(np.median([p['growth_pct'] for p in profiles.values()]))

    interpretations = {}
    for rank, (cluster_key, profile) in enumerate(ranked):
        if len(ranked) == 1:
            trend = "Single cluster"
        elif profile['growth_pct'] > median_growth:
            trend = "Faster growth"
        else:
            trend = "Slower growth"

        interpretations[cluster_key] = {
            'cluster_id': profile['cluster_id'],
            'salary_tier': names[rank],
            'salary_rank': rank + 1,
            'growth_trend': trend,
            'mean_salary': profile['mean_salary'],
            'growth_pct': profile['growth_pct'],
            'size': profile['size'],
            'description': (
                f"{names[rank]} salary group of {profile['size']} occupation(s), "
                f"mean {profile['mean_salary']:,.0f}, "
                f"{profile['growth_pct']:+.1f}% over the period ({trend.lower()})"
            )
        }

    return interpretations
