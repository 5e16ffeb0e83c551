"""Bar chart of the most performed songs.

Usage:
    python -m viz --data data --year all -o ranking.png
"""

from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

from setlistsearch.config import RANKING_INITIAL_LIMIT
from setlistsearch.loader import DatasetLoader
from setlistsearch.ranking import rank_songs
from setlistsearch.report import year_label


def plot_ranking(entries, output, title="Most performed songs"):
    """Horizontal bars, top entry at the top.  Returns the output path."""
    output = Path(output)
    output.parent.mkdir(parents=True, exist_ok=True)

    labels = [e.display_title for e in entries]
    counts = np.array([e.count for e in entries], dtype=float)
    y = np.arange(len(entries))

    fig, ax = plt.subplots(figsize=(10, max(2.5, 0.35 * len(entries) + 1.2)))
    cmap = plt.cm.viridis
    colors = cmap(counts / counts.max()) if len(counts) else []
    ax.barh(y, counts, color=colors, edgecolor="white", linewidth=0.5)
    ax.set_yticks(y)
    ax.set_yticklabels(labels, fontsize=8)
    ax.invert_yaxis()
    for yi, n in zip(y, counts):
        ax.text(n, yi, f" {int(n)}", va="center", fontsize=7)

    ax.set_title(title)
    ax.set_xlabel("Performances")
    ax.spines[["top", "right"]].set_visible(False)
    fig.tight_layout()
    fig.savefig(output, dpi=150)
    plt.close(fig)
    return output


def main(data, year, limit=RANKING_INITIAL_LIMIT, output="ranking.png"):
    loader = DatasetLoader(data, verbose=True)
    lives = loader.load_target_lives(year)
    entries = rank_songs(lives)[:limit]
    if not entries:
        print("  No songs to plot.")
        return None
    path = plot_ranking(entries, output,
                        title=f"Most performed songs: {year_label(year)}")
    print(f"  Saved {len(entries)} songs to {path}")
    return path
