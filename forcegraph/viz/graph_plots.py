import os
import logging
from typing import Optional

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import networkx as nx

from forcegraph.config.paths import GRAPHS_OUTPUT_DIR
from forcegraph.graph.graph import DirectedGraph
from forcegraph.layout.engine import Bounds

NODE_SIZE = 900
NODE_COLOR = "#3498db"
EDGE_COLOR = "#2c3e50"
BACKGROUND_COLOR = "#ecf0f1"
ARROW_SIZE = 16


def plot_layout(
    graph: DirectedGraph,
    bounds: Bounds,
    output_path: Optional[str] = None,
    title: str = "",
) -> str:
    """Draw the graph at its current node positions and save it as a PNG.

    Screen coordinates grow downward, so the y axis is inverted to match
    the layout's frame.
    """
    out_path = output_path or os.path.join(GRAPHS_OUTPUT_DIR, "layout.png")
    out_dir = os.path.dirname(out_path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)

    G = graph.to_networkx()
    pos = nx.get_node_attributes(G, "pos")
    min_x, min_y, max_x, max_y = bounds

    fig, ax = plt.subplots(figsize=(10, 7.5))
    try:
        ax.set_facecolor(BACKGROUND_COLOR)
        nx.draw_networkx_edges(
            G,
            pos,
            ax=ax,
            edge_color=EDGE_COLOR,
            width=2.0,
            arrows=True,
            arrowstyle="-|>",
            arrowsize=ARROW_SIZE,
            node_size=NODE_SIZE,
        )
        nx.draw_networkx_nodes(
            G,
            pos,
            ax=ax,
            node_size=NODE_SIZE,
            node_color=NODE_COLOR,
            edgecolors=EDGE_COLOR,
        )
        nx.draw_networkx_labels(
            G,
            pos,
            ax=ax,
            labels={n: str(value) for n, value in G.nodes(data="value")},
            font_color="white",
            font_weight="bold",
        )
        ax.set_xlim(min_x, max_x)
        ax.set_ylim(max_y, min_y)
        ax.set_aspect("equal")
        ax.axis("off")
        if title:
            ax.set_title(title)
        fig.savefig(out_path, format="PNG", dpi=150, bbox_inches="tight")
    except Exception:
        logging.error("Failed to plot layout to %s", out_path, exc_info=True)
        raise
    finally:
        plt.close(fig)
    logging.info("Saved layout plot to %s", out_path)
    return out_path
