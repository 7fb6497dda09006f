from __future__ import annotations
from typing import List, Tuple
from .models.common import TypeId
from .models.packet import Packet

def _label(p: Packet) -> str:
    if p.is_literal:
        return f"v{p.version}\n{p.literal}"
    return f"v{p.version}\n{TypeId(p.type_id).name.lower()}"

def layout_tree(packet: Packet) -> Tuple[List[Tuple[float, float, str]], List[Tuple[int, int]]]:
    """
    Place leaves one unit apart left to right, parents centred over their children,
    one row per depth level. Returns (nodes as (x, y, label), edges as index pairs).
    """
    nodes: List[Tuple[float, float, str]] = []
    edges: List[Tuple[int, int]] = []
    next_leaf = [0.0]

    def place(p: Packet, depth: int) -> int:
        idx = len(nodes)
        nodes.append((0.0, 0.0, _label(p)))
        kids = [place(c, depth + 1) for c in p.children]
        if kids:
            x = sum(nodes[k][0] for k in kids) / len(kids)
        else:
            x = next_leaf[0]
            next_leaf[0] += 1.0
        nodes[idx] = (x, -float(depth), nodes[idx][2])
        edges.extend((idx, k) for k in kids)
        return idx

    place(packet, 0)
    return nodes, edges

def plot_packet_tree(packet: Packet, *, show: bool = True):
    """Minimal drawing of a decoded tree for sanity-checking."""
    import matplotlib.pyplot as plt
    nodes, edges = layout_tree(packet)
    fig, ax = plt.subplots()
    for a, b in edges:
        ax.plot([nodes[a][0], nodes[b][0]], [nodes[a][1], nodes[b][1]], color="0.6", lw=1)
    for x, y, text in nodes:
        ax.annotate(text, (x, y), ha="center", va="center", fontsize=8,
                    bbox=dict(boxstyle="round", fc="white", ec="0.3"))
    xs = [n[0] for n in nodes]
    ys = [n[1] for n in nodes]
    ax.set_xlim(min(xs) - 1, max(xs) + 1)
    ax.set_ylim(min(ys) - 1, max(ys) + 1)
    ax.set_axis_off()
    ax.set_title(f"Packet tree ({len(nodes)} packets)")
    if show:
        plt.show()
    return fig
