import pytest

from bitpacket.models.packet import Packet
from bitpacket.viz import layout_tree, plot_packet_tree

def test_layout_centres_parents():
    root = Packet.from_hex("C200B40A82")
    nodes, edges = layout_tree(root)
    assert len(nodes) == 3
    assert edges == [(0, 1), (0, 2)]
    (rx, ry, rlabel), (ax, ay, _), (bx, by, _) = nodes
    assert (ax, bx) == (0.0, 1.0)
    assert rx == 0.5
    assert ry == 0.0 and ay == by == -1.0
    assert "sum" in rlabel

def test_plot_returns_figure():
    matplotlib = pytest.importorskip("matplotlib")
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt
    fig = plot_packet_tree(Packet.from_hex("9C0141080250320F1802104A08"), show=False)
    assert fig.axes[0].get_title() == "Packet tree (7 packets)"
    plt.close(fig)
