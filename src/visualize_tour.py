# visualize_tour.py
from typing import Optional

import matplotlib.pyplot as plt
import networkx as nx

import config
from tour import Tour

def tour_graph(tour: Tour) -> nx.DiGraph:
    G = nx.DiGraph()
    for p in tour.path:
        G.add_node(p.id, x=p.x, y=p.y)
    for a, b, w in tour.edges():
        G.add_edge(a.id, b.id, weight=w)
    return G

def plot_tour(tour: Tour, filepath: Optional[str] = None, title: Optional[str] = None):
    s = config.VISUALIZATION_SETTINGS
    G = tour_graph(tour)
    pos = {p.id: (p.x, p.y) for p in tour.path}

    fig = plt.figure(figsize=s['figsize'])
    nx.draw_networkx_nodes(G, pos=pos, node_size=s['node_size'], node_color=s['node_color'])
    nx.draw_networkx_edges(G, pos=pos, width=s['route_edge_width'], edge_color=s['route_edge_color'],
                           arrows=len(tour.path) > 2)
    nx.draw_networkx_nodes(G, pos=pos, nodelist=[tour.start.id],
                           node_size=s['start_node_size'], node_color=s['start_node_color'])
    if s['with_labels']:
        nx.draw_networkx_labels(G, pos=pos, font_size=6)
    plt.title(title or f"Nearest-neighbor tour from {tour.start.id} (total {tour.total_distance:.2f})")
    plt.axis('equal')
    if filepath:
        fig.savefig(filepath, dpi=s['dpi'])
        plt.close(fig)
    else:
        plt.show()
    return fig
