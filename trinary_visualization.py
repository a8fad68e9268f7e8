"""
trinary_visualization.py

Plotly-based visualization for three-valued logics.

This module renders truth tables as heatmaps, puts several logics side by
side to show where they diverge, and draws the truth and information orders
as Hasse diagrams laid out from their NetworkX graphs.
"""

import networkx as nx
import plotly.graph_objects as go
from plotly.subplots import make_subplots

from trinary_core import DOMAIN
from trinary_analysis import (
    cell_degree, cell_to_string, compare_logics, operator_table
)


# Red for FALSE through amber for MAYBE to green for TRUE
TRUTH_COLORSCALE = [
    [0.0, 'tomato'],
    [0.5, 'gold'],
    [1.0, 'limegreen'],
]


def _table_grid(table):
    """
    Arrange a truth table as heatmap rows.

    Returns:
        (z, text, x_labels, y_labels)
    """
    if table.arity == 1:
        x_labels = [a.to_string() for a in DOMAIN]
        y_labels = [table.name]
        z = [[cell_degree(table.lookup(a)) for a in DOMAIN]]
        text = [[cell_to_string(table.lookup(a)) for a in DOMAIN]]
    else:
        x_labels = [b.to_string() for b in DOMAIN]
        y_labels = [a.to_string() for a in DOMAIN]
        z = [[cell_degree(table.lookup(a, b)) for b in DOMAIN] for a in DOMAIN]
        text = [[cell_to_string(table.lookup(a, b)) for b in DOMAIN] for a in DOMAIN]
    return z, text, x_labels, y_labels


def create_table_trace(table, show_scale=False):
    """
    Create a Plotly heatmap trace for a truth table.

    Args:
        table: TruthTable
        show_scale: Whether to draw the colour bar

    Returns:
        plotly.graph_objects.Heatmap trace
    """
    z, text, x_labels, y_labels = _table_grid(table)
    return go.Heatmap(
        z=z,
        x=x_labels,
        y=y_labels,
        text=text,
        texttemplate='%{text}',
        textfont=dict(size=18),
        colorscale=TRUTH_COLORSCALE,
        zmin=0,
        zmax=1,
        showscale=show_scale,
        hovertemplate='%{y}, %{x} → %{text}<extra></extra>',
    )


def create_truth_table_heatmap(table, title=None, width=420, height=380):
    """
    Create a heatmap of one truth table.

    Binary tables put the first operand on the y axis (top to bottom in
    domain order) and the second on the x axis.

    Args:
        table: TruthTable
        title: Optional title for the figure
        width, height: Figure size in pixels

    Returns:
        plotly.graph_objects.Figure
    """
    fig = go.Figure(data=[create_table_trace(table)])

    fig.update_layout(
        title=dict(text=title or f"{table.name}", font=dict(size=16)),
        margin=dict(b=20, l=40, r=20, t=50),
        plot_bgcolor='white',
        width=width,
        height=height if table.arity == 2 else 200,
    )
    fig.update_yaxes(autorange='reversed', type='category')
    fig.update_xaxes(side='top', type='category')

    return fig


def create_logic_comparison_figure(logics, operator_name='implies', title=None):
    """
    Put one operator's truth table for several logics side by side.

    Cells where a logic disagrees with the first logic in the list are
    outlined.

    Args:
        logics: list of Logic classes
        operator_name: Operator to compare (e.g., 'implies', 'is_true')
        title: Optional title for the figure

    Returns:
        plotly.graph_objects.Figure
    """
    logics = list(logics)
    if not logics:
        raise ValueError("At least one logic is required")

    tables = [operator_table(logic, operator_name) for logic in logics]

    fig = make_subplots(
        rows=1, cols=len(logics),
        subplot_titles=[logic.name for logic in logics],
        horizontal_spacing=0.08,
    )

    reference = logics[0]
    for col, (logic, table) in enumerate(zip(logics, tables), start=1):
        fig.add_trace(create_table_trace(table, show_scale=(col == len(logics))), row=1, col=col)

        if col == 1:
            continue
        for divergence in compare_logics(reference, logic):
            if divergence.operator != operator_name:
                continue
            if table.arity == 1:
                x, y = divergence.inputs[0].to_string(), table.name
            else:
                y, x = (a.to_string() for a in divergence.inputs)
            fig.add_trace(go.Scatter(
                x=[x], y=[y],
                mode='markers',
                marker=dict(size=46, symbol='square-open', color='black', line=dict(width=3)),
                hoverinfo='text',
                hovertext=[f"Differs from {reference.name}: {divergence.to_string()}"],
                showlegend=False,
            ), row=1, col=col)

    fig.update_layout(
        title=dict(text=title or f"{operator_name} across logics", font=dict(size=16)),
        margin=dict(b=20, l=40, r=20, t=80),
        plot_bgcolor='white',
        width=320 * len(logics),
        height=400,
    )
    fig.update_yaxes(autorange='reversed', type='category')
    fig.update_xaxes(type='category')

    return fig


def hierarchical_layout(G):
    """
    Create a hierarchical layout based on node levels.

    Uses longest path from source nodes so each node appears above all
    of its predecessors.

    Args:
        G: NetworkX DiGraph

    Returns:
        dict mapping node -> (x, y) position
    """
    try:
        topo_order = list(nx.topological_sort(G))
    except nx.NetworkXUnfeasible:
        # Cycle, fall back to spring layout
        return nx.spring_layout(G, k=0.5, iterations=50)

    levels = {}
    for node in topo_order:
        pred_levels = [levels[pred] for pred in G.predecessors(node)]
        levels[node] = max(pred_levels) + 1 if pred_levels else 0

    level_groups = {}
    for node, level in levels.items():
        level_groups.setdefault(level, []).append(node)

    pos = {}
    max_level = max(levels.values()) if levels else 0
    for level, nodes in level_groups.items():
        y = level / max(max_level, 1)
        n_nodes = len(nodes)
        for i, node in enumerate(sorted(nodes, key=lambda v: v.value)):
            x = i / (n_nodes - 1) if n_nodes > 1 else 0.5
            pos[node] = (x, y)

    return pos


def create_order_figure(poset, title=None, width=400, height=400):
    """
    Draw a TruthOrderPoset as a Hasse diagram.

    The poset is reduced first, so only covering edges are drawn.

    Args:
        poset: TruthOrderPoset
        title: Optional title for the figure

    Returns:
        plotly.graph_objects.Figure
    """
    G = poset.transitive_reduction().graph
    pos = hierarchical_layout(G)

    edge_x, edge_y = [], []
    for u, v in G.edges():
        x0, y0 = pos[u]
        x1, y1 = pos[v]
        edge_x.extend([x0, x1, None])
        edge_y.extend([y0, y1, None])

    nodes = list(G.nodes())
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=edge_x, y=edge_y, mode='lines',
        line=dict(width=1.5, color='darkgray'), hoverinfo='none'
    ))
    fig.add_trace(go.Scatter(
        x=[pos[n][0] for n in nodes],
        y=[pos[n][1] for n in nodes],
        mode='markers+text',
        marker=dict(
            size=40,
            color=[n.degree for n in nodes],
            colorscale=TRUTH_COLORSCALE,
            cmin=0, cmax=1,
            line=dict(width=2, color='darkgray'),
        ),
        text=[n.to_string() for n in nodes],
        textposition='middle center',
        textfont=dict(size=14, color='black'),
        hoverinfo='text',
        hovertext=[f"{n.to_string()}<br>below: {', '.join(p.to_string() for p in G.predecessors(n)) or '-'}"
                   for n in nodes],
    ))
    fig.update_layout(
        title=dict(text=title or f"{poset.order_type.capitalize()} order", font=dict(size=16)),
        showlegend=False,
        hovermode='closest',
        margin=dict(b=20, l=20, r=20, t=50),
        xaxis=dict(showgrid=False, zeroline=False, showticklabels=False, range=[-0.2, 1.2]),
        yaxis=dict(showgrid=False, zeroline=False, showticklabels=False, range=[-0.2, 1.2]),
        plot_bgcolor='white',
        width=width,
        height=height,
    )

    return fig


def export_to_dot(poset, filename=None):
    """
    Export the Hasse diagram of a poset to GraphViz DOT format.

    Args:
        poset: TruthOrderPoset
        filename: Optional filename to write to (if None, returns string)

    Returns:
        str: DOT format string (if filename is None)
    """
    G = poset.transitive_reduction().graph

    lines = ['digraph G {', '  rankdir = BT;']
    for value in DOMAIN:
        lines.append(f'  "{value.to_string()}";')
    for u, v in G.edges():
        lines.append(f'  "{u.to_string()}" -> "{v.to_string()}";')
    lines.append('}')

    dot_string = '\n'.join(lines)

    if filename:
        with open(filename, 'w') as f:
            f.write(dot_string)
        return None
    else:
        return dot_string


def export_to_csv(table, filename):
    """
    Export a truth table to CSV, one row per input combination.

    Args:
        table: TruthTable
        filename: CSV filename to write to
    """
    import csv

    with open(filename, 'w', newline='') as csvfile:
        writer = csv.writer(csvfile)
        inputs = ['A'] if table.arity == 1 else ['A', 'B']
        writer.writerow(inputs + [table.name, 'Degree'])

        for args, out in table.cells():
            writer.writerow([a.to_string() for a in args] + [cell_to_string(out), cell_degree(out)])
