"""
trinary_notebook_apps.py

Dash/Plotly interactive applications for three-valued logics.
This module provides ready-to-use apps for Jupyter notebooks.

Main components:
- create_truth_table_explorer_app(): pick a logic and an operator, see its
  truth table as a heatmap and as markdown, with the cells where it differs
  from the other logics listed underneath
"""

from dash import Dash, dcc, html, Input, Output

from trinary_core import LOGICS, Trinary
from trinary_analysis import compare_logics, logic_operators, operator_table
from trinary_visualization import create_truth_table_heatmap


# =============================================================================
# Serialization helpers for Dash stores (convert to/from JSON-safe formats)
# =============================================================================

def serialize_value(value):
    """Serialize a Trinary value to its member name."""
    if value is None:
        return None
    return value.name


def deserialize_value(data):
    """Deserialize a Trinary value from its member name."""
    if data is None:
        return None
    try:
        return Trinary[data]
    except KeyError:
        raise ValueError(f"Not a serialized trinary value: {data!r}") from None


def serialize_values(values):
    return [serialize_value(v) for v in values]


def deserialize_values(data):
    return [deserialize_value(d) for d in data or []]


# =============================================================================
# Truth Table Explorer
# =============================================================================

def _logics_by_name(logics):
    return {logic.name: logic for logic in logics}


def select_operator(logic_name, operator_name, logics=LOGICS):
    """
    Keep the selected operator if the logic defines it, else fall back to implies.

    Returns:
        (list of operator names the logic defines, operator name to show)
    """
    logic = _logics_by_name(logics)[logic_name]
    names = [name for name, _ in logic_operators(logic)]
    if operator_name not in names:
        operator_name = 'implies'
    return names, operator_name


def render_truth_table(logic_name, operator_name, logics=LOGICS):
    """
    Compute everything the explorer shows for one selection.

    Args:
        logic_name: Name of the selected logic (Logic.name)
        operator_name: Name of the selected operator
        logics: Logic classes available in the app

    Returns:
        (figure, markdown table, list of divergence strings)

    Raises:
        ValueError: If the logic or operator is unknown
    """
    by_name = _logics_by_name(logics)
    if logic_name not in by_name:
        raise ValueError(f"Unknown logic: {logic_name} (valid logics: {sorted(by_name)})")
    logic = by_name[logic_name]

    table = operator_table(logic, operator_name)
    fig = create_truth_table_heatmap(table, title=f"{logic.name}: {operator_name}")

    differences = []
    for other in logics:
        if other is logic:
            continue
        for divergence in compare_logics(logic, other):
            if divergence.operator == operator_name:
                differences.append(f"vs {other.name}: {divergence.to_string()}")

    return fig, table.to_string(), differences


def create_truth_table_explorer_app(logics=None):
    """
    Create the truth table explorer Dash app.

    Args:
        logics: Logic classes to offer (default: all logics in trinary_core)

    Returns:
        Dash app ready to run with app.run(jupyter_mode='inline', ...)
    """
    logics = list(logics or LOGICS)
    first = logics[0]
    operator_names = [name for name, _ in logic_operators(first)]

    app = Dash(__name__)

    app.layout = html.Div([
        html.H3("Three-valued truth tables"),
        html.Div([
            dcc.Dropdown(
                id='logic-dropdown',
                options=[{'label': f"{logic.name} ({logic.reading})", 'value': logic.name}
                         for logic in logics],
                value=first.name,
                clearable=False,
                style={'width': '360px'},
            ),
            dcc.Dropdown(
                id='operator-dropdown',
                options=[{'label': name, 'value': name} for name in operator_names],
                value='implies',
                clearable=False,
                style={'width': '240px'},
            ),
        ], style={'display': 'flex', 'gap': '12px'}),
        dcc.Graph(id='table-graph'),
        dcc.Markdown(id='table-markdown'),
        html.Ul(id='divergence-list'),
    ], style={'fontFamily': 'sans-serif', 'padding': '10px'})

    @app.callback(
        [Output('operator-dropdown', 'options'), Output('operator-dropdown', 'value')],
        [Input('logic-dropdown', 'value'), Input('operator-dropdown', 'value')]
    )
    def update_operators(logic_name, operator_name):
        """Offer only the operators the selected logic defines."""
        names, operator_name = select_operator(logic_name, operator_name, logics)
        return [{'label': name, 'value': name} for name in names], operator_name

    @app.callback(
        [Output('table-graph', 'figure'),
         Output('table-markdown', 'children'),
         Output('divergence-list', 'children')],
        [Input('logic-dropdown', 'value'), Input('operator-dropdown', 'value')]
    )
    def update_table(logic_name, operator_name):
        _, operator_name = select_operator(logic_name, operator_name, logics)
        fig, markdown, differences = render_truth_table(logic_name, operator_name, logics)
        if not differences:
            differences = ["Same table in every other logic"]
        return fig, markdown, [html.Li(d) for d in differences]

    return app
