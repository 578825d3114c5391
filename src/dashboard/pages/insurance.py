"""Insurance preview page: the estimate a wholesaler sees while filling in a deal.

Missing or invalid inputs show "Preview unavailable" with the field messages
instead of a zeroed number.
"""

import dash
from dash import html, dcc, callback, Input, Output, State
import plotly.graph_objects as go

from src.engine.insurance import estimate_insurance, explain_estimate
from src.engine.insurance_validation import validate_estimate_input
from src.models.insurance import InsuranceEstimate

dash.register_page(__name__, path="/", name="Insurance")

BTN_STYLE = {
    "padding": "0.75rem 2rem",
    "fontSize": "1rem",
    "backgroundColor": "#1a1a2e",
    "color": "white",
    "border": "none",
    "cursor": "pointer",
}

FIELD_STYLE = {"width": "100%", "padding": "0.5rem", "fontSize": "0.95rem"}

RISK_OPTIONS = [
    {"label": " Flood zone", "value": "flood"},
    {"label": " Wildfire", "value": "wildfire"},
    {"label": " Hurricane", "value": "hurricane"},
    {"label": " Hail", "value": "hail"},
]

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------


def _field(label, component):
    return html.Div([
        html.Label(label, style={"fontSize": "0.85rem", "marginBottom": "0.25rem", "display": "block"}),
        component,
    ], style={"flex": "1", "minWidth": "140px"})


layout = html.Div([
    html.H2("Insurance Estimate"),
    html.P("Estimate only. Actual quotes depend on carrier underwriting."),

    html.Div([
        _field("Sqft", dcc.Input(id="ins-sqft", type="number", placeholder="1850", style=FIELD_STYLE)),
        _field("Year Built", dcc.Input(id="ins-year-built", type="number", placeholder="1995", style=FIELD_STYLE)),
        _field("Roof Age (years)", dcc.Input(id="ins-roof-age", type="number", placeholder="12", style=FIELD_STYLE)),
        _field("Replacement Cost Override ($)", dcc.Input(
            id="ins-replacement-override", type="number", placeholder="optional", style=FIELD_STYLE,
        )),
    ], style={"display": "flex", "gap": "1rem", "marginBottom": "0.75rem"}),

    html.Div([
        _field("Occupancy", dcc.Dropdown(
            id="ins-occupancy",
            options=[
                {"label": "Owner occupied", "value": "owner"},
                {"label": "Rental", "value": "rental"},
                {"label": "Vacant", "value": "vacant"},
            ],
            value="rental",
            clearable=False,
        )),
        _field("Construction", dcc.Dropdown(
            id="ins-construction",
            options=[
                {"label": "Frame", "value": "frame"},
                {"label": "Masonry", "value": "masonry"},
                {"label": "Unknown", "value": "unknown"},
            ],
            value="unknown",
            clearable=False,
        )),
        _field("Deductible", dcc.Dropdown(
            id="ins-deductible",
            options=[
                {"label": "$1,000", "value": 1000},
                {"label": "$2,500", "value": 2500},
                {"label": "$5,000", "value": 5000},
            ],
            value=2500,
            clearable=False,
        )),
    ], style={"display": "flex", "gap": "1rem", "marginBottom": "0.75rem"}),

    dcc.Checklist(
        id="ins-risk-flags",
        options=RISK_OPTIONS,
        value=[],
        inline=True,
        style={"marginBottom": "1rem"},
    ),

    html.Button("Estimate", id="ins-estimate-btn", n_clicks=0, style=BTN_STYLE),

    html.Div(id="ins-results", style={"marginTop": "2rem"}),
])


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def _multiplier_chart(estimate: InsuranceEstimate) -> go.Figure:
    b = estimate.breakdown
    labels = ["Occupancy", "Deductible", "Risk"]
    values = [
        float(b.occupancy_multiplier),
        float(b.deductible_multiplier),
        float(b.risk_multiplier),
    ]
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=labels,
        y=values,
        marker_color=["#e94560" if v > 1 else "#2ecc71" if v < 1 else "#1a1a2e" for v in values],
        text=[f"{v:.2f}x" for v in values],
        textposition="outside",
    ))
    fig.add_hline(y=1.0, line_dash="dash", line_color="#888")
    fig.update_layout(title="Premium Multipliers", yaxis_title="Multiplier", showlegend=False)
    return fig


def _render_estimate(estimate: InsuranceEstimate):
    return html.Div([
        html.Div([
            html.Div([
                html.Div("Monthly", style={"fontSize": "0.85rem", "color": "#666"}),
                html.Div(f"${float(estimate.monthly):,.0f} / mo", style={"fontSize": "1.75rem", "fontWeight": "bold"}),
            ], style={"marginRight": "3rem"}),
            html.Div([
                html.Div("Annual", style={"fontSize": "0.85rem", "color": "#666"}),
                html.Div(f"${float(estimate.annual):,.0f} / yr", style={"fontSize": "1.75rem", "fontWeight": "bold"}),
            ]),
        ], style={"display": "flex", "marginBottom": "1rem"}),
        html.Details([
            html.Summary("How we calculate insurance", style={"cursor": "pointer"}),
            html.Ul([html.Li(line) for line in explain_estimate(estimate)]),
        ], open=True),
        dcc.Graph(figure=_multiplier_chart(estimate)),
    ])


def _render_unavailable(errors: dict[str, str]):
    return html.Div([
        html.H3("Preview unavailable", style={"color": "#e94560"}),
        html.Ul([
            html.Li(f"{field.replace('_', ' ')}: {message}")
            for field, message in sorted(errors.items())
        ]),
    ])


@callback(
    Output("ins-results", "children"),
    Input("ins-estimate-btn", "n_clicks"),
    [
        State("ins-sqft", "value"),
        State("ins-year-built", "value"),
        State("ins-roof-age", "value"),
        State("ins-replacement-override", "value"),
        State("ins-occupancy", "value"),
        State("ins-construction", "value"),
        State("ins-deductible", "value"),
        State("ins-risk-flags", "value"),
    ],
    prevent_initial_call=True,
)
def run_estimate(
    n_clicks,
    sqft, year_built, roof_age, replacement_override,
    occupancy, construction, deductible, risk_flags,
):
    selected = set(risk_flags or [])
    result = validate_estimate_input({
        "sqft": sqft,
        "year_built": year_built,
        "roof_age_years": roof_age,
        "replacement_cost_override": replacement_override,
        "occupancy": occupancy,
        "construction": construction,
        "deductible": deductible,
        "risk_flags": {opt["value"]: opt["value"] in selected for opt in RISK_OPTIONS},
    })
    if not result.ok:
        return _render_unavailable(result.errors)
    return _render_estimate(estimate_insurance(result.value))
