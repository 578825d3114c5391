"""Dash shell for the insurance preview page.

Run with ``python -m src.dashboard.app``; the page itself lives in
``pages/insurance.py``.
"""

import logging

from dash import Dash, html, page_container

from src.config import settings

TITLE = "Deal Insurance Estimator"
NAV_STYLE = {
    "display": "flex",
    "justifyContent": "space-between",
    "alignItems": "baseline",
    "backgroundColor": "#1a1a2e",
    "color": "white",
    "padding": "1rem 2rem",
}

app = Dash(__name__, use_pages=True, title=TITLE)

app.layout = html.Div([
    html.Header([
        html.Strong(TITLE, style={"fontSize": "1.25rem"}),
        html.A("API docs", href=f"{settings.api_base}/docs", style={"color": "white"}),
    ], style=NAV_STYLE),
    html.Main(page_container, style={"maxWidth": "960px", "margin": "2rem auto", "padding": "0 1rem"}),
])


if __name__ == "__main__":
    logging.basicConfig(level=settings.log_level)
    app.run(debug=settings.debug, port=settings.dashboard_port)
