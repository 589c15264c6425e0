import plotly.graph_objects as go

from scanner import score_color, SCORE_HEX


def score_gauge(result) -> go.Figure:
    color = SCORE_HEX[score_color(result.score)]
    fig = go.Figure(go.Indicator(
        mode="gauge+number",
        value=result.score,
        gauge={
            'axis': {'range': [0, 100]},
            'bar': {'color': color, 'thickness': 0.3},
            'bgcolor': "#e2e8f0",
        },
        number={'suffix': "%", 'font': {'color': color}},
    ))
    fig.update_layout(height=260, margin=dict(l=10, r=10, t=10, b=10))
    return fig


def skill_gap_radar(result) -> go.Figure:
    categories = [g.category for g in result.skill_gap_analysis]
    scores = [g.score for g in result.skill_gap_analysis]
    # repeat the first point to close the polygon
    fig = go.Figure(go.Scatterpolar(
        r=scores + scores[:1],
        theta=categories + categories[:1],
        fill="toself",
        name="Skill Match",
        line={'color': "#2563eb"},
        fillcolor="rgba(59, 130, 246, 0.5)",
    ))
    fig.update_layout(
        polar={'radialaxis': {'range': [0, 100], 'showticklabels': False}},
        showlegend=False,
        height=320,
        margin=dict(l=40, r=40, t=20, b=20),
    )
    return fig
