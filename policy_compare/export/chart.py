import plotly.graph_objects as go

from policy_compare.comparison.models import ComparisonResult
from policy_compare.export.rows import format_premium

PALETTE = ("#3b82f6", "#10b981", "#f59e0b", "#8b5cf6", "#ec4899", "#6366f1")


def short_name(name: str) -> str:
    return name[:12] + "..." if len(name) > 15 else name


def build_premium_chart(result: ComparisonResult) -> go.Figure:
    """Bar chart of premium amounts, one bar per policy in result order."""
    policies = result.policies
    figure = go.Figure(
        go.Bar(
            x=[f"{index + 1}. {short_name(p.company_name)}" for index, p in enumerate(policies)],
            y=[p.premium_amount for p in policies],
            text=[format_premium(p) for p in policies],
            marker_color=[PALETTE[i % len(PALETTE)] for i in range(len(policies))],
            hovertext=[p.company_name for p in policies],
        )
    )
    figure.update_layout(
        title="Fiyat Karşılaştırması",
        height=320,
        margin={"t": 40, "r": 30, "l": 0, "b": 0},
        yaxis={"tickformat": ",d", "gridcolor": "#e2e8f0"},
        plot_bgcolor="white",
        separators=",.",
    )
    return figure
