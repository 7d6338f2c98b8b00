"""
Fundify — shared design system
CSS, currency formatting, API helpers and chart defaults for all Streamlit pages.
"""
import html
import os
import httpx

BACKEND_URL = os.getenv("FUNDIFY_BACKEND_URL", "http://localhost:3001")

MONTH_LABELS = ["Jan", "Fev", "Mar", "Abr", "Mai", "Jun", "Jul", "Ago", "Set", "Out", "Nov", "Dez"]
ALL = "Todos"


# ── Brazilian Real formatter ────────────────────────────
def brl(x, decimals: int = 2) -> str:
    """1234.5 -> 'R$ 1.234,50' (pt-BR separators)."""
    try:
        v = round(float(x), decimals)
    except (TypeError, ValueError):
        return f"R$ {x}"
    if v == 0:
        v = 0.0
    s = f"{abs(v):,.{decimals}f}"
    s = s.replace(",", "_").replace(".", ",").replace("_", ".")
    return ("-R$ " if v < 0 else "R$ ") + s


def period_param(value):
    """Selectbox value -> query param ('Todos' means no filter)."""
    if value in (None, ALL):
        return None
    if value in MONTH_LABELS:
        return str(MONTH_LABELS.index(value) + 1)
    return str(value)


def txn_row_html(t: dict) -> str:
    """One recent-transaction row; user-entered text is escaped."""
    css = "txn-income" if t["type"] == "income" else "txn-expense"
    return (
        f'<div class="txn-row"><div>{html.escape(t.get("description") or "—")}'
        f'<div class="txn-meta">{t["date"]} · {html.escape(t.get("category") or "")}</div></div>'
        f'<div class="{css}">{brl(t["amount"])}</div></div>'
    )


# ── API helpers ─────────────────────────────────────────
def api_get(path: str, params=None, timeout: int = 30):
    with httpx.Client(timeout=timeout) as c:
        return c.get(f"{BACKEND_URL}{path}", params=params)


def api_post(path: str, json_body=None, files=None, data=None, timeout: int = 60):
    with httpx.Client(timeout=timeout) as c:
        return c.post(f"{BACKEND_URL}{path}", json=json_body, files=files, data=data)


def api_delete(path: str, timeout: int = 30):
    with httpx.Client(timeout=timeout) as c:
        return c.delete(f"{BACKEND_URL}{path}")


# ── Master CSS ──────────────────────────────────────────
FUNDIFY_CSS = """
<style>
:root {
    --bg-primary:   #0F172A;
    --bg-card:      #1E293B;
    --border:       #334155;
    --accent:       #6366F1;
    --accent-glow:  rgba(99,102,241,0.18);
    --green:        #10B981;
    --red:          #EF4444;
    --text:         #F1F5F9;
    --text-muted:   #94A3B8;
    --radius:       12px;
    --radius-sm:    8px;
}

.stApp,
div[data-testid="stAppViewContainer"] {
    background-color: var(--bg-primary) !important;
    color: var(--text);
}

/* ───── Balance Cards ───── */
div[data-testid="metric-container"] {
    background: var(--bg-card);
    border: 1px solid var(--border);
    border-left: 4px solid var(--accent);
    border-radius: var(--radius);
    padding: 16px 20px;
}
div[data-testid="metric-container"] label {
    color: var(--text-muted) !important;
    font-size: 13px !important;
    text-transform: uppercase;
}

/* ───── Tabs ───── */
.stTabs [data-baseweb="tab-list"] {
    gap: 4px;
    background: var(--bg-card);
    border-radius: var(--radius);
    padding: 4px;
}
.stTabs [aria-selected="true"] {
    background: var(--accent) !important;
    color: var(--text) !important;
    border-radius: var(--radius-sm);
}

/* ───── Transactions ───── */
.txn-row {
    display: flex;
    justify-content: space-between;
    padding: 10px 0;
    border-bottom: 1px solid var(--border);
}
.txn-income  { color: var(--green); font-weight: 700; }
.txn-expense { color: var(--red);   font-weight: 700; }
.txn-meta    { color: var(--text-muted); font-size: 12px; }

/* ───── Page Title ───── */
.page-title {
    font-size: 30px;
    font-weight: 800;
    color: var(--text);
    margin-bottom: 4px;
}
.page-subtitle {
    color: var(--text-muted);
    font-size: 14px;
    margin-bottom: 20px;
}
</style>
"""


def inject_css():
    """Inject the shared Fundify CSS into the current Streamlit page."""
    import streamlit as st
    st.markdown(FUNDIFY_CSS, unsafe_allow_html=True)


# ── Chart theme defaults ────────────────────────────────
CHART_LAYOUT = dict(
    template="plotly_dark",
    paper_bgcolor="#0F172A",
    plot_bgcolor="#1E293B",
    font_color="#F1F5F9",
    font=dict(family="Inter, sans-serif"),
    margin=dict(l=20, r=20, t=20, b=20),
)

COLORS = {
    "accent": "#6366F1",
    "purple": "#8B5CF6",
    "pink":   "#EC4899",
    "green":  "#10B981",
    "yellow": "#F59E0B",
    "red":    "#EF4444",
}
