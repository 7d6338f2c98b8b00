from datetime import date

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from theme import ALL, CHART_LAYOUT, COLORS, api_get, brl, inject_css, period_param, txn_row_html


st.set_page_config(
    page_title="Fundify | Dashboard",
    page_icon="💰",
    layout="wide",
)
inject_css()

st.markdown('<div class="page-title">💰 Fundify</div>', unsafe_allow_html=True)
st.markdown('<div class="page-subtitle">Saldo, receitas, despesas e análise financeira</div>', unsafe_allow_html=True)

this_year = date.today().year
year = st.selectbox("Ano", [ALL] + list(range(this_year, this_year - 6, -1)), index=1)

try:
    res = api_get("/api/dashboard", params={"year": period_param(year)} if period_param(year) else None)
    res.raise_for_status()
    data = res.json()
except Exception as e:
    st.error(f"Erro ao carregar dados: {e}")
    if st.button("Tentar novamente"):
        st.rerun()
    st.stop()

# ── Balance Cards ───────────────────────────────────────
balance = data["balance"]
c1, c2, c3, c4 = st.columns(4)
c1.metric("Saldo Total", brl(balance["total"]))
c2.metric("Receitas", brl(balance["income"]))
c3.metric("Despesas", brl(balance["expenses"]))
c4.metric("Economia", brl(balance["savings"]))

st.divider()

left, right = st.columns([0.62, 0.38], gap="large")

# ── Charts ──────────────────────────────────────────────
with left:
    st.markdown("### Análise Financeira")
    tab_monthly, tab_categories = st.tabs(["Mensal", "Categorias"])

    with tab_monthly:
        monthly = pd.DataFrame(data["charts"]["monthly"])
        fig = go.Figure()
        fig.add_trace(go.Scatter(x=monthly["month"], y=monthly["income"], name="Receitas",
                                 mode="lines+markers", line=dict(color=COLORS["green"], width=3)))
        fig.add_trace(go.Scatter(x=monthly["month"], y=monthly["expenses"], name="Despesas",
                                 mode="lines+markers", line=dict(color=COLORS["red"], width=3)))
        fig.add_trace(go.Scatter(x=monthly["month"], y=monthly["finalBalance"], name="Saldo",
                                 mode="lines", line=dict(color=COLORS["accent"], width=2, dash="dot")))
        fig.update_layout(**CHART_LAYOUT, height=350)
        st.plotly_chart(fig, use_container_width=True)

        with st.expander("Tabela mensal"):
            table = monthly.rename(columns={
                "month": "Mês", "initialBalance": "Saldo Inicial", "income": "Receitas",
                "expenses": "Despesas", "operationalBalance": "Resultado", "finalBalance": "Saldo Final",
            })
            st.dataframe(table, use_container_width=True, hide_index=True)

    with tab_categories:
        expenses = data["charts"]["categories"]["expenses"]
        if not expenses:
            st.info("Nenhuma despesa no período.")
        else:
            fig_cat = go.Figure(go.Bar(
                x=[c["name"] for c in expenses],
                y=[c["value"] for c in expenses],
                marker_color=COLORS["accent"],
            ))
            fig_cat.update_layout(**CHART_LAYOUT, height=350)
            st.plotly_chart(fig_cat, use_container_width=True)

# ── Recent Transactions ─────────────────────────────────
with right:
    st.markdown("### Transações Recentes")
    txns = data["transactions"]
    if not txns:
        st.info("Nenhuma transação cadastrada. Use a página **Importar** ou **Transações**.")
    rows = "".join(txn_row_html(t) for t in txns)
    st.markdown(rows, unsafe_allow_html=True)

st.divider()

try:
    h = api_get("/api/health", timeout=5).json()
    st.caption(f"● Backend online · {h.get('env', '')} · {h.get('transactions', 0)} transações")
except Exception:
    st.caption("○ Backend offline")
