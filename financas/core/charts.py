# financas/core/charts.py
import io
from typing import List, Union

import matplotlib
matplotlib.use("Agg")  # servidor, sem janela
import matplotlib.pyplot as plt
import matplotlib.ticker as mticker
from matplotlib.figure import Figure
import pandas as pd

from financas.core.models import CategoryTotal, DailyPoint
from financas.utils.text_utils import format_date_br

# Configurações globais para os gráficos (cores, fontes, etc.)
plt.style.use('seaborn-v0_8-darkgrid')
plt.rcParams['font.family'] = 'sans-serif'
plt.rcParams['font.size'] = 10
plt.rcParams['axes.labelsize'] = 12
plt.rcParams['axes.titlesize'] = 14
plt.rcParams['legend.fontsize'] = 10

COLORS = {
    'Receitas': '#10b981',
    'Despesas': '#ef4444',
    # mesmas cores das fatias do relatório
    'Fatias': ['#0088FE', '#00C49F', '#FFBB28', '#FF8042', '#8884d8', '#82ca9d', '#ffc658'],
}


def daily_series_frame(series: List[DailyPoint]) -> pd.DataFrame:
    """DataFrame indexado por data (DD/MM) com as colunas Receitas e Despesas."""
    df = pd.DataFrame(
        [{'data': format_date_br(p.date)[:5], 'Receitas': float(p.income), 'Despesas': float(p.expense)}
         for p in series],
        columns=['data', 'Receitas', 'Despesas'],
    )
    return df.set_index('data')


def category_frame(items: List[CategoryTotal]) -> pd.DataFrame:
    return pd.DataFrame(
        [{'categoria': i.name, 'valor': float(i.value)} for i in items],
        columns=['categoria', 'valor'],
    )


def _new_figure(figsize) -> Figure:
    # Figure fora do pyplot: cada requisição desenha na sua própria figura
    return Figure(figsize=figsize)


def _to_png(fig: Figure) -> io.BytesIO:
    fig.tight_layout()
    buf = io.BytesIO()
    fig.savefig(buf, format='png', dpi=150)
    buf.seek(0)
    return buf


def generate_daily_flow_chart(series: List[DailyPoint]) -> Union[io.BytesIO, None]:
    """Gráfico de área de receitas x despesas dos últimos dias com movimento."""
    df = daily_series_frame(series)
    if df.empty:
        return None

    fig = _new_figure((10, 4))
    ax = fig.subplots()
    x = range(len(df.index))
    for column in ('Receitas', 'Despesas'):
        ax.plot(x, df[column], color=COLORS[column], label=column)
        ax.fill_between(x, df[column], color=COLORS[column], alpha=0.3)

    ax.set_xticks(list(x))
    ax.set_xticklabels(df.index.tolist())
    ax.set_title('Fluxo Financeiro', fontweight='bold')
    ax.yaxis.set_major_formatter(mticker.FormatStrFormatter('R$%.2f'))
    ax.legend()
    return _to_png(fig)


def generate_category_pie_chart(items: List[CategoryTotal]) -> Union[io.BytesIO, None]:
    """Gráfico de pizza das despesas por categoria do mês."""
    df = category_frame(items)
    if df.empty or df['valor'].sum() <= 0:
        return None

    colors = [COLORS['Fatias'][i % len(COLORS['Fatias'])] for i in range(len(df))]
    fig = _new_figure((7, 7))
    ax = fig.subplots()
    ax.pie(df['valor'], labels=df['categoria'], colors=colors, autopct='%1.1f%%', startangle=90)
    ax.set_title('Despesas por Categoria', fontweight='bold')
    ax.axis('equal')
    return _to_png(fig)
