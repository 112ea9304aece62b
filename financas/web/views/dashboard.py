# financas/web/views/dashboard.py
from flask import Blueprint, abort, current_app, g, render_template, send_file

from financas.core import charts, db
from financas.core.aggregator import compute_balance, compute_daily_series, recent_transactions
from financas.web.guards import login_required

bp = Blueprint("dashboard", __name__)


@bp.route("/")
@login_required
def index():
    """Visão geral: saldo, fluxo dos últimos dias com movimento e transações recentes."""
    transactions = db.get_transactions(g.supabase_client)
    return render_template(
        "dashboard.html",
        balance=compute_balance(transactions),
        has_chart=bool(compute_daily_series(transactions)),
        recent=recent_transactions(transactions, current_app.config["RECENT_TRANSACTIONS_LIMIT"]),
    )


@bp.route("/dashboard/chart.png")
@login_required
def chart():
    series = compute_daily_series(db.get_transactions(g.supabase_client))
    chart_buffer = charts.generate_daily_flow_chart(series)
    if chart_buffer is None:
        abort(404)
    return send_file(chart_buffer, mimetype="image/png", download_name="fluxo_financeiro.png")
