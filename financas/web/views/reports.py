# financas/web/views/reports.py
import io

from flask import Blueprint, abort, flash, g, redirect, render_template, request, send_file, url_for

from financas.core import charts, db
from financas.core.pdf_export import build_month_report_pdf
from financas.core.reports import (
    current_month, group_by_category, month_bounds, report_filename,
    report_total, sorted_summary, to_chart_data,
)
from financas.web.guards import login_required, today

bp = Blueprint("reports", __name__, url_prefix="/reports")


def _selected_month():
    """Mês pedido na query string (AAAA-MM); inválido ou ausente vira o mês atual."""
    month = request.args.get("month") or current_month(today())
    try:
        start, end = month_bounds(month)
    except ValueError:
        flash(f"Mês inválido: '{month}'. Use o formato AAAA-MM.", "error")
        start, end = month_bounds(current_month(today()))
    # "2025-7" também é aceito; nome do arquivo e tela usam sempre AAAA-MM
    return current_month(start), start, end


def _month_expenses():
    month, start, end = _selected_month()
    return month, start, end, db.get_month_expenses(g.supabase_client, g.user.id, start, end)


@bp.route("/")
@login_required
def index():
    month, start, end, expenses = _month_expenses()
    grouped = group_by_category(expenses, start, end)
    return render_template(
        "reports.html",
        month=month,
        summary=sorted_summary(grouped),
        total=report_total(expenses),
        has_data=bool(grouped),
    )


@bp.route("/chart.png")
@login_required
def chart():
    month, start, end, expenses = _month_expenses()
    chart_buffer = charts.generate_category_pie_chart(to_chart_data(group_by_category(expenses, start, end)))
    if chart_buffer is None:
        abort(404)
    return send_file(chart_buffer, mimetype="image/png", download_name=f"despesas_{month}.png")


@bp.route("/export.pdf")
@login_required
def export_pdf():
    month, start, end, expenses = _month_expenses()
    if not expenses:
        flash("Sem dados neste mês para exportar.", "error")
        return redirect(url_for("reports.index", month=month))
    pdf_bytes = build_month_report_pdf(expenses, month, today())
    return send_file(
        io.BytesIO(pdf_bytes),
        mimetype="application/pdf",
        as_attachment=True,
        download_name=report_filename(month),
    )
