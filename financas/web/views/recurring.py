# financas/web/views/recurring.py
from flask import Blueprint, abort, flash, g, redirect, render_template, request, url_for

from financas.core import db
from financas.core.errors import BackendError, ValidationError
from financas.core.models import EXPENSE
from financas.core.money import to_minor_units
from financas.web.forms import parse_recurring_form
from financas.web.guards import login_required, today

bp = Blueprint("recurring", __name__, url_prefix="/recurring")


@bp.route("/")
@login_required
def index():
    """Contas fixas mensais, ordenadas pelo dia de vencimento."""
    return render_template("recurring.html", items=db.get_recurring_expenses(g.supabase_client))


def _render_form(item=None, form=None):
    categories = db.get_categories(g.supabase_client, g.user.id, EXPENSE)
    if form is None:
        form = {
            "title": item.title if item else "",
            "amount": to_minor_units(item.amount) if item else "",
            "day_of_month": item.day_of_month if item else 5,
            # conta nova já vem com a primeira categoria selecionada
            "category_id": item.category_id if item else (categories[0].id if categories else ""),
        }
    return render_template("recurring_form.html", item=item, form=form, categories=categories)


def _save(item=None):
    try:
        parsed = parse_recurring_form(request.form, g.user.id, item.id if item else None)
        db.save_recurring(g.supabase_client, parsed)
        return redirect(url_for("recurring.index"))
    except ValidationError as e:
        flash(str(e), "error")
    except BackendError as e:
        flash(f"Erro ao salvar conta recorrente: {e}", "error")
    return _render_form(item, request.form)


@bp.route("/new", methods=["GET", "POST"])
@login_required
def new():
    if request.method == "POST":
        return _save()
    return _render_form()


@bp.route("/<recurring_id>/edit", methods=["GET", "POST"])
@login_required
def edit(recurring_id):
    item = db.get_recurring_expense(g.supabase_client, recurring_id)
    if item is None:
        abort(404)
    if request.method == "POST":
        return _save(item)
    return _render_form(item)


@bp.route("/<recurring_id>/delete", methods=["POST"])
@login_required
def delete(recurring_id):
    result = db.delete_recurring(g.supabase_client, recurring_id)
    if not result.ok:
        flash(f"Erro ao excluir: {result.message}", "error")
    return redirect(url_for("recurring.index"))


@bp.route("/<recurring_id>/launch", methods=["POST"])
@login_required
def launch(recurring_id):
    """Lança a conta fixa como despesa com a data de hoje."""
    item = db.get_recurring_expense(g.supabase_client, recurring_id)
    if item is None:
        abort(404)
    result = db.launch_recurring(g.supabase_client, item, g.user.id, today())
    if result.ok:
        flash("Despesa lançada com sucesso!", "success")
    else:
        flash(f"Erro ao lançar: {result.message}", "error")
    return redirect(url_for("recurring.index"))
