# financas/web/views/transactions.py
from flask import Blueprint, flash, g, redirect, render_template, request, url_for

from financas.core import db
from financas.core.errors import BackendError, ValidationError
from financas.core.models import TRANSACTION_TYPES, EXPENSE
from financas.web.forms import default_date, parse_transaction_form
from financas.web.guards import login_required, today

bp = Blueprint("transactions", __name__, url_prefix="/transactions")

NEXT_PAGES = ("transactions.index", "dashboard.index")


def _next_page() -> str:
    page = request.values.get("next")
    return page if page in NEXT_PAGES else "transactions.index"


@bp.route("/")
@login_required
def index():
    """Histórico completo de entradas e saídas."""
    return render_template("transactions.html", transactions=db.get_transactions(g.supabase_client))


@bp.route("/new", methods=["GET", "POST"])
@login_required
def new():
    type_ = request.values.get("type", EXPENSE)
    if type_ not in TRANSACTION_TYPES:
        type_ = EXPENSE

    if request.method == "POST":
        try:
            transaction = parse_transaction_form(request.form, g.user.id)
            db.add_transaction(g.supabase_client, transaction)
            return redirect(url_for(_next_page()))
        except ValidationError as e:
            flash(str(e), "error")
        except BackendError as e:
            flash(f"Erro ao salvar transação: {e}", "error")

    # Primeira abertura para um tipo sem categorias cria as categorias padrão
    try:
        categories = db.ensure_default_categories(g.supabase_client, g.user.id, type_)
    except BackendError as e:
        flash(f"Erro ao carregar categorias: {e}", "error")
        categories = []

    return render_template(
        "transaction_form.html",
        type_=type_,
        categories=categories,
        form=request.form,
        default_date=default_date(today()),
        next=_next_page(),
    )


@bp.route("/<transaction_id>/delete", methods=["POST"])
@login_required
def delete(transaction_id):
    result = db.delete_transaction(g.supabase_client, transaction_id)
    if not result.ok:
        flash(f"Erro ao excluir transação: {result.message}", "error")
    return redirect(url_for("transactions.index"))
