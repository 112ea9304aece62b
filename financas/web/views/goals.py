# financas/web/views/goals.py
from flask import Blueprint, abort, flash, g, redirect, render_template, request, url_for

from financas.core import db
from financas.core.errors import BackendError, ValidationError
from financas.core.goals import is_achieved, progress, remaining
from financas.core.models import GOAL_COLORS
from financas.core.money import to_minor_units
from financas.web.forms import parse_goal_form
from financas.web.guards import login_required

bp = Blueprint("goals", __name__, url_prefix="/goals")


@bp.route("/")
@login_required
def index():
    goals = db.get_goals(g.supabase_client)
    cards = [{
        "goal": goal,
        "progress": progress(goal),
        "remaining": remaining(goal),
        "achieved": is_achieved(goal),
    } for goal in goals]
    return render_template("goals.html", cards=cards)


def _render_form(goal=None, form=None):
    if form is None:
        # edição começa dos valores salvos, convertidos para centavos
        form = {
            "title": goal.title if goal else "",
            "target_amount": to_minor_units(goal.target_amount) if goal else "",
            "current_amount": to_minor_units(goal.current_amount) if goal else "0",
            "deadline": goal.deadline.isoformat() if goal and goal.deadline else "",
            "color": goal.color if goal else "",
        }
    return render_template("goal_form.html", goal=goal, form=form, colors=GOAL_COLORS)


def _save(goal=None):
    try:
        db.save_goal(g.supabase_client, parse_goal_form(request.form, g.user.id, goal.id if goal else None))
        return redirect(url_for("goals.index"))
    except ValidationError as e:
        flash(str(e), "error")
    except BackendError as e:
        flash(f"Erro ao salvar meta: {e}", "error")
    return _render_form(goal, request.form)


@bp.route("/new", methods=["GET", "POST"])
@login_required
def new():
    if request.method == "POST":
        return _save()
    return _render_form()


@bp.route("/<goal_id>/edit", methods=["GET", "POST"])
@login_required
def edit(goal_id):
    goal = db.get_goal(g.supabase_client, goal_id)
    if goal is None:
        abort(404)
    if request.method == "POST":
        return _save(goal)
    return _render_form(goal)


@bp.route("/<goal_id>/delete", methods=["POST"])
@login_required
def delete(goal_id):
    result = db.delete_goal(g.supabase_client, goal_id)
    if not result.ok:
        flash(f"Erro ao excluir meta: {result.message}", "error")
    return redirect(url_for("goals.index"))
