# financas/web/views/auth.py
from flask import Blueprint, flash, g, redirect, render_template, request, session, url_for

from financas.core.errors import AuthError
from financas.web.guards import login_required, new_auth_session

bp = Blueprint("auth", __name__)


@bp.route("/login", methods=["GET", "POST"])
def login():
    error = None
    if request.method == "POST":
        auth = new_auth_session()
        try:
            auth.sign_in(request.form.get("email", ""), request.form.get("password", ""))
            return redirect(url_for("dashboard.index"))
        except AuthError as e:
            error = str(e)
    return render_template("login.html", error=error)


@bp.route("/register", methods=["GET", "POST"])
def register():
    error = None
    if request.method == "POST":
        auth = new_auth_session()
        try:
            auth.sign_up(
                request.form.get("email", ""),
                request.form.get("password", ""),
                request.form.get("full_name", ""),
            )
            flash("Cadastro realizado! Verifique seu email ou faça login.", "success")
            return redirect(url_for("auth.login"))
        except AuthError as e:
            error = str(e)
    return render_template("register.html", error=error)


@bp.route("/logout", methods=["POST"])
@login_required
def logout():
    g.auth.sign_out()
    session.clear()
    return redirect(url_for("auth.login"))
