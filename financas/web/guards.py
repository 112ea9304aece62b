# financas/web/guards.py
import functools
import logging

from flask import current_app, g, redirect, session, url_for

from financas.core import db
from financas.core.recurring import evaluate_due
from financas.core.session import AuthSession, SessionState

logger = logging.getLogger(__name__)

ACCESS_TOKEN = "sb_access_token"
REFRESH_TOKEN = "sb_refresh_token"


def today():
    return current_app.config["TODAY"]()


def new_auth_session() -> AuthSession:
    """Cliente Supabase novo por requisição, com os tokens deste navegador."""
    auth = AuthSession(current_app.config["SUPABASE_CLIENT_FACTORY"]())
    auth.subscribe(store_tokens)
    return auth


def store_tokens(state: SessionState) -> None:
    # Mantém o cookie em sincronia com renovações e expirações vindas do Supabase
    if state.is_authenticated:
        session[ACCESS_TOKEN] = state.access_token
        session[REFRESH_TOKEN] = state.refresh_token
    elif state.is_ready:
        session.pop(ACCESS_TOKEN, None)
        session.pop(REFRESH_TOKEN, None)


def login_required(view):
    """Bloqueia a tela até a sessão ser resolvida; anônimo vai para o login.

    Também recalcula os avisos de contas fixas a cada carregamento de página.
    """
    @functools.wraps(view)
    def wrapped(*args, **kwargs):
        auth = new_auth_session()
        state = auth.restore(session.get(ACCESS_TOKEN), session.get(REFRESH_TOKEN))
        if not state.is_authenticated:
            return redirect(url_for("auth.login"))

        g.auth = auth
        g.user = state.user
        g.supabase_client = auth.client
        g.notifications = evaluate_due(
            db.get_recurring_expenses(auth.client, only_active=True),
            today(),
            current_app.config["DUE_SOON_WINDOW_DAYS"],
        )
        return view(*args, **kwargs)
    return wrapped
