# financas/core/session.py
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, List, Optional

from supabase import Client

from financas.core.errors import AuthError

logger = logging.getLogger(__name__)


class AuthStatus(str, Enum):
    UNINITIALIZED = "uninitialized"
    LOADING = "loading"
    AUTHENTICATED = "authenticated"
    ANONYMOUS = "anonymous"


@dataclass
class AuthUser:
    id: str
    email: Optional[str] = None
    full_name: Optional[str] = None

    @classmethod
    def from_supabase(cls, user: Any) -> "AuthUser":
        metadata = getattr(user, "user_metadata", None) or {}
        return cls(id=user.id, email=getattr(user, "email", None), full_name=metadata.get("full_name"))


@dataclass
class SessionState:
    status: AuthStatus = AuthStatus.UNINITIALIZED
    user: Optional[AuthUser] = None
    access_token: Optional[str] = None
    refresh_token: Optional[str] = None

    @property
    def is_ready(self) -> bool:
        """As telas protegidas só renderizam depois que o estado sai de 'loading'."""
        return self.status in (AuthStatus.AUTHENTICATED, AuthStatus.ANONYMOUS)

    @property
    def is_authenticated(self) -> bool:
        return self.status == AuthStatus.AUTHENTICATED


Listener = Callable[[SessionState], None]


def _auth_message(e: Exception) -> str:
    return getattr(e, "message", None) or str(e)


class AuthSession:
    """Estado de autenticação explícito, injetado nas telas.

    Ciclo de vida: uninitialized -> loading -> authenticated | anonymous.
    Só muda por sign_in, sign_out e pelo listener de eventos do Supabase
    (renovação de token, sessão expirada). restore() faz a carga inicial a
    partir dos tokens guardados no cookie.
    """

    def __init__(self, supabase_client: Client):
        self.client = supabase_client
        self.state = SessionState()
        self._listeners: List[Listener] = []
        self._subscription = None

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def _set_state(self, state: SessionState) -> None:
        self.state = state
        for listener in list(self._listeners):
            listener(state)

    def _authenticated(self, response: Any) -> SessionState:
        session = response.session
        return SessionState(
            status=AuthStatus.AUTHENTICATED,
            user=AuthUser.from_supabase(response.user),
            access_token=session.access_token,
            refresh_token=session.refresh_token,
        )

    def _listen(self) -> None:
        if self._subscription is None:
            self._subscription = self.client.auth.on_auth_state_change(self._on_auth_event)

    def _on_auth_event(self, event: Any, session: Any) -> None:
        event_name = getattr(event, "value", event)
        if event_name == "SIGNED_OUT" or session is None:
            if self.state.status == AuthStatus.AUTHENTICATED:
                logger.info("Sessão encerrada pelo Supabase.")
            self._set_state(SessionState(status=AuthStatus.ANONYMOUS))
        elif event_name == "TOKEN_REFRESHED" and self.state.is_authenticated:
            self._set_state(SessionState(
                status=AuthStatus.AUTHENTICATED,
                user=self.state.user,
                access_token=session.access_token,
                refresh_token=session.refresh_token,
            ))

    def restore(self, access_token: Optional[str], refresh_token: Optional[str]) -> SessionState:
        """Recupera a sessão a partir dos tokens salvos. Sem tokens válidos, fica anônimo."""
        self._set_state(SessionState(status=AuthStatus.LOADING))
        if not access_token or not refresh_token:
            self._set_state(SessionState(status=AuthStatus.ANONYMOUS))
            return self.state
        try:
            response = self.client.auth.set_session(access_token, refresh_token)
        except Exception as e:
            logger.info(f"Sessão salva inválida ou expirada: {e}")
            self._set_state(SessionState(status=AuthStatus.ANONYMOUS))
            return self.state
        if response.user is None or response.session is None:
            self._set_state(SessionState(status=AuthStatus.ANONYMOUS))
        else:
            self._set_state(self._authenticated(response))
            self._listen()
        return self.state

    def sign_in(self, email: str, password: str) -> SessionState:
        try:
            response = self.client.auth.sign_in_with_password({"email": email, "password": password})
        except Exception as e:
            logger.info(f"Falha no login de {email}: {e}")
            raise AuthError(_auth_message(e)) from e
        if response.user is None or response.session is None:
            raise AuthError("Não foi possível iniciar a sessão.")
        self._set_state(self._authenticated(response))
        self._listen()
        return self.state

    def sign_up(self, email: str, password: str, full_name: str) -> None:
        """Cria a conta. O usuário confirma o e-mail ou faz login em seguida."""
        try:
            self.client.auth.sign_up({
                "email": email,
                "password": password,
                "options": {"data": {"full_name": full_name}},
            })
        except Exception as e:
            logger.info(f"Falha no cadastro de {email}: {e}")
            raise AuthError(_auth_message(e)) from e

    def sign_out(self) -> None:
        try:
            self.client.auth.sign_out()
        except Exception as e:
            logger.error(f"Erro ao encerrar sessão no Supabase: {e}")
        self._set_state(SessionState(status=AuthStatus.ANONYMOUS))
