# tests/test_session.py
import unittest
from types import SimpleNamespace
from unittest.mock import MagicMock

from financas.core.errors import AuthError
from financas.core.session import AuthSession, AuthStatus


def auth_response(user_id="u1", access="at", refresh="rt"):
    return SimpleNamespace(
        user=SimpleNamespace(id=user_id, email="ana@example.com", user_metadata={"full_name": "Ana"}),
        session=SimpleNamespace(access_token=access, refresh_token=refresh),
    )


class TestAuthSession(unittest.TestCase):
    def setUp(self):
        self.client = MagicMock()
        self.auth = AuthSession(self.client)
        self.seen = []
        self.auth.subscribe(lambda state: self.seen.append(state.status))

    def test_starts_uninitialized(self):
        self.assertEqual(AuthSession(self.client).state.status, AuthStatus.UNINITIALIZED)
        self.assertFalse(AuthSession(self.client).state.is_ready)

    def test_restore_without_tokens_is_anonymous(self):
        state = self.auth.restore(None, None)
        self.assertEqual(state.status, AuthStatus.ANONYMOUS)
        self.assertTrue(state.is_ready)
        self.assertEqual(self.seen, [AuthStatus.LOADING, AuthStatus.ANONYMOUS])
        self.client.auth.set_session.assert_not_called()

    def test_restore_with_valid_tokens(self):
        self.client.auth.set_session.return_value = auth_response()
        state = self.auth.restore("at", "rt")
        self.assertTrue(state.is_authenticated)
        self.assertEqual(state.user.full_name, "Ana")
        self.assertEqual(self.seen, [AuthStatus.LOADING, AuthStatus.AUTHENTICATED])
        self.client.auth.on_auth_state_change.assert_called_once()

    def test_restore_with_expired_tokens(self):
        self.client.auth.set_session.side_effect = Exception("Invalid Refresh Token")
        state = self.auth.restore("at", "rt")
        self.assertEqual(state.status, AuthStatus.ANONYMOUS)

    def test_sign_in(self):
        self.client.auth.sign_in_with_password.return_value = auth_response()
        state = self.auth.sign_in("ana@example.com", "segredo")
        self.assertTrue(state.is_authenticated)
        self.assertEqual(state.access_token, "at")
        self.client.auth.sign_in_with_password.assert_called_once_with(
            {"email": "ana@example.com", "password": "segredo"})

    def test_sign_in_failure_keeps_backend_message(self):
        self.client.auth.sign_in_with_password.side_effect = Exception("Invalid login credentials")
        with self.assertRaises(AuthError) as ctx:
            self.auth.sign_in("ana@example.com", "errada")
        self.assertEqual(str(ctx.exception), "Invalid login credentials")
        self.assertEqual(self.seen, [])

    def test_sign_in_without_session(self):
        self.client.auth.sign_in_with_password.return_value = SimpleNamespace(user=None, session=None)
        with self.assertRaises(AuthError):
            self.auth.sign_in("ana@example.com", "segredo")

    def test_sign_up_sends_full_name(self):
        self.auth.sign_up("ana@example.com", "segredo", "Ana Souza")
        self.client.auth.sign_up.assert_called_once_with({
            "email": "ana@example.com",
            "password": "segredo",
            "options": {"data": {"full_name": "Ana Souza"}},
        })

    def test_sign_up_failure(self):
        self.client.auth.sign_up.side_effect = Exception("User already registered")
        with self.assertRaises(AuthError):
            self.auth.sign_up("ana@example.com", "segredo", "Ana")

    def test_sign_out(self):
        self.client.auth.sign_in_with_password.return_value = auth_response()
        self.auth.sign_in("ana@example.com", "segredo")
        self.auth.sign_out()
        self.assertEqual(self.auth.state.status, AuthStatus.ANONYMOUS)
        self.client.auth.sign_out.assert_called_once()

    def test_sign_out_backend_error_still_anonymous(self):
        self.client.auth.sign_out.side_effect = Exception("network")
        self.auth.sign_out()
        self.assertEqual(self.auth.state.status, AuthStatus.ANONYMOUS)

    def test_auth_events(self):
        self.client.auth.set_session.return_value = auth_response()
        self.auth.restore("at", "rt")

        self.auth._on_auth_event("TOKEN_REFRESHED", SimpleNamespace(access_token="at2", refresh_token="rt2"))
        self.assertEqual(self.auth.state.access_token, "at2")
        self.assertEqual(self.auth.state.user.id, "u1")

        self.auth._on_auth_event("SIGNED_OUT", None)
        self.assertEqual(self.auth.state.status, AuthStatus.ANONYMOUS)

    def test_unsubscribe(self):
        unsubscribe = self.auth.subscribe(lambda state: None)
        unsubscribe()
        self.auth.restore(None, None)
        self.assertEqual(len(self.seen), 2)
