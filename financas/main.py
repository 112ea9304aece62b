# financas/main.py
import logging

from financas import config as settings
from financas.core.db import get_supabase_client
from financas.web.app_setup import setup_app

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("financas")

config = {
    "FLASK_SECRET_KEY": settings.FLASK_SECRET_KEY,
    "SUPABASE_CLIENT_FACTORY": get_supabase_client,
    "DUE_SOON_WINDOW_DAYS": settings.DUE_SOON_WINDOW_DAYS,
    "RECENT_TRANSACTIONS_LIMIT": settings.RECENT_TRANSACTIONS_LIMIT,
}

if not settings.SUPABASE_URL or not settings.SUPABASE_KEY:
    logger.warning("SUPABASE_URL/SUPABASE_KEY não definidos; configure o arquivo .env.")

# A variável wsgi_app é a que o Gunicorn serve: gunicorn financas.main:wsgi_app
wsgi_app = setup_app(config)


def main() -> None:
    """Inicia o servidor de desenvolvimento."""
    wsgi_app.run(debug=settings.LOG_LEVEL == "DEBUG")


if __name__ == '__main__':
    main()
