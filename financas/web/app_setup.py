# financas/web/app_setup.py
import datetime
import logging
import os

from flask import Flask

from financas.core.money import format_brl, format_for_display
from financas.utils.text_utils import format_date_br
from financas.web.views import ALL_BLUEPRINTS

logger = logging.getLogger(__name__)

TEMPLATES_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "templates")


def setup_app(config: dict) -> Flask:
    """
    Configura a aplicação Flask (blueprints, filtros de template, configurações).
    Retorna o objeto Flask pronto para ser servido por um servidor WSGI.
    """
    app = Flask(__name__, template_folder=TEMPLATES_DIR)
    app.secret_key = config["FLASK_SECRET_KEY"]

    # Cada requisição cria o próprio cliente Supabase com os tokens do usuário
    app.config["SUPABASE_CLIENT_FACTORY"] = config["SUPABASE_CLIENT_FACTORY"]
    app.config["DUE_SOON_WINDOW_DAYS"] = config.get("DUE_SOON_WINDOW_DAYS", 3)
    app.config["RECENT_TRANSACTIONS_LIMIT"] = config.get("RECENT_TRANSACTIONS_LIMIT", 5)
    app.config["TODAY"] = config.get("TODAY", datetime.date.today)

    app.add_template_filter(format_brl, "brl")
    app.add_template_filter(format_date_br, "date_br")
    app.add_template_filter(format_for_display, "minor_units")

    for blueprint in ALL_BLUEPRINTS:
        app.register_blueprint(blueprint)

    logger.info(f"Aplicação configurada com {len(ALL_BLUEPRINTS)} blueprints.")
    return app
