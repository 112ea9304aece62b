# financas/web/views/__init__.py

from .auth import bp as auth_bp
from .dashboard import bp as dashboard_bp
from .goals import bp as goals_bp
from .recurring import bp as recurring_bp
from .reports import bp as reports_bp
from .transactions import bp as transactions_bp

ALL_BLUEPRINTS = [
    auth_bp,
    dashboard_bp,
    transactions_bp,
    goals_bp,
    recurring_bp,
    reports_bp,
]
