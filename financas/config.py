# financas/config.py
import os
from dotenv import load_dotenv

load_dotenv()

# Configurações do Supabase
SUPABASE_URL = os.getenv("SUPABASE_URL")
SUPABASE_KEY = os.getenv("SUPABASE_KEY")

# Configurações do Flask
FLASK_SECRET_KEY = os.getenv("FLASK_SECRET_KEY", "troque-esta-chave")

# Regras de negócio
DUE_SOON_WINDOW_DAYS = int(os.getenv("DUE_SOON_WINDOW_DAYS", "3"))  # janela de "vence em breve"
CATEGORY_SEED_MAX_ATTEMPTS = int(os.getenv("CATEGORY_SEED_MAX_ATTEMPTS", "3"))
RECENT_TRANSACTIONS_LIMIT = int(os.getenv("RECENT_TRANSACTIONS_LIMIT", "5"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
