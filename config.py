import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./gigeire.db")
    API_PREFIX = data.get("API_PREFIX", "")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    API_RELOAD = bool(data.get("API_RELOAD", 0))
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    DB_CREATE_TABLES = bool(data.get("DB_CREATE_TABLES", 1))

    # Subscription plans
    FREE_PLAN_GIG_LIMIT = data.get("FREE_PLAN_GIG_LIMIT", 10)

    # Invoicing
    DEFAULT_VAT_RATE = data.get("DEFAULT_VAT_RATE", 23)  # Irish standard rate, percent
    INVOICE_DUE_DAYS = data.get("INVOICE_DUE_DAYS", 7)
    COMPANY_NAME = data.get("COMPANY_NAME", "GigÉire")

    # Stripe webhooks
    STRIPE_WEBHOOK_SECRET = data.get("STRIPE_WEBHOOK_SECRET", "")
