import os
from dotenv import load_dotenv

load_dotenv()

DB_USER = os.getenv("POSTGRES_USER", "postgres")
DB_PASSWORD = os.getenv("POSTGRES_PASSWORD", "postgres")
DB_HOST = os.getenv("POSTGRES_HOST", "localhost") # In Docker, this will be 'postgres'
DB_PORT = os.getenv("POSTGRES_PORT", "5432")
DB_NAME = os.getenv("POSTGRES_DB", "orders")

DATABASE_URL = os.getenv(
    "DATABASE_URL",
    f"postgresql+asyncpg://{DB_USER}:{DB_PASSWORD}@{DB_HOST}:{DB_PORT}/{DB_NAME}",
)
DB_ECHO = os.getenv("DB_ECHO", "false").lower() == "true"
CREATE_TABLES = os.getenv("CREATE_TABLES", "true").lower() == "true"

PRODUCT_SERVICE_URL = os.getenv("PRODUCT_SERVICE_URL", "http://product-service:3001")
PRODUCT_SERVICE_TIMEOUT = float(os.getenv("PRODUCT_SERVICE_TIMEOUT", "5.0"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
OTLP_ENDPOINT = os.getenv("OTLP_ENDPOINT") # tracing export is off when unset

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
