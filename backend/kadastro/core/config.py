import os
from dotenv import load_dotenv

# Load backend/.env when present
env_path = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), '.env')
load_dotenv(dotenv_path=env_path)


def _base_url(name, default):
    return os.getenv(name, default).rstrip("/")


def _timeout(value):
    """Seconds as a float, or None to keep the transport default."""
    if value is None or not value.strip():
        return None
    return float(value)


# Upstream sources
CADASTRE_BASE_URL = _base_url("CADASTRE_BASE_URL", "https://cadastre.data.gouv.fr/bundler/cadastre-etalab")
DVF_BASE_URL = _base_url("DVF_BASE_URL", "https://dvf-api.data.gouv.fr")
UPSTREAM_TIMEOUT = _timeout(os.getenv("UPSTREAM_TIMEOUT"))

# Server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8080"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

SERVICE_NAME = "kadastro-api"
VERSION = "1.0.0"
