import os


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev")

    # CORS
    CORS_ORIGINS = os.environ.get("CORS_ORIGINS", "*")

    # Reverse proxy / IP headers
    TRUST_PROXY_HEADERS = os.environ.get("TRUST_PROXY_HEADERS", "1") == "1"

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

    # Realtime ("" picks a default for the platform)
    SOCKETIO_ASYNC_MODE = os.environ.get("SOCKETIO_ASYNC_MODE", "").strip()

    # Registry
    CODE_MAX_ATTEMPTS = int(os.environ.get("CODE_MAX_ATTEMPTS", "10"))
    # 0 disables the bound on writer waits
    REGISTRY_WRITE_TIMEOUT_SEC = float(os.environ.get("REGISTRY_WRITE_TIMEOUT_SEC", "5"))
