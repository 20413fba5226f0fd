"""MongoDB connection settings taken from the environment or a local .env file."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)

_CONNECT_TIMEOUT_MS = 10_000

_client: MongoClient | None = None


class ConfigError(RuntimeError):
    """Raised when the database connection cannot be configured."""


def _load_env_file() -> None:
    env_file = Path(".env")
    if env_file.is_file():
        load_dotenv(env_file)
    else:
        logger.info("No se pudo cargar el archivo .env")


def init_mongo() -> MongoClient:
    """Connect to MongoDB using MONGO_URI, check it with a ping and keep the client."""
    global _client
    _load_env_file()

    mongo_uri = os.environ.get("MONGO_URI", "")
    if not mongo_uri:
        raise ConfigError("Defina los ENV")

    try:
        client = MongoClient(mongo_uri, serverSelectionTimeoutMS=_CONNECT_TIMEOUT_MS)
    except PyMongoError as exc:
        raise ConfigError(f"Error al conectar con MongoDB: {exc}") from exc

    try:
        client.admin.command("ping")
    except PyMongoError as exc:
        raise ConfigError(f"Ping a MongoDB falló: {exc}") from exc

    logger.info("Conexión a MongoDB establecida")
    _client = client
    return client


def get_db() -> Database:
    """Return the database named by MONGO_DB_NAME on the connected client."""
    db_name = os.environ.get("MONGO_DB_NAME", "")
    if not db_name:
        raise ConfigError("MONGO_DB_NAME no está definido en el entorno")
    if _client is None:
        raise ConfigError("MongoDB no está inicializado")
    return _client[db_name]