"""
Conexão com o MongoDB.

Localização: core/database.py

Mantém um único MongoClient por processo (o pymongo já é thread-safe
e faz pool de conexões).
"""
import logging
from django.conf import settings
from pymongo import MongoClient

logger = logging.getLogger(__name__)

_client = None


def get_client() -> MongoClient:
    """Retorna o MongoClient do processo, criando na primeira chamada."""
    global _client
    if _client is None:
        logger.info("[MONGO] Conectando em %s", settings.MONGO_DB_NAME)
        _client = MongoClient(settings.MONGO_URI, serverSelectionTimeoutMS=5000)
    return _client


def get_database():
    """Retorna o database configurado em settings.MONGO_DB_NAME."""
    return get_client()[settings.MONGO_DB_NAME]
