import logging
import os
from collections import namedtuple

from decouple import Config, RepositoryEmpty, RepositoryEnv

Settings = namedtuple('Settings', ['log_level', 'log_file'])

LOG_FORMAT = '%(asctime)s %(levelname)s %(message)s'


def load_settings(env_path=".env"):
    """Читает настройки из .env, а если файла нет - из переменных окружения."""
    if os.path.isfile(env_path):
        config = Config(RepositoryEnv(env_path))
    else:
        # Без файла читаем только переменные окружения
        config = Config(RepositoryEmpty())
    return Settings(
        log_level=config("LOG_LEVEL", default="INFO").upper(),
        log_file=config("LOG_FILE", default=""),
    )


# ==============================
# Настройка логирования
# ==============================
def setup_logging(settings=None):
    if settings is None:
        settings = load_settings()

    handlers = [logging.StreamHandler()]
    if settings.log_file:
        handlers.insert(0, logging.FileHandler(settings.log_file, encoding='utf-8'))

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
    return settings
