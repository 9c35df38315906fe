# config.py
import logging
import os
from dotenv import load_dotenv

load_dotenv()

# Baza danych
DATABASE_URL = os.getenv('DATABASE_URL', 'sqlite:///./products.db')
DATABASE_ECHO = os.getenv('DATABASE_ECHO', 'false').lower() == 'true'

# Logowanie
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
LOG_FORMAT = '[%(asctime)s: %(levelname)s/%(name)s] %(message)s'


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
