from product_catalog import models, database
from product_catalog.config import configure_logging


def init_db(engine=None):
    """Inicjalizacja bazy danych"""
    models.Base.metadata.create_all(bind=engine or database.engine)
    print("Baza danych zainicjalizowana")


if __name__ == "__main__":
    configure_logging()
    init_db()
