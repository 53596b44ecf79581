import os
from playhouse.db_url import connect

# Default to SQLite
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///tablero.db")

# Initialize the database connection
db = connect(DATABASE_URL)


def get_db():
    return db


def init_db() -> None:
    from infrastructure.peewee.model.models import ALL_MODELS

    db.connect(reuse_if_open=True)
    db.create_tables(ALL_MODELS, safe=True)
