from sqlalchemy.orm import declarative_base

Base = declarative_base()

# Импорт моделей — чтобы таблицы создавались автоматически
from campus_coffee.db.models import pos  # noqa: E402,F401
