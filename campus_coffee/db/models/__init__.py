# Пакет моделей базы данных
# Здесь импортируются все модели, чтобы Alembic мог их обнаружить
from .pos import Pos
