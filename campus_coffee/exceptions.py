class AppException(Exception):
    """
    Базовый класс для всех исключений приложения.
    """
    pass


class NotFoundError(AppException):
    """
    Ресурс не найден (например, при поиске в БД).
    """
    pass


class ValidationError(AppException):
    """
    Ошибка валидации входных данных.
    """
    pass


class ConflictError(AppException):
    """
    Нарушение ограничения уникальности.
    """
    pass


class PosNotFoundError(NotFoundError):
    def __init__(self, pos_id: int):
        self.pos_id = pos_id
        super().__init__(f"POS with ID {pos_id} does not exist")


class DuplicatePosNameError(ConflictError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"POS with name '{name}' already exists")


class OsmNodeNotFoundError(NotFoundError):
    """
    OSM-узел отсутствует, недоступен или не разбирается — всё сводится к одному виду ошибки.
    """

    def __init__(self, node_id: int):
        self.node_id = node_id
        super().__init__(f"OpenStreetMap node with ID {node_id} not found")


class OsmNodeMissingFieldsError(ValidationError):
    def __init__(self, node_id: int, field: str):
        self.node_id = node_id
        self.field = field
        super().__init__(f"OpenStreetMap node with ID {node_id} is missing required field '{field}'")
