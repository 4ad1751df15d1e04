class AppError(Exception):
    """Базовая ошибка приложения с HTTP статусом"""

    status_code: int = 500
    public_body: str = "internal error"


class BadRequest(AppError):
    """Некорректный или неполный запрос"""

    status_code = 400
    public_body = ""


class NotFound(AppError):
    """Маршрут или запись не найдены"""

    status_code = 404
    public_body = ""


class TemplateError(AppError):
    """Неизвестный шаблон, ошибка синтаксиса или отсутствующая переменная"""


class StorageError(AppError):
    """Хранилище отклонило операцию"""
