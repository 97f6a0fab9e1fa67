# app/core/exceptions.py

from fastapi import status


class ServiceError(Exception):
    """
    Базовая ошибка бизнес-правил.
    Сервисы выбрасывают только наследников этого класса, а main.py
    превращает их в HTTP-ответ с соответствующим статусом.
    """
    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NotFoundError(ServiceError):
    """Сущность не существует (или, для approve, находится не в том статусе)."""
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(ServiceError):
    """Нарушение уникальности (например, email уже занят)."""
    status_code = status.HTTP_409_CONFLICT


class ValidationError(ServiceError):
    """Переданная необязательная ссылка указывает на несуществующую сущность."""
    status_code = 422


class UnauthorizedError(ServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED


class ForbiddenError(ServiceError):
    status_code = status.HTTP_403_FORBIDDEN
