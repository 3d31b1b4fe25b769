"""
Иерархия внутренних исключений Neutrino API клиента.

Эти исключения используются только между стадиями
(builder -> executor -> classifier) и никогда не выходят
за границу NeutrinoAPIClient: там ErrorHandler превращает их в ErrorResult.
"""

from typing import Optional

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# BASE
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class NeutrinoAPIException(Exception):
    """Базовое исключение Neutrino API клиента."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# СТАДИИ ЗАПРОСА
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class URLParsingError(NeutrinoAPIException, ValueError):
    """
    base URL + endpoint не является валидным URL.

    Args:
        url: Собранный URL
        reason: Что именно не так
    """

    def __init__(self, url: str, reason: str = ""):
        self.url = url
        self.reason = reason

        msg = f"Invalid URL: {url!r}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class OutputFileError(NeutrinoAPIException, OSError):
    """
    Ошибка записи файла с ответом.

    Примеры:
    - Нет родительской директории
    - Нет прав на запись
    - Диск заполнен

    Args:
        file_path: Путь к файлу
        message: Сообщение
    """

    def __init__(self, file_path: str, message: str = ""):
        self.file_path = file_path

        msg = f"Failed to write output file {file_path}"
        if message:
            msg += f": {message}"
        super().__init__(msg)


class InvalidJSONResponseError(NeutrinoAPIException, ValueError):
    """
    Ответ помечен как JSON, но не парсится.

    Args:
        http_status: HTTP статус
        content_type: Content-Type ответа
    """

    def __init__(self, http_status: int, content_type: Optional[str] = None):
        self.http_status = http_status
        self.content_type = content_type
        super().__init__(
            f"HTTP {http_status} response labeled {content_type!r} is not valid JSON"
        )


class UnknownEndpointError(NeutrinoAPIException, KeyError):
    """Endpoint не найден в каталоге."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown endpoint: {name!r}")

    def __str__(self) -> str:
        return self.message
