# src/neutrino_api/utils/sanitizer.py
"""
Утилита для маскирования чувствительных данных в логах.

Используется чтобы User-ID, API-Key и похожие значения
никогда не попадали в лог.
"""

import re
from typing import Any, Dict

DEFAULT_MASK = "***REDACTED***"

# Чувствительные ключи (case-insensitive, точное совпадение)
SENSITIVE_KEYS = {
    # Учетные данные Neutrino API (заголовки и возможные поля)
    'api-key', 'api_key', 'apikey', 'user-id', 'user_id', 'userid',
    # Общие
    'password', 'passwd', 'pwd', 'secret', 'token', 'access_token',
    'authorization', 'auth', 'cookie', 'credentials', 'key',
    # Коды подтверждения (phone-verify, sms-verify, verify-security-code)
    'security-code', 'security_code', 'code',
}

# Подстроки, по которым ключ считается чувствительным
SENSITIVE_FRAGMENTS = ('api-key', 'api_key', 'password', 'secret', 'token')

# key=value в строках (URL, сообщения)
SENSITIVE_PATTERNS = [
    (re.compile(r'(api[_-]?key[\s:=]+)([^\s&,;]+)', re.IGNORECASE), r'\1' + DEFAULT_MASK),
    (re.compile(r'(user[_-]?id[\s:=]+)([^\s&,;]+)', re.IGNORECASE), r'\1' + DEFAULT_MASK),
    (re.compile(r'(token[\s:=]+)([^\s&,;]+)', re.IGNORECASE), r'\1' + DEFAULT_MASK),
    (re.compile(r'(password[\s:=]+)([^\s&,;]+)', re.IGNORECASE), r'\1' + DEFAULT_MASK),
    (re.compile(r'(security[_-]?code[\s:=]+)([^\s&,;]+)', re.IGNORECASE), r'\1' + DEFAULT_MASK),
]


def is_sensitive_key(key: Any) -> bool:
    """
    Проверяет, является ли ключ чувствительным.

    Examples:
        >>> is_sensitive_key("API-Key")
        True
        >>> is_sensitive_key("endpoint")
        False
    """
    key_lower = str(key).lower()
    if key_lower in SENSITIVE_KEYS:
        return True
    return any(fragment in key_lower for fragment in SENSITIVE_FRAGMENTS)


def mask_sensitive_data(data: Any, mask: str = DEFAULT_MASK) -> Any:
    """
    Рекурсивно маскирует чувствительные данные в словарях, списках, строках.

    Args:
        data: Данные для маскирования
        mask: Строка-заменитель

    Returns:
        Копия данных с замаскированными чувствительными полями

    Examples:
        >>> mask_sensitive_data({"User-ID": "me", "endpoint": "ip-info"})
        {'User-ID': '***REDACTED***', 'endpoint': 'ip-info'}
    """
    if data is None or isinstance(data, (bool, int, float)):
        return data

    if isinstance(data, str):
        return _mask_string(data, mask)

    if isinstance(data, dict):
        return {
            key: mask if is_sensitive_key(key) else mask_sensitive_data(value, mask)
            for key, value in data.items()
        }

    if isinstance(data, (list, tuple)):
        return type(data)(mask_sensitive_data(item, mask) for item in data)

    # Остальные типы (Path, исключения, ...) как есть
    return data


def _mask_string(text: str, mask: str) -> str:
    result = text
    for pattern, replacement in SENSITIVE_PATTERNS:
        result = pattern.sub(replacement.replace(DEFAULT_MASK, mask), result)
    return result


def mask_url(url: str, mask: str = DEFAULT_MASK) -> str:
    """
    Маскирует чувствительные query параметры в URL.

    Examples:
        >>> mask_url("https://neutrinoapi.net/verify-security-code?security-code=123456")
        'https://neutrinoapi.net/verify-security-code?security-code=***REDACTED***'
    """
    def _replace(match: "re.Match") -> str:
        name = match.group(2)
        if is_sensitive_key(name):
            return f"{match.group(1)}{name}={mask}"
        return match.group(0)

    return re.sub(r'([?&])([^=&#]+)=([^&#]*)', _replace, url)


def mask_headers(headers: Dict[str, str], mask: str = DEFAULT_MASK) -> Dict[str, str]:
    """
    Маскирует чувствительные заголовки HTTP.

    Examples:
        >>> mask_headers({"API-Key": "abc", "Accept": "*/*"})
        {'API-Key': '***REDACTED***', 'Accept': '*/*'}
    """
    return {key: mask if is_sensitive_key(key) else value for key, value in headers.items()}
