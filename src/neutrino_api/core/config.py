"""
Конфигурация транспорта для Neutrino API клиента.

Все конфиги immutable (frozen dataclasses) для потокобезопасности:
per-call таймаут передается явно и никогда не записывается в общий объект.
"""

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Dict, Mapping, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .logging import LoggingConfig

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# BASE ENDPOINTS
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

MULTICLOUD_ENDPOINT = "https://neutrinoapi.net/"
AWS_ENDPOINT = "https://aws.neutrinoapi.net/"
GCP_ENDPOINT = "https://gcp.neutrinoapi.net/"
BACKUP_ENDPOINT = "https://neutrinoapi.com/"
EU_GEOFENCE_ENDPOINT = "https://eu.neutrinoapi.net/"
AU_GEOFENCE_ENDPOINT = "https://aus.neutrinoapi.net/"
US_GEOFENCE_ENDPOINT = "https://usa.neutrinoapi.net/"

BASE_ENDPOINTS = (
    MULTICLOUD_ENDPOINT,
    AWS_ENDPOINT,
    GCP_ENDPOINT,
    BACKUP_ENDPOINT,
    EU_GEOFENCE_ENDPOINT,
    AU_GEOFENCE_ENDPOINT,
    US_GEOFENCE_ENDPOINT,
)

DEFAULT_CONNECT_TIMEOUT = 10

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# CREDENTIALS
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@dataclass(frozen=True)
class Credentials:
    """
    Учетные данные Neutrino API.

    Передаются заголовками User-ID и API-Key в каждом запросе.
    API ключ не попадает в repr и логи.

    Args:
        user_id: User ID из панели Neutrino API
        api_key: API ключ из панели Neutrino API

    Examples:
        >>> Credentials(user_id="my-user", api_key="my-key")
        Credentials(user_id='my-user', api_key='***')
    """
    user_id: str
    api_key: str = field(repr=False)

    def __post_init__(self):
        """Валидация."""
        if not isinstance(self.user_id, str) or not self.user_id:
            raise ValueError("user_id must be a non-empty string")
        if not isinstance(self.api_key, str) or not self.api_key:
            raise ValueError("api_key must be a non-empty string")

    def __repr__(self) -> str:
        return f"Credentials(user_id={self.user_id!r}, api_key='***')"

    def as_headers(self) -> Dict[str, str]:
        """Вернуть как заголовки запроса."""
        return {"User-ID": self.user_id, "API-Key": self.api_key}

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# TIMEOUT CONFIG
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@dataclass(frozen=True)
class TimeoutConfig:
    """
    Конфигурация таймаута подключения.

    Таймаут чтения здесь не хранится: он свой у каждого endpoint
    и передается в каждый вызов отдельно.

    Args:
        connect: Таймаут установления соединения (сек)

    Examples:
        >>> TimeoutConfig(connect=5)
        >>> TimeoutConfig().as_tuple(read=30)
        (10, 30)
    """
    connect: float = DEFAULT_CONNECT_TIMEOUT

    def __post_init__(self):
        """Валидация."""
        if self.connect <= 0:
            raise ValueError("connect timeout must be positive")

    def as_tuple(self, read: float) -> tuple:
        """Вернуть как (connect, read) для requests."""
        return (self.connect, read)

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# CONNECTION POOL CONFIG
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@dataclass(frozen=True)
class ConnectionPoolConfig:
    """
    Конфигурация общего connection pool.

    Args:
        pool_connections: Количество connection pools для кеширования (по хостам)
        pool_maxsize: Максимум соединений в пуле
        pool_block: Блокировать при достижении лимита

    Examples:
        >>> ConnectionPoolConfig(pool_maxsize=20)
    """
    pool_connections: int = 10
    pool_maxsize: int = 10
    pool_block: bool = False

    def __post_init__(self):
        """Валидация."""
        if self.pool_connections <= 0:
            raise ValueError("pool_connections must be positive")
        if self.pool_maxsize <= 0:
            raise ValueError("pool_maxsize must be positive")

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# SECURITY CONFIG
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@dataclass(frozen=True)
class SecurityConfig:
    """
    Конфигурация безопасности.

    Args:
        verify_ssl: Проверять SSL сертификаты
        allow_redirects: Разрешать редиректы

    Examples:
        >>> SecurityConfig(verify_ssl=False)  # Для тестов
    """
    verify_ssl: bool = True
    allow_redirects: bool = True

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# MAIN CONFIG
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

def _freeze_dict(d: Optional[Mapping[str, str]]) -> Mapping[str, str]:
    """Convert dict to immutable MappingProxyType."""
    if d is None:
        return MappingProxyType({})
    return MappingProxyType(dict(d))


@dataclass(frozen=True)
class TransportConfig:
    """
    Главная конфигурация транспорта: base URL, учетные данные, пул.

    Один экземпляр разделяется всеми вызовами клиента и никогда
    не изменяется; для других значений создается новый экземпляр.

    Args:
        credentials: Учетные данные API
        base_url: Базовый URL (один из BASE_ENDPOINTS или свой)
        timeout: Таймаут подключения
        pool: Конфигурация connection pool
        security: Конфигурация безопасности
        headers: Дополнительные заголовки для каждого запроса
        logging: Конфигурация логирования (None = без логирования)

    Examples:
        >>> config = TransportConfig(Credentials("user", "key"))
        >>> eu = config.with_base_url(EU_GEOFENCE_ENDPOINT)
    """
    credentials: Credentials
    base_url: str = MULTICLOUD_ENDPOINT
    timeout: TimeoutConfig = field(default_factory=TimeoutConfig)
    pool: ConnectionPoolConfig = field(default_factory=ConnectionPoolConfig)
    security: SecurityConfig = field(default_factory=SecurityConfig)
    headers: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    logging: Optional['LoggingConfig'] = None

    def __post_init__(self):
        """Freeze mutable dicts, validate types."""
        if not isinstance(self.credentials, Credentials):
            raise ValueError("credentials must be a Credentials instance")
        if not isinstance(self.base_url, str):
            raise ValueError("base_url must be a string")
        if not isinstance(self.headers, MappingProxyType):
            object.__setattr__(self, 'headers', _freeze_dict(self.headers))

    @classmethod
    def create(
        cls,
        user_id: str,
        api_key: str,
        base_url: str = MULTICLOUD_ENDPOINT,
        connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
        verify_ssl: bool = True,
        headers: Optional[Dict[str, str]] = None,
        pool_maxsize: Optional[int] = None,
        logging: Optional['LoggingConfig'] = None,
    ) -> 'TransportConfig':
        """
        Удобный конструктор конфигурации.

        Examples:
            >>> config = TransportConfig.create("user", "key", base_url=AWS_ENDPOINT)
        """
        pool = ConnectionPoolConfig(pool_maxsize=pool_maxsize) if pool_maxsize else ConnectionPoolConfig()
        return cls(
            credentials=Credentials(user_id=user_id, api_key=api_key),
            base_url=base_url,
            timeout=TimeoutConfig(connect=connect_timeout),
            pool=pool,
            security=SecurityConfig(verify_ssl=verify_ssl),
            headers=headers or {},
            logging=logging,
        )

    def with_base_url(self, base_url: str) -> 'TransportConfig':
        """Создать новый конфиг с другим base URL."""
        return replace(self, base_url=base_url)

    def with_headers(self, headers: Dict[str, str]) -> 'TransportConfig':
        """Создать новый конфиг с дополнительными заголовками."""
        merged = dict(self.headers)
        merged.update(headers)
        return replace(self, headers=merged)
