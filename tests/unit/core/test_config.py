"""Тесты для конфигурации транспорта."""

import dataclasses

import pytest

from neutrino_api.core.config import (
    Credentials,
    TimeoutConfig,
    ConnectionPoolConfig,
    SecurityConfig,
    TransportConfig,
    BASE_ENDPOINTS,
    MULTICLOUD_ENDPOINT,
    EU_GEOFENCE_ENDPOINT,
    AWS_ENDPOINT,
)
from neutrino_api.core.logging import LoggingConfig

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Base endpoints
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

def test_base_endpoints_are_https_with_trailing_slash():
    """Все base endpoints - https и заканчиваются на /."""
    assert len(BASE_ENDPOINTS) == 7
    assert len(set(BASE_ENDPOINTS)) == 7
    for endpoint in BASE_ENDPOINTS:
        assert endpoint.startswith("https://")
        assert endpoint.endswith("/")

def test_multicloud_is_default():
    """MULTICLOUD - base URL по умолчанию."""
    config = TransportConfig(Credentials("u", "k"))
    assert config.base_url == MULTICLOUD_ENDPOINT == "https://neutrinoapi.net/"

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Credentials
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

def test_credentials_as_headers():
    """Учетные данные превращаются в заголовки User-ID и API-Key."""
    credentials = Credentials(user_id="my-user", api_key="my-key")
    assert credentials.as_headers() == {"User-ID": "my-user", "API-Key": "my-key"}

def test_credentials_repr_hides_api_key():
    """API ключ не попадает в repr."""
    credentials = Credentials(user_id="my-user", api_key="super-secret-key")
    assert "super-secret-key" not in repr(credentials)
    assert "my-user" in repr(credentials)

@pytest.mark.parametrize("user_id, api_key", [
    ("", "key"),
    ("user", ""),
    (None, "key"),
    ("user", None),
])
def test_credentials_validation(user_id, api_key):
    """Пустые или не-строковые учетные данные отклоняются."""
    with pytest.raises(ValueError):
        Credentials(user_id=user_id, api_key=api_key)

def test_credentials_immutable():
    """Тест immutability."""
    credentials = Credentials("u", "k")
    with pytest.raises(dataclasses.FrozenInstanceError):
        credentials.api_key = "other"

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# TimeoutConfig
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

def test_timeout_config_defaults():
    """Тест дефолтных значений."""
    assert TimeoutConfig().connect == 10

def test_timeout_config_as_tuple_uses_per_call_read():
    """as_tuple берет таймаут чтения из аргумента."""
    config = TimeoutConfig(connect=3)
    assert config.as_tuple(read=45) == (3, 45)
    assert config.as_tuple(read=300) == (3, 300)

def test_timeout_config_validation_negative_connect():
    """Тест валидации - отрицательный connect."""
    with pytest.raises(ValueError, match="connect timeout must be positive"):
        TimeoutConfig(connect=-1)

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# ConnectionPoolConfig / SecurityConfig
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

def test_pool_config_defaults():
    """Тест дефолтных значений."""
    config = ConnectionPoolConfig()
    assert config.pool_connections == 10
    assert config.pool_maxsize == 10
    assert config.pool_block is False

def test_pool_config_validation():
    """Тест валидации размеров пула."""
    with pytest.raises(ValueError, match="pool_maxsize must be positive"):
        ConnectionPoolConfig(pool_maxsize=0)
    with pytest.raises(ValueError, match="pool_connections must be positive"):
        ConnectionPoolConfig(pool_connections=0)

def test_security_config_defaults():
    """Тест дефолтных значений."""
    config = SecurityConfig()
    assert config.verify_ssl is True
    assert config.allow_redirects is True

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# TransportConfig
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

def test_transport_config_create():
    """Тест фабричного метода create."""
    logging_config = LoggingConfig.create(enable_console=False)
    config = TransportConfig.create(
        "user", "key",
        base_url=AWS_ENDPOINT,
        connect_timeout=5,
        verify_ssl=False,
        headers={"X-Trace": "1"},
        pool_maxsize=20,
        logging=logging_config,
    )
    assert config.credentials == Credentials("user", "key")
    assert config.base_url == AWS_ENDPOINT
    assert config.timeout.connect == 5
    assert config.security.verify_ssl is False
    assert config.pool.pool_maxsize == 20
    assert config.headers["X-Trace"] == "1"
    assert config.logging is logging_config

def test_transport_config_headers_frozen():
    """Заголовки копируются и замораживаются."""
    headers = {"X-Trace": "1"}
    config = TransportConfig.create("user", "key", headers=headers)
    headers["X-Trace"] = "2"

    assert config.headers["X-Trace"] == "1"
    with pytest.raises(TypeError):
        config.headers["X-Other"] = "x"

def test_transport_config_immutable():
    """Тест immutability."""
    config = TransportConfig.create("user", "key")
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.base_url = EU_GEOFENCE_ENDPOINT

def test_transport_config_with_base_url():
    """with_base_url возвращает новый экземпляр."""
    config = TransportConfig.create("user", "key")
    eu = config.with_base_url(EU_GEOFENCE_ENDPOINT)

    assert eu is not config
    assert eu.base_url == EU_GEOFENCE_ENDPOINT
    assert config.base_url == MULTICLOUD_ENDPOINT
    assert eu.credentials == config.credentials

def test_transport_config_with_headers_merges():
    """with_headers объединяет заголовки, не меняя исходный конфиг."""
    config = TransportConfig.create("user", "key", headers={"A": "1"})
    updated = config.with_headers({"B": "2"})

    assert dict(updated.headers) == {"A": "1", "B": "2"}
    assert dict(config.headers) == {"A": "1"}

def test_transport_config_requires_credentials():
    """credentials должны быть Credentials."""
    with pytest.raises(ValueError, match="credentials"):
        TransportConfig(credentials=("user", "key"))

def test_transport_config_accepts_invalid_url_string():
    """Невалидный base URL не проверяется при создании конфига."""
    config = TransportConfig.create("user", "key", base_url="https://neutrino api.net/")
    assert config.base_url == "https://neutrino api.net/"
