# src/neutrino_api/core/client.py
import atexit
import time
import uuid
import weakref
from pathlib import Path
from typing import Mapping, Optional, Union

from .classifier import classify_response
from .config import MULTICLOUD_ENDPOINT, TransportConfig
from .error_handler import ErrorHandler
from .executor import RawResponse, execute_request
from .outcome import ErrorResult, FileResult, JsonResult, Outcome
from .request_builder import RequestSpec, build_request
from .session_manager import ThreadSafeSessionManager
from .logging import APILogger, DEFAULT_LOGGER_NAME
from .logging.filters import clear_correlation_id, set_correlation_id
from ..endpoints import DEFAULT_TIMEOUT, get_endpoint
from ..utils.sanitizer import mask_url


def _close_at_exit(client_ref: weakref.ref) -> None:
    client = client_ref()
    if client is not None:
        client.close()


def _outcome_kind(outcome: Outcome) -> str:
    if isinstance(outcome, JsonResult):
        return "json"
    if isinstance(outcome, FileResult):
        return "file"
    return "error"


class NeutrinoAPIClient:
    """
    Клиент Neutrino API.

    Every call returns an Outcome value (JsonResult, FileResult or
    ErrorResult); transport and parsing failures never raise.

    Features:
        - Immutable конфигурация, разделяемая всеми потоками
        - Общий connection pool, thread-local сессии
        - Таймаут чтения задается на каждый вызов, без общего состояния
        - Контекстный менеджер для освобождения соединений

    Example:
        >>> with NeutrinoAPIClient("<user-id>", "<api-key>") as client:
        ...     outcome = client.call("geocode-reverse", {
        ...         "latitude": "-41.2775847",
        ...         "longitude": "174.7775229",
        ...     })
        ...     if isinstance(outcome, JsonResult):
        ...         print(outcome.data["address"])
    """

    def __init__(
        self,
        user_id: Optional[str] = None,
        api_key: Optional[str] = None,
        base_url: str = MULTICLOUD_ENDPOINT,
        config: Optional[TransportConfig] = None,
    ):
        """
        Initialize API client.

        Args:
            user_id: User ID из панели Neutrino API
            api_key: API ключ из панели Neutrino API
            base_url: Base URL (один из BASE_ENDPOINTS), если config не передан
            config: Готовый TransportConfig (заменяет остальные аргументы)
        """
        if config is None:
            if user_id is None or api_key is None:
                raise ValueError("user_id and api_key are required when config is not given")
            config = TransportConfig.create(user_id, api_key, base_url=base_url)

        object.__setattr__(self, '_config', config)
        object.__setattr__(self, '_session_manager', ThreadSafeSessionManager(config.pool))

        logger_instance: Optional[APILogger] = None
        if config.logging:
            logger_instance = APILogger(config=config.logging, name=DEFAULT_LOGGER_NAME)
        object.__setattr__(self, '_logger', logger_instance)

        # Graceful shutdown; weak reference so atexit does not keep the client alive
        atexit.register(_close_at_exit, weakref.ref(self))

        object.__setattr__(self, '_initialized', True)

    def __setattr__(self, name, value):
        """Запретить изменение после init (immutability)."""
        if hasattr(self, '_initialized'):
            raise RuntimeError(
                f"Cannot modify '{name}' - NeutrinoAPIClient is immutable. "
                f"Create new instance instead."
            )
        object.__setattr__(self, name, value)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    # ==================== Управление жизненным циклом ====================

    def close(self):
        """
        Закрывает все сессии и общий connection pool. Idempotent.
        """
        if self._logger is not None:
            self._logger.close()
        self._session_manager.close_all()

    # ==================== Вызовы API ====================

    def call(
        self,
        endpoint_name: str,
        params: Optional[Mapping[str, str]] = None,
        output_file_path: Optional[Union[str, Path]] = None,
    ) -> Outcome:
        """
        Call a catalog endpoint by name.

        Args:
            endpoint_name: Имя endpoint, например "ip-info" или "qr-code"
            params: Параметры API
            output_file_path: Куда сохранить файл (для endpoint-ов, возвращающих файл)

        Raises:
            UnknownEndpointError: нет такого endpoint в каталоге
        """
        endpoint = get_endpoint(endpoint_name)
        if endpoint.returns_file and output_file_path is None and self._logger:
            self._logger.warning(
                "File endpoint called without output_file_path",
                endpoint=endpoint.path,
            )
        return self.execute(RequestSpec(
            http_method=endpoint.http_method,
            endpoint_path=endpoint.path,
            params=params or {},
            output_file_path=output_file_path,
            timeout=endpoint.timeout,
        ))

    def request(
        self,
        http_method: str,
        endpoint_path: str,
        params: Optional[Mapping[str, str]] = None,
        output_file_path: Optional[Union[str, Path]] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> Outcome:
        """Make a request to an arbitrary endpoint path."""
        return self.execute(RequestSpec(
            http_method=http_method,
            endpoint_path=endpoint_path,
            params=params or {},
            output_file_path=output_file_path,
            timeout=timeout,
        ))

    def execute(self, spec: RequestSpec) -> Outcome:
        """
        Execute one request: build, send, classify.

        This is the only place exceptions from the stages are caught;
        each is converted to an ErrorResult by ErrorHandler.

        Args:
            spec: The call to make

        Returns:
            JsonResult, FileResult or ErrorResult
        """
        correlation_id = str(uuid.uuid4())
        start_time = time.time()
        raw: Optional[RawResponse] = None

        if self._logger:
            set_correlation_id(correlation_id)
            self._logger.debug(
                "Request initialized",
                method=spec.http_method,
                endpoint=spec.endpoint_path,
                correlation_id=correlation_id,
            )

        try:
            request = build_request(self._config, spec)

            if self._logger:
                self._logger.info(
                    "Request started",
                    method=spec.http_method,
                    url=mask_url(request.url),
                    timeout=spec.timeout,
                )

            session = self._session_manager.get_session()
            with execute_request(session, request, spec.timeout, self._config) as raw:
                outcome = classify_response(raw, spec.output_file_path)

        except Exception as e:
            if not ErrorHandler.is_handled(e):
                raise
            outcome = ErrorHandler.to_result(
                e,
                http_status=raw.http_status if raw is not None else None,
                content_type=raw.content_type if raw is not None else None,
            )

        finally:
            if self._logger:
                clear_correlation_id()

        self._log_outcome(spec, outcome, start_time, correlation_id)
        return outcome

    def _log_outcome(self, spec: RequestSpec, outcome: Outcome, start_time: float, correlation_id: str):
        if not self._logger:
            return

        duration_ms = round((time.time() - start_time) * 1000, 2)
        if isinstance(outcome, ErrorResult):
            self._logger.warning(
                "Request failed",
                endpoint=spec.endpoint_path,
                error_code=outcome.error_name,
                status_code=outcome.http_status,
                error_type=type(outcome.error_cause).__name__ if outcome.error_cause else None,
                duration_ms=duration_ms,
                correlation_id=correlation_id,
            )
        else:
            self._logger.info(
                "Request completed",
                endpoint=spec.endpoint_path,
                status_code=outcome.http_status,
                content_type=outcome.content_type,
                outcome=_outcome_kind(outcome),
                duration_ms=duration_ms,
                correlation_id=correlation_id,
            )

    # ==================== Свойства ====================

    @property
    def config(self) -> TransportConfig:
        """Transport config (read-only)."""
        return self._config

    @property
    def base_url(self) -> str:
        """Base URL (read-only)."""
        return self._config.base_url

    @property
    def session(self):
        """Thread-local requests.Session for the current thread."""
        return self._session_manager.get_session()
