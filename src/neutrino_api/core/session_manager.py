# src/neutrino_api/core/session_manager.py
"""
Thread-safe session management for NeutrinoAPIClient.

Each thread gets its own requests.Session, but every session mounts the
same HTTPAdapter, so all threads share one connection pool. Nothing
per-call (timeouts in particular) is stored on either object.
"""
import threading
import weakref
from typing import Set

import requests
from requests.adapters import HTTPAdapter

from .config import ConnectionPoolConfig


def create_adapter(pool: ConnectionPoolConfig) -> HTTPAdapter:
    """Create the shared connection pool adapter."""
    return HTTPAdapter(
        pool_connections=pool.pool_connections,
        pool_maxsize=pool.pool_maxsize,
        pool_block=pool.pool_block,
        max_retries=0,  # ретраи - забота сервиса, не клиента
    )


class ThreadSafeSessionManager:
    """
    Manages thread-local requests.Session instances over one shared adapter.

    Example:
        >>> manager = ThreadSafeSessionManager(ConnectionPoolConfig())
        >>> session = manager.get_session()  # Gets thread-local session
        >>> manager.close_all()  # Closes all sessions and the pool
    """

    def __init__(self, pool: ConnectionPoolConfig):
        """
        Initialize the session manager.

        Args:
            pool: Connection pool sizing for the shared adapter
        """
        self._adapter = create_adapter(pool)
        self._local = threading.local()

        # Track all created sessions for cleanup (using weak references)
        self._all_sessions: Set[weakref.ref] = set()
        self._sessions_lock = threading.RLock()
        self._closed = False

    @property
    def adapter(self) -> HTTPAdapter:
        return self._adapter

    def _create_session(self) -> requests.Session:
        session = requests.Session()
        session.mount('http://', self._adapter)
        session.mount('https://', self._adapter)
        return session

    def get_session(self) -> requests.Session:
        """
        Get thread-local session, creating it lazily if needed.

        Returns:
            requests.Session instance for current thread
        """
        session = getattr(self._local, 'session', None)
        if session is None:
            session = self._create_session()
            self._local.session = session

            with self._sessions_lock:
                ref = weakref.ref(session, self._cleanup_weak_ref)
                self._all_sessions.add(ref)

        return session

    def _cleanup_weak_ref(self, ref: weakref.ref):
        """Remove dead weak reference from tracking set."""
        with self._sessions_lock:
            self._all_sessions.discard(ref)

    def close_all(self):
        """
        Close all sessions from all threads and the shared pool.

        Safe to call multiple times.
        """
        self._local.session = None

        with self._sessions_lock:
            sessions = [ref() for ref in list(self._all_sessions)]
            self._all_sessions.clear()

            for session in sessions:
                if session is not None:
                    # Session.close() closes mounted adapters too
                    session.close()

            if not self._closed:
                self._adapter.close()
                self._closed = True

    def get_active_sessions_count(self) -> int:
        """Number of live sessions across all threads."""
        with self._sessions_lock:
            return sum(1 for ref in self._all_sessions if ref() is not None)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close_all()
        return False
