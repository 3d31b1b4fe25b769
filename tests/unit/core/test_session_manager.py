"""
Tests for ThreadSafeSessionManager.
"""

import threading

import requests

from neutrino_api.core.config import ConnectionPoolConfig
from neutrino_api.core.session_manager import ThreadSafeSessionManager, create_adapter


class TestCreateAdapter:

    def test_pool_settings_applied(self):
        adapter = create_adapter(ConnectionPoolConfig(pool_connections=3, pool_maxsize=7, pool_block=True))

        assert adapter._pool_connections == 3
        assert adapter._pool_maxsize == 7
        assert adapter._pool_block is True

    def test_no_retries(self):
        adapter = create_adapter(ConnectionPoolConfig())
        assert adapter.max_retries.total == 0


class TestThreadSafeSessionManager:
    """Thread-local sessions over one shared adapter."""

    def test_same_session_within_thread(self):
        with ThreadSafeSessionManager(ConnectionPoolConfig()) as manager:
            assert manager.get_session() is manager.get_session()
            assert isinstance(manager.get_session(), requests.Session)

    def test_different_sessions_across_threads_share_adapter(self):
        manager = ThreadSafeSessionManager(ConnectionPoolConfig())
        sessions = []
        lock = threading.Lock()

        def worker():
            session = manager.get_session()
            with lock:
                sessions.append(session)

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len({id(s) for s in sessions}) == 4
        for session in sessions:
            assert session.get_adapter("https://neutrinoapi.net/") is manager.adapter
            assert session.get_adapter("http://neutrinoapi.net/") is manager.adapter

        manager.close_all()

    def test_active_sessions_count(self):
        manager = ThreadSafeSessionManager(ConnectionPoolConfig())
        assert manager.get_active_sessions_count() == 0

        session = manager.get_session()
        assert manager.get_active_sessions_count() == 1

        manager.close_all()
        assert manager.get_active_sessions_count() == 0
        del session

    def test_close_all_is_idempotent(self):
        manager = ThreadSafeSessionManager(ConnectionPoolConfig())
        manager.get_session()

        manager.close_all()
        manager.close_all()

    def test_new_session_after_close(self):
        manager = ThreadSafeSessionManager(ConnectionPoolConfig())
        first = manager.get_session()
        manager.close_all()

        second = manager.get_session()

        assert second is not first
        manager.close_all()
