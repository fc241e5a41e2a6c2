"""
Name: Database Pool Tests

Responsibilities:
  - Test pool lifecycle (init, get, close, reset)
  - Test PostgresUserRepository falls back to the process-wide pool
  - Offline unit tests (no real DB)

Notes:
  - Uses mocking for ConnectionPool
"""

from unittest.mock import MagicMock, patch

import pytest

from user_lifecycle.infrastructure.db import (
    PoolAlreadyInitializedError,
    PoolNotInitializedError,
    close_pool,
    get_pool,
    init_pool,
    reset_pool,
)
from user_lifecycle.infrastructure.repositories import PostgresUserRepository

POOL_CLASS = "user_lifecycle.infrastructure.db.pool.ConnectionPool"


@pytest.fixture(autouse=True)
def clean_pool():
    reset_pool()
    yield
    reset_pool()


@pytest.mark.unit
class TestPoolLifecycle:
    def test_init_pool_creates_pool(self):
        with patch(POOL_CLASS) as MockPool:
            mock_pool = MagicMock()
            MockPool.return_value = mock_pool

            result = init_pool("postgresql://test", min_size=2, max_size=10)

            MockPool.assert_called_once()
            assert MockPool.call_args.kwargs["min_size"] == 2
            assert MockPool.call_args.kwargs["max_size"] == 10
            assert result is mock_pool
            assert get_pool() is mock_pool

    def test_init_pool_twice_raises_error(self):
        with patch(POOL_CLASS):
            init_pool("postgresql://test", min_size=1, max_size=2)

            with pytest.raises(PoolAlreadyInitializedError):
                init_pool("postgresql://test", min_size=1, max_size=2)

    def test_get_pool_without_init_raises_error(self):
        with pytest.raises(PoolNotInitializedError):
            get_pool()

    def test_close_pool_clears_singleton(self):
        with patch(POOL_CLASS) as MockPool:
            mock_pool = MagicMock()
            MockPool.return_value = mock_pool

            init_pool("postgresql://test", min_size=1, max_size=2)
            close_pool()

            mock_pool.close.assert_called_once()
            with pytest.raises(PoolNotInitializedError):
                get_pool()

        close_pool()  # idempotente

    def test_reset_pool_allows_reinit(self):
        with patch(POOL_CLASS):
            init_pool("postgresql://test", min_size=1, max_size=2)
            reset_pool()

            init_pool("postgresql://test", min_size=1, max_size=2)

    def test_reset_pool_swallows_close_errors(self):
        with patch(POOL_CLASS) as MockPool:
            mock_pool = MagicMock()
            mock_pool.close.side_effect = RuntimeError("boom")
            MockPool.return_value = mock_pool

            init_pool("postgresql://test", min_size=1, max_size=2)
            reset_pool()

            with pytest.raises(PoolNotInitializedError):
                get_pool()


@pytest.mark.unit
class TestRepositoryPoolUsage:
    def test_repository_uses_injected_pool(self):
        mock_pool = MagicMock()

        assert PostgresUserRepository(pool=mock_pool)._get_pool() is mock_pool

    def test_repository_falls_back_to_global_pool(self):
        with patch(POOL_CLASS) as MockPool:
            mock_pool = MagicMock()
            MockPool.return_value = mock_pool

            init_pool("postgresql://test", min_size=1, max_size=2)

            assert PostgresUserRepository()._get_pool() is mock_pool
