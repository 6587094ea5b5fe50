from collections.abc import Iterator
from contextlib import contextmanager
import time

from redis.exceptions import RedisError

from src.platform.exception.exceptions import StoreUnavailableError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import metrics


@contextmanager
def store_operation(operation: str) -> Iterator[None]:
    """Time one store round trip and surface transport failures as StoreUnavailableError."""
    start = time.perf_counter()
    try:
        yield
    except (RedisError, OSError, RuntimeError) as e:
        metrics.record_store_operation(
            operation=operation, result='error', duration=time.perf_counter() - start
        )
        Logger.base.error(f'❌ [STORE] {operation} failed: {type(e).__name__}: {e}')
        raise StoreUnavailableError(f'Store unavailable during {operation}') from e
    metrics.record_store_operation(
        operation=operation, result='success', duration=time.perf_counter() - start
    )
