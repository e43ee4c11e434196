"""Decorators for automatic logging and error capture."""

import functools
import time
from typing import Callable, Any, Optional, TypeVar

from .structured_logger import get_logger

# Type variable for decorated functions
F = TypeVar('F', bound=Callable[..., Any])


def log_operation(operation_name: Optional[str] = None,
                  log_result_size: bool = False):
    """Decorator to log operation execution and capture errors.

    Args:
        operation_name: Custom operation name (defaults to function name)
        log_result_size: Add ``items_processed=len(result)`` to the
            performance record

    Example:
        @log_operation("normalize_features", log_result_size=True)
        def normalize(self, features):
            ...
    """
    def decorator(func: F) -> F:
        name = operation_name or func.__name__
        logger = get_logger(func.__module__)

        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            start_time = time.time()
            context = {'operation': name}

            try:
                logger.debug(f"Starting {name}", extra={'context': context})
                result = func(*args, **kwargs)

                metrics = {'status': 'success'}
                if log_result_size and hasattr(result, '__len__'):
                    metrics['items_processed'] = len(result)
                logger.log_performance(name, time.time() - start_time, **metrics)

                return result

            except Exception as e:
                duration = time.time() - start_time
                logger.error(
                    f"Failed {name}: {str(e)}",
                    exc_info=True,
                    extra={
                        'context': context,
                        'performance': {
                            'duration': duration,
                            'status': 'failed',
                            'error_type': type(e).__name__
                        }
                    }
                )
                raise

        return wrapper  # type: ignore
    return decorator
