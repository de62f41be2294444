"""Common decorators for error handling and performance logging."""

from __future__ import annotations

import time
import types
from functools import wraps

from ..logging import get_logger
from ..exceptions import CaptureReadError, RenderError


logger = get_logger(__name__)


def _translate_while_iterating(gen, exc_cls, func_name):
    """Re-raise failures from ``gen`` as ``exc_cls`` tagged with ``func_name``."""
    try:
        yield from gen
    except exc_cls:
        raise
    except Exception as exc:
        logger.error("%s failed mid-iteration: %s", func_name, exc, exc_info=True)
        raise exc_cls(str(exc), context=func_name) from exc


def handle_capture_errors(func):
    """Wrap capture readers to raise :class:`CaptureReadError` on failure."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            result = func(*args, **kwargs)
        except CaptureReadError:
            raise
        except Exception as exc:
            logger.error("Capture read error in %s: %s", func.__name__, exc, exc_info=True)
            raise CaptureReadError(str(exc), context=func.__name__) from exc
        if isinstance(result, types.GeneratorType):
            return _translate_while_iterating(result, CaptureReadError, func.__name__)
        return result

    return wrapper


def handle_render_errors(func):
    """Wrap chart helpers to raise :class:`RenderError` on failure."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (RenderError, ImportError):
            raise
        except Exception as exc:
            logger.error("Render error in %s: %s", func.__name__, exc, exc_info=True)
            raise RenderError(str(exc), context=func.__name__) from exc

    return wrapper


def log_performance(func):
    """Log how long ``func`` takes.

    For generators the clock runs until iteration stops and the number of
    yielded items is logged with the duration.
    """

    @wraps(func)
    def wrapper(*args, **kwargs):
        started = time.perf_counter()
        try:
            result = func(*args, **kwargs)
        except Exception:
            logger.info("%s failed after %.3fs", func.__name__, time.perf_counter() - started)
            raise

        if not isinstance(result, types.GeneratorType):
            logger.info("%s took %.3fs", func.__name__, time.perf_counter() - started)
            return result

        def timed():
            items = 0
            try:
                for item in result:
                    items += 1
                    yield item
            finally:
                logger.info(
                    "%s yielded %d items in %.3fs",
                    func.__name__,
                    items,
                    time.perf_counter() - started,
                )

        return timed()

    return wrapper
