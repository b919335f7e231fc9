"""
Background task runners.

Persistence and refinement calls are submitted as tasks and observed through
the returned ``concurrent.futures.Future``. ThreadTaskRunner runs them on a
small pool; InlineTaskRunner runs them immediately on the caller's thread
(sync mode, also used by tests).
"""
import logging
from abc import ABC, abstractmethod
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable

from core.config_loader import SwipeConfig

logger = logging.getLogger(__name__)


class TaskRunner(ABC):

    @abstractmethod
    def submit(self, fn: Callable, *args, **kwargs) -> Future:
        pass

    def shutdown(self, cancel_pending: bool = False) -> None:
        pass


class ThreadTaskRunner(TaskRunner):
    def __init__(self, max_workers: int = 4):
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="jobswipe-task")

    def submit(self, fn: Callable, *args, **kwargs) -> Future:
        return self._executor.submit(fn, *args, **kwargs)

    def shutdown(self, cancel_pending: bool = False) -> None:
        logger.info(f"Shutting down task runner (cancel_pending={cancel_pending})")
        self._executor.shutdown(wait=not cancel_pending, cancel_futures=cancel_pending)


class InlineTaskRunner(TaskRunner):
    def submit(self, fn: Callable, *args, **kwargs) -> Future:
        future = Future()
        future.set_running_or_notify_cancel()
        try:
            result = fn(*args, **kwargs)
        except Exception as e:
            future.set_exception(e)
        else:
            future.set_result(result)
        return future


def build_task_runner(config: SwipeConfig) -> TaskRunner:
    if config.background_tasks == "inline":
        logger.info("Background tasks disabled via config. Using inline mode.")
        return InlineTaskRunner()
    return ThreadTaskRunner(max_workers=config.max_workers)
