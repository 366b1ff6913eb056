"""
Runs stream jobs on worker threads and reports their outcome.
"""

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Optional

from file_manager.exceptions import BaseAppError
from file_manager.use_cases.streams.pipeline import StreamJob


class StreamRunner:
    """Executes StreamJob instances off the command loop.

    With ``wait=True`` submit() blocks until the job has reported, so its
    message is printed before the next prompt. With ``wait=False`` the job
    reports whenever it finishes.
    """

    def __init__(
        self,
        report: Callable[[str], None],
        wait: bool = True,
        max_workers: int = 4,
        logger: Optional[logging.Logger] = None,
    ):
        self._report = report
        self._wait = wait
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="fm-stream"
        )
        self._logger = logger or logging.getLogger(__name__)

    @property
    def waits(self) -> bool:
        return self._wait

    def _execute(self, job: StreamJob) -> bool:
        self._logger.info(f"Running stream job: {job.name}")
        try:
            message = job.run()
        except BaseAppError as e:
            self._logger.info(f"Stream job {job.name} failed: {e}")
            self._report(str(e))
            return False
        except Exception:
            self._logger.exception(f"Unexpected error in stream job {job.name}")
            self._report("Operation failed")
            return False
        self._report(message)
        return True

    def submit(self, job: StreamJob) -> "Future[bool]":
        """Schedule job; the future resolves to True when it succeeded."""
        future = self._executor.submit(self._execute, job)
        if self._wait:
            future.result()
        return future

    def shutdown(self, wait: bool = True) -> None:
        """Stop accepting jobs; by default wait for in-flight ones to report."""
        self._executor.shutdown(wait=wait)
