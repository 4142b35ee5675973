"""Generate runs of successive values.

run_sequence walks a start value forward (or backward) a number of
steps and records the elapsed time. run_bulk_sequence does the same but
splits the run into batches and hands each one to an optional sink,
such as `SequenceClient.publish`.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Iterator, List, Optional

from .client import APIError, APIResponse
from .utils import increment

logger = logging.getLogger(__name__)

Step = Callable[[str], str]
Sink = Callable[[list], APIResponse]


def iter_sequence(start: str, count: int, step: Step = increment) -> Iterator[str]:
    """Yield up to `count` values beginning with `start`.

    Stops early once `step` returns its input unchanged, since such a
    value has no successor.
    """
    current = start
    for i in range(count):
        yield current
        if i == count - 1:
            break
        nxt = step(current)
        if nxt == current:
            logger.debug("value %r has no successor; stopping after %d values", current, i + 1)
            break
        current = nxt


@dataclass
class SequenceResult:
    start: str
    values: List[str]
    time_s: float

    @property
    def last(self) -> Optional[str]:
        return self.values[-1] if self.values else None


def run_sequence(start: str, count: int, step: Step = increment) -> SequenceResult:
    t0 = time.perf_counter()
    values = list(iter_sequence(start, count, step))
    t1 = time.perf_counter()
    return SequenceResult(start=start, values=values, time_s=t1 - t0)


@dataclass
class BatchResult:
    values: list
    response: Optional[APIResponse] = None
    time_s: float = 0.0
    error: Optional[str] = field(default=None)

    @property
    def success(self) -> bool:
        return self.response is None or self.response.is_success


def run_bulk_sequence(
    start: str,
    count: int,
    batch_size: int = 25,
    sink: Optional[Sink] = None,
    step: Step = increment,
) -> list:
    """Generate `count` values in batches of `batch_size` (default 25).

    Returns a list of BatchResult, one per batch.
    """
    if batch_size < 1:
        raise ValueError("batch_size must be at least 1")

    results = []
    batch: list = []
    t0 = time.perf_counter()
    for value in iter_sequence(start, count, step):
        batch.append(value)
        if len(batch) == batch_size:
            results.append(_finish_batch(batch, sink, t0))
            batch = []
            t0 = time.perf_counter()
    if batch:
        results.append(_finish_batch(batch, sink, t0))
    return results


def _finish_batch(batch: list, sink: Optional[Sink], t0: float) -> BatchResult:
    response = None
    error = None
    if sink is not None:
        # a failing sink is recorded on its batch and the run continues
        try:
            response = sink(batch)
        except APIError as err:
            resp = err.response
            if isinstance(resp, APIResponse):
                response = resp
            else:
                response = APIResponse(err.status_code, getattr(resp, "text", None))
            error = str(err)
            logger.debug("batch starting at %r failed: %s", batch[0], err)
    return BatchResult(values=batch, response=response, time_s=time.perf_counter() - t0, error=error)
