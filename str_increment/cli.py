from dataclasses import dataclass
from typing import Optional
import argparse
import json
import logging
import time

from .client import SequenceClient
from .runner import run_sequence, run_bulk_sequence
from .utils import increment, decrement, strict_increment, strict_decrement


@dataclass
class Config:
    value: str = ""
    count: int = 1
    decrement: bool = False
    strict: bool = False
    include_start: bool = False
    batch_size: int = 25
    post_url: Optional[str] = None
    timeout: int = 10
    json: bool = False
    verbose: bool = False

    @classmethod
    def from_args(cls, argv: Optional[list] = None) -> 'Config':
        parser = argparse.ArgumentParser(description="Print the next value(s) of an alphanumeric string")
        parser.add_argument("value", help="string to start from")
        parser.add_argument("--count", default=cls.count, type=int, help="number of values to generate (default 1)")
        parser.add_argument("--decrement", action="store_true", help="walk backwards instead of forwards")
        parser.add_argument("--strict", action="store_true", help="reject empty and non-alphanumeric values")
        parser.add_argument("--include-start", action="store_true", dest="include_start", help="also print the start value")
        parser.add_argument("--batch-size", default=cls.batch_size, type=int, help="values per published batch (default 25)")
        parser.add_argument("--post-url", default=None, help="POST generated batches as JSON to this URL")
        parser.add_argument("--timeout", default=cls.timeout, type=int, help="per-request timeout seconds")
        parser.add_argument("--json", action="store_true", help="print a JSON document instead of one value per line")
        parser.add_argument("--verbose", action="store_true", help="enable debug logging")
        args = parser.parse_args(argv)
        return cls(**vars(args))

    def step(self):
        return decrement if self.decrement else increment

    def validate(self) -> None:
        """Raise ValueError when the settings cannot produce a run.

        With --strict only the start value is checked; the run itself uses
        the total step and simply ends at a value with no successor.
        """
        if self.strict:
            (strict_decrement if self.decrement else strict_increment)(self.value)
        if self.batch_size < 1:
            raise ValueError("batch size must be at least 1")


def main(argv: Optional[list] = None) -> int:
    config = Config.from_args(argv)
    logging.basicConfig(level=logging.DEBUG if config.verbose else logging.INFO, format="%(message)s")
    logger = logging.getLogger("str_increment")

    try:
        config.validate()
    except ValueError as e:
        logger.error("error: %s", e)
        return 2

    step = config.step()
    t0 = time.perf_counter()
    if config.include_start:
        first, count = config.value, config.count + 1
    else:
        first, count = step(config.value), config.count

    if config.post_url:
        client = SequenceClient(config.post_url, timeout=config.timeout)

        def sink(batch: list):
            return client.raise_for_status(client.publish(batch))

        batches = run_bulk_sequence(first, count, batch_size=config.batch_size, sink=sink, step=step)
        values = [v for b in batches for v in b.values]
    else:
        batches = []
        values = run_sequence(first, count, step).values
    t1 = time.perf_counter()

    if config.json:
        doc = {"start": config.value, "values": values, "time_s": t1 - t0}
        if batches:
            doc["batches"] = [
                {
                    "batch": idx,
                    "count": len(b.values),
                    "status_code": b.response.status_code if b.response else None,
                    "error": b.error,
                }
                for idx, b in enumerate(batches, start=1)
            ]
        print(json.dumps(doc, ensure_ascii=False, indent=2))
    else:
        for v in values:
            print(v)

    failed = [b for b in batches if not b.success]
    for idx, b in enumerate(batches, start=1):
        logger.debug("batch %d: %d values, status=%s, time=%.4fs", idx, len(b.values),
                     b.response.status_code if b.response else None, b.time_s)
    if batches:
        logger.info("Published %d of %d batches", len(batches) - len(failed), len(batches))
    for b in failed:
        logger.error("Batch starting at %s failed: %s", b.values[0], b.error)
    return 1 if failed else 0
