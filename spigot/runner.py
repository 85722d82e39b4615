# spigot/runner.py
"""Rate-limited loop driving one generator into one sender."""

import logging
import threading
import time
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import List, Optional

from .config import RunnerConfig
from .errors import RenderError
from .generator import Generator
from .registry import Registry
from .senders import MessageSender, create_sender


@dataclass
class RunStats:
    """Statistics tracking for one runner."""
    name: str = ''
    records_sent: int = 0
    records_failed: int = 0
    render_errors: int = 0
    start_time: datetime = field(default_factory=datetime.now)
    end_time: Optional[datetime] = None
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        """True when the run ended on an error rather than a limit."""
        return bool(self.render_errors or self.error)

    def record(self, success: bool) -> None:
        if success:
            self.records_sent += 1
        else:
            self.records_failed += 1

    def get_runtime(self) -> timedelta:
        return (self.end_time or datetime.now()) - self.start_time

    def get_rate(self) -> float:
        """Get average records per second rate."""
        runtime = self.get_runtime().total_seconds()
        if runtime > 0:
            return self.records_sent / runtime
        return 0.0

    def get_summary(self) -> str:
        lines = [
            f"Generator:        {self.name}",
            f"Runtime:          {self.get_runtime()}",
            f"Records Sent:     {self.records_sent:,}",
            f"Records Failed:   {self.records_failed:,}",
            f"Render Errors:    {self.render_errors:,}",
            f"Average Rate:     {self.get_rate():.2f} records/sec",
        ]
        if self.error:
            lines.append(f"Stopped By:       {self.error}")
        return "\n".join(lines)


class Runner:
    """Pull lines from a generator and push them to a sender.

    ``rate`` is records per second (0 means no delay), ``records`` and
    ``duration`` bound the run when non-zero.
    """

    def __init__(self, generator: Generator, sender: MessageSender,
                 rate: float = 10.0, records: int = 0, duration: int = 0,
                 name: str = ''):
        self.generator = generator
        self.sender = sender
        self.rate = rate
        self.records = records
        self.duration = duration
        self.stats = RunStats(name=name or generator.name)
        self._stop = threading.Event()

    def run(self) -> RunStats:
        interval = 1.0 / self.rate if self.rate > 0 else 0.0
        start_time = time.monotonic()
        count = 0

        logging.info(f"Starting runner {self.stats.name}: rate={self.rate}/s, "
                     f"max={self.records}, duration={self.duration}s")
        self.stats = RunStats(name=self.stats.name)

        try:
            while not self._stop.is_set():
                if self.records > 0 and count >= self.records:
                    logging.info(f"{self.stats.name}: reached record limit: {self.records}")
                    break

                if self.duration > 0 and (time.monotonic() - start_time) >= self.duration:
                    logging.info(f"{self.stats.name}: reached duration limit: {self.duration}s")
                    break

                try:
                    line = self.generator.next()
                except RenderError as e:
                    self.stats.render_errors += 1
                    logging.error(f"{self.stats.name}: {e}")
                    break

                self.stats.record(self.sender.send(line))
                count += 1

                if interval:
                    self._stop.wait(interval)
        except Exception as e:
            self.stats.error = f"{type(e).__name__}: {e}"
            logging.error(f"{self.stats.name}: runner stopped: {self.stats.error}", exc_info=True)
        finally:
            self.stats.end_time = datetime.now()
            self.sender.close()

        return self.stats

    def stop(self) -> None:
        self._stop.set()


def build_runners(configs: List[RunnerConfig], registry: Registry) -> List[Runner]:
    """Construct one generator and one sender per runner config.

    Generators are all constructed before any sender is opened so a
    configuration error leaves no sockets or files behind.
    """
    generators = [registry.create(cfg.generator_type, cfg.generator) for cfg in configs]
    return [
        Runner(
            generator,
            create_sender(cfg.output, index),
            rate=cfg.rate,
            records=cfg.records,
            duration=cfg.duration,
        )
        for index, (cfg, generator) in enumerate(zip(configs, generators))
    ]


def run_all(runners: List[Runner]) -> List[RunStats]:
    """Run every runner on its own thread until all finish or Ctrl+C."""
    threads = [
        threading.Thread(target=runner.run, name=runner.stats.name, daemon=True)
        for runner in runners
    ]
    for thread in threads:
        thread.start()

    try:
        while any(thread.is_alive() for thread in threads):
            for thread in threads:
                thread.join(0.1)
    except KeyboardInterrupt:
        print("\n\nReceived interrupt signal...")
        for runner in runners:
            runner.stop()
        for thread in threads:
            thread.join()

    return [runner.stats for runner in runners]
