"""Products the studio can release: one-shot movies and serialized shows."""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import timedelta

from .scheduler import Scheduler

ONE_WEEK = timedelta(weeks=1)
DEFAULT_EPISODE_COUNT = 10


class Product(ABC):
    """Anything the studio can put out for people to watch."""

    @abstractmethod
    def release(self) -> None:
        ...


class Movie(Product):
    def release(self) -> None:
        logging.info("Movie released!")


class Series(Product):
    """
    Released one episode at a time. Each release schedules the next one
    ``interval`` later until ``total_count`` episodes are out.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        total_count: int = DEFAULT_EPISODE_COUNT,
        interval: timedelta = ONE_WEEK,
    ) -> None:
        if total_count < 0:
            raise ValueError(f"total_count must be >= 0, got {total_count}")
        self.scheduler = scheduler
        self.total_count = total_count
        self.interval = interval
        self.released_count = 0

    @property
    def exhausted(self) -> bool:
        return self.released_count >= self.total_count

    def release(self) -> None:
        if self.exhausted:
            return
        self.released_count += 1
        logging.info("Episode #%d released!", self.released_count)
        self.scheduler.after(self.interval, self.release)

    def __repr__(self) -> str:
        return f"Series(released_count={self.released_count}, total_count={self.total_count})"
