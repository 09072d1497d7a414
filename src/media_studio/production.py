"""Productions (creators) and the dispatcher that picks one by product type."""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Optional

from .config import StudioSettings
from .products import DEFAULT_EPISODE_COUNT, ONE_WEEK, Movie, Product, Series
from .scheduler import Scheduler, ThreadingScheduler

PRODUCT_TYPES = ("movie", "series")


class InvalidProductType(ValueError):
    def __init__(self, product_type: str) -> None:
        super().__init__(f"Unsupported product type: {product_type!r}")
        self.product_type = product_type


class Production(ABC):
    """
    Knows how to release products but not how to make them; subclasses
    decide which product ``create_product`` returns.
    """

    @abstractmethod
    def create_product(self) -> Product:
        ...

    def release(self, product: Product) -> None:
        product.release()
        logging.info("New release available! Hurry up and watch!")


class MovieProduction(Production):
    def create_product(self) -> Product:
        return Movie()


class SeriesProduction(Production):
    def __init__(
        self,
        scheduler: Scheduler,
        total_count: int = DEFAULT_EPISODE_COUNT,
        interval: timedelta = ONE_WEEK,
    ) -> None:
        self.scheduler = scheduler
        self.total_count = total_count
        self.interval = interval

    def create_product(self) -> Product:
        return Series(self.scheduler, total_count=self.total_count, interval=self.interval)


def production_for(
    product_type: str,
    scheduler: Scheduler,
    settings: Optional[StudioSettings] = None,
) -> Production:
    """Pick the production matching ``product_type``."""
    settings = settings or StudioSettings()
    if product_type == "movie":
        return MovieProduction()
    if product_type == "series":
        return SeriesProduction(
            scheduler,
            total_count=settings.series_total_count,
            interval=settings.release_interval,
        )
    raise InvalidProductType(product_type)


def run_new_product(
    product_type: str,
    scheduler: Optional[Scheduler] = None,
    settings: Optional[StudioSettings] = None,
) -> None:
    """
    Create and release a new product of the given type.

    Follow-up releases of a series are left on ``scheduler``, which owns
    the chain until the series is exhausted.
    """
    production = production_for(product_type, scheduler or ThreadingScheduler(), settings)
    product = production.create_product()
    production.release(product)
