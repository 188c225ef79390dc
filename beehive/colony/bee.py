"""Bee — worker agents and the shift protocol they share.

Every worker does its job first and then tries to eat from the vault.
The labour happens whether or not there is honey left to pay for it; an
unfed bee simply reports failure for that shift and keeps its place in
the colony.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import ClassVar

from beehive.colony.vault import HoneyVault
from beehive.simulation.config import SimulationConfig

logger = logging.getLogger(__name__)


class Job(Enum):
    """The jobs a worker can be assigned, keyed by their display name."""

    NECTAR_COLLECTOR = "Nectar Collector"
    HONEY_MANUFACTURER = "Honey Manufacturer"
    EGG_CARE = "Egg Care"


@dataclass
class Bee(ABC):
    """A single worker bound to its colony's vault.

    Attributes:
        vault: The shared honey/nectar store.
        cost_per_shift: Honey eaten at the end of each shift.
    """

    job: ClassVar[Job]

    vault: HoneyVault = field(repr=False)
    cost_per_shift: Decimal

    def work_shift(self) -> bool:
        """Do this shift's work, then eat.

        Returns:
            True if the vault could feed the bee, False otherwise.
        """
        self.produce()
        fed = self.vault.try_consume_honey(self.cost_per_shift)
        if not fed:
            logger.debug(
                "%s went unfed (needs %s)",
                self.job.value,
                self.cost_per_shift,
            )
        return fed

    @abstractmethod
    def produce(self) -> None:
        """Apply this job's effect for one shift."""


@dataclass
class NectarCollector(Bee):
    """Brings nectar into the vault."""

    job: ClassVar[Job] = Job.NECTAR_COLLECTOR

    nectar_per_shift: Decimal = Decimal("33.25")

    def produce(self) -> None:
        self.vault.deposit(self.nectar_per_shift)


@dataclass
class HoneyManufacturer(Bee):
    """Turns stored nectar into honey."""

    job: ClassVar[Job] = Job.HONEY_MANUFACTURER

    nectar_per_shift: Decimal = Decimal("33.15")

    def produce(self) -> None:
        self.vault.convert_nectar_to_honey(self.nectar_per_shift)


@dataclass
class EggCare(Bee):
    """Raises the queen's eggs into new workers.

    Attributes:
        report_eggs: Callback that hands raised eggs to the colony's
            unassigned worker pool.
        care_progress_per_shift: Eggs raised each shift.
    """

    job: ClassVar[Job] = Job.EGG_CARE

    report_eggs: Callable[[Decimal], None] = field(repr=False)
    care_progress_per_shift: Decimal = Decimal("0.15")

    def produce(self) -> None:
        self.report_eggs(self.care_progress_per_shift)


def make_bee(
    job: Job,
    vault: HoneyVault,
    config: SimulationConfig,
    report_eggs: Callable[[Decimal], None],
) -> Bee:
    """Build a worker for ``job`` with its configured cost and rate.

    Args:
        job: Which kind of worker to create.
        vault: The colony's vault.
        config: Source of per-job costs and production rates.
        report_eggs: Egg-conversion callback, used by egg care bees.

    Returns:
        The new worker.
    """
    match job:
        case Job.NECTAR_COLLECTOR:
            return NectarCollector(
                vault=vault,
                cost_per_shift=config.nectar_collector_cost,
                nectar_per_shift=config.nectar_collected_per_shift,
            )
        case Job.HONEY_MANUFACTURER:
            return HoneyManufacturer(
                vault=vault,
                cost_per_shift=config.honey_manufacturer_cost,
                nectar_per_shift=config.nectar_processed_per_shift,
            )
        case Job.EGG_CARE:
            return EggCare(
                vault=vault,
                cost_per_shift=config.egg_care_cost,
                report_eggs=report_eggs,
                care_progress_per_shift=config.care_progress_per_shift,
            )
