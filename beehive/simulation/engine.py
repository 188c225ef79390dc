"""SimulationEngine — the shift loop and the collapse/reset cycle.

Owns the vault and the colony for one simulation and is the only thing
drivers talk to.  A shift runs in this order:

1. The queen lays eggs
2. Workers work and eat, in assignment order
3. The idle pool is charged its upkeep
4. The queen eats; if she cannot, the colony has collapsed

A collapsed engine stops advancing until ``reset()`` refills the vault
and founds a new colony in one step.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from beehive.colony.bee import Job
from beehive.colony.colony import Colony
from beehive.colony.vault import HoneyVault
from beehive.simulation.config import SimulationConfig

logger = logging.getLogger(__name__)


@dataclass
class SimulationEngine:
    """Drives one colony forward shift by shift.

    Attributes:
        config: Loaded simulation configuration.
        vault: The colony's honey/nectar store.
        colony: The current colony.
        shift: Shifts completed since the colony was founded.
        collapsed: True once the queen could not be fed.
    """

    config: SimulationConfig = field(default_factory=SimulationConfig)
    vault: HoneyVault = field(init=False)
    colony: Colony = field(init=False)
    shift: int = field(init=False, default=0)
    collapsed: bool = field(init=False, default=False)

    def __post_init__(self) -> None:
        """Fill the vault and found the first colony."""
        self.vault = HoneyVault(config=self.config)
        self.colony = Colony(vault=self.vault, config=self.config)

    @property
    def status_report(self) -> str:
        """Return the colony's current status report."""
        return self.colony.status_report

    @property
    def can_assign_worker(self) -> bool:
        """Return True if a worker can be assigned right now."""
        return not self.collapsed and self.colony.can_assign_worker

    def assign(self, job: Job | str) -> None:
        """Assign a worker to ``job``.  Ignored once collapsed.

        Args:
            job: The job, or its display name.
        """
        if self.collapsed:
            return
        self.colony.assign_worker(job)

    def step(self) -> bool:
        """Advance the colony by one shift.

        Returns:
            True if the shift succeeded, False if the colony collapsed on
            this shift or had already collapsed.
        """
        if self.collapsed:
            return False

        ok = self.colony.advance_shift()
        self.shift += 1
        if not ok:
            self.collapsed = True
            logger.warning(
                "Colony collapsed after %d shifts: out of honey",
                self.shift,
            )
        return ok

    def run(self, shifts: int) -> int:
        """Run up to ``shifts`` shifts, stopping early on collapse.

        Args:
            shifts: Maximum number of shifts to advance.

        Returns:
            Number of shifts actually run.
        """
        ran = 0
        for _ in range(shifts):
            if self.collapsed:
                break
            self.step()
            ran += 1
        return ran

    def reset(self) -> None:
        """Refill the vault and found a new colony in its place."""
        self.vault.reset()
        self.colony = Colony(vault=self.vault, config=self.config)
        self.shift = 0
        self.collapsed = False
        logger.info("Colony reset")
