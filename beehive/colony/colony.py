"""Colony — the queen and the workers she manages.

A Colony owns its workers, the eggs the queen lays, and the pool of
unassigned workers those eggs grow into.  Once per shift it sets every
worker to work, charges upkeep for the idle pool, feeds the queen, and
rebuilds its status report.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal

from beehive.colony.bee import Bee, Job, make_bee
from beehive.colony.vault import HoneyVault, format_quantity
from beehive.simulation.config import SimulationConfig

logger = logging.getLogger(__name__)

# Job order used in the status report
_REPORT_ORDER = (Job.NECTAR_COLLECTOR, Job.HONEY_MANUFACTURER, Job.EGG_CARE)


@dataclass
class Colony:
    """Top-level state for a single bee colony.

    Attributes:
        vault: The colony's honey/nectar store.
        config: Costs and rates for the queen and her workers.
        workers: Assigned workers, in assignment order.
        eggs: Eggs laid but not yet raised into workers.
        unassigned_workers: Worker pool; fractional while eggs mature.
        status_report: Human-readable report, rebuilt after every change.
    """

    vault: HoneyVault
    config: SimulationConfig = field(default_factory=SimulationConfig)
    workers: list[Bee] = field(init=False, default_factory=list)
    eggs: Decimal = field(init=False, default=Decimal("0"))
    unassigned_workers: Decimal = field(init=False)
    status_report: str = field(init=False, default="")

    def __post_init__(self) -> None:
        """Found the colony and assign its starting workers."""
        self.unassigned_workers = self.config.initial_unassigned_workers
        for job in self.config.starting_jobs:
            self.assign_worker(job)
        self._update_status_report(all_workers_fed=True)

    @property
    def can_assign_worker(self) -> bool:
        """Return True if a whole worker is waiting in the pool."""
        return self.unassigned_workers >= 1

    def assign_worker(self, job: Job | str) -> None:
        """Take a worker from the pool and give it a job.

        Does nothing if the pool holds less than one worker or if
        ``job`` is not a known job name.

        Args:
            job: The job, or its display name (e.g. ``"Egg Care"``).
        """
        try:
            picked = Job(job)
        except ValueError:
            logger.debug("Ignoring unknown job %r", job)
        else:
            self._add_worker(picked)
        self._update_status_report(all_workers_fed=True)

    def _add_worker(self, job: Job) -> None:
        if not self.can_assign_worker:
            logger.debug("No unassigned workers for %s", job.value)
            return
        bee = make_bee(
            job,
            vault=self.vault,
            config=self.config,
            report_eggs=self.report_egg_conversion,
        )
        self.workers.append(bee)
        self.unassigned_workers -= 1

    def advance_shift(self) -> bool:
        """Run one shift for the whole colony.

        The queen lays eggs, every worker works in assignment order, the
        idle pool is charged its upkeep, and finally the queen eats.

        Returns:
            True if the vault could feed the queen.  False means the
            colony has run out of honey.
        """
        self.eggs += self.config.eggs_per_shift

        all_workers_fed = True
        for worker in self.workers:
            if not worker.work_shift():
                all_workers_fed = False

        self.vault.try_consume_honey(
            self.unassigned_workers * self.config.honey_per_unassigned_worker,
        )
        self._update_status_report(all_workers_fed)
        return self.vault.try_consume_honey(self.config.queen_cost_per_shift)

    def report_egg_conversion(self, eggs_to_convert: Decimal) -> None:
        """Move raised eggs into the unassigned worker pool.

        Only converts when at least ``eggs_to_convert`` eggs are waiting;
        a smaller remainder stays put.

        Args:
            eggs_to_convert: Eggs an egg care bee raised this shift.
        """
        if self.eggs >= eggs_to_convert:
            self.eggs -= eggs_to_convert
            self.unassigned_workers += eggs_to_convert

    def worker_count(self, job: Job) -> int:
        """Return how many workers hold ``job``."""
        return sum(1 for worker in self.workers if worker.job is job)

    def _worker_status(self, job: Job) -> str:
        count = self.worker_count(job)
        s = "" if count == 1 else "s"
        return f"{count} {job.value} bee{s}"

    def _update_status_report(self, all_workers_fed: bool) -> None:
        lines = [
            "Vault report:",
            self.vault.status_summary(),
            "",
            f"Egg count: {format_quantity(self.eggs)}",
            f"Unassigned workers: {format_quantity(self.unassigned_workers)}",
        ]
        lines += [self._worker_status(job) for job in _REPORT_ORDER]
        lines.append(f"TOTAL WORKERS: {len(self.workers)}")
        if not all_workers_fed:
            lines.append("WARNING: NOT ALL WORKERS DID THEIR JOBS")
        self.status_report = "\n".join(lines)
