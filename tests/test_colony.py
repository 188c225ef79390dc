"""Tests for beehive.colony.colony - assignment, shifts, eggs, reports."""

from decimal import Decimal

from beehive.colony.bee import EggCare, Job
from beehive.colony.colony import Colony
from beehive.colony.vault import HoneyVault
from beehive.simulation.config import SimulationConfig

INITIAL_REPORT = (
    "Vault report:\n"
    "25.00 units of honey\n"
    "100.00 units of nectar\n"
    "\n"
    "Egg count: 0.00\n"
    "Unassigned workers: 0.00\n"
    "1 Nectar Collector bee\n"
    "1 Honey Manufacturer bee\n"
    "1 Egg Care bee\n"
    "TOTAL WORKERS: 3"
)


def _colony(**overrides: object) -> Colony:
    config = SimulationConfig(**overrides)  # type: ignore[arg-type]
    return Colony(vault=HoneyVault(config=config), config=config)


class TestFounding:
    """Tests for a newly founded colony."""

    def test_starting_workers(self, colony: Colony) -> None:
        assert [bee.job for bee in colony.workers] == [
            Job.EGG_CARE,
            Job.NECTAR_COLLECTOR,
            Job.HONEY_MANUFACTURER,
        ]

    def test_pool_is_used_up(self, colony: Colony) -> None:
        assert colony.unassigned_workers == Decimal("0")
        assert colony.eggs == Decimal("0")
        assert not colony.can_assign_worker

    def test_vault_untouched(self, colony: Colony) -> None:
        assert colony.vault.honey == Decimal("25")
        assert colony.vault.nectar == Decimal("100")

    def test_initial_status_report(self, colony: Colony) -> None:
        assert colony.status_report == INITIAL_REPORT

    def test_egg_care_reports_to_its_colony(self, colony: Colony) -> None:
        egg_care = colony.workers[0]
        assert isinstance(egg_care, EggCare)
        colony.eggs = Decimal("1")
        egg_care.produce()
        assert colony.eggs == Decimal("0.85")
        assert colony.unassigned_workers == Decimal("0.15")


class TestAssignment:
    """Tests for assigning workers from the pool."""

    def test_no_op_with_empty_pool(self, colony: Colony) -> None:
        colony.assign_worker("Nectar Collector")
        assert len(colony.workers) == 3
        assert colony.unassigned_workers == Decimal("0")

    def test_no_op_with_fractional_pool(self, colony: Colony) -> None:
        colony.unassigned_workers = Decimal("0.99")
        colony.assign_worker(Job.HONEY_MANUFACTURER)
        assert len(colony.workers) == 3
        assert colony.unassigned_workers == Decimal("0.99")

    def test_assign_takes_exactly_one(self, colony: Colony) -> None:
        colony.unassigned_workers = Decimal("1.15")
        assert colony.can_assign_worker
        colony.assign_worker("Nectar Collector")
        assert len(colony.workers) == 4
        assert colony.workers[-1].job is Job.NECTAR_COLLECTOR
        assert colony.unassigned_workers == Decimal("0.15")
        assert not colony.can_assign_worker

    def test_assign_accepts_job_enum(self, colony: Colony) -> None:
        colony.unassigned_workers = Decimal("1")
        colony.assign_worker(Job.EGG_CARE)
        assert colony.worker_count(Job.EGG_CARE) == 2

    def test_unknown_job_ignored(self, colony: Colony) -> None:
        colony.unassigned_workers = Decimal("1")
        colony.assign_worker("Drone")
        assert len(colony.workers) == 3
        assert colony.unassigned_workers == Decimal("1")

    def test_unknown_job_still_refreshes_report(self) -> None:
        """Any assignment attempt rebuilds the report without the warning."""
        colony = _colony(initial_honey=Decimal("2"))
        colony.advance_shift()
        assert "WARNING: NOT ALL WORKERS DID THEIR JOBS" in colony.status_report
        colony.assign_worker("Drone")
        assert "WARNING" not in colony.status_report
        assert colony.status_report.endswith("TOTAL WORKERS: 3")
        # Report now reflects the queen's meal too
        assert "3.02 units of honey" in colony.status_report

    def test_report_pluralises_counts(self, colony: Colony) -> None:
        colony.unassigned_workers = Decimal("1")
        colony.assign_worker("Nectar Collector")
        report = colony.status_report
        assert "2 Nectar Collector bees" in report
        assert "1 Honey Manufacturer bee\n" in report
        assert "TOTAL WORKERS: 4" in report

    def test_report_zero_count_is_plural(self) -> None:
        colony = _colony(starting_jobs=["Egg Care"])
        assert "0 Nectar Collector bees" in colony.status_report
        assert "0 Honey Manufacturer bees" in colony.status_report
        assert "1 Egg Care bee\n" in colony.status_report
        assert colony.unassigned_workers == Decimal("2")


class TestEggConversion:
    """Tests for eggs maturing into the worker pool."""

    def test_no_op_without_enough_eggs(self, colony: Colony) -> None:
        colony.report_egg_conversion(Decimal("0.15"))
        assert colony.eggs == Decimal("0")
        assert colony.unassigned_workers == Decimal("0")

    def test_partial_eggs_are_not_converted(self, colony: Colony) -> None:
        colony.eggs = Decimal("0.10")
        colony.report_egg_conversion(Decimal("0.15"))
        assert colony.eggs == Decimal("0.10")
        assert colony.unassigned_workers == Decimal("0")

    def test_transfers_exact_amount(self, colony: Colony) -> None:
        colony.eggs = Decimal("0.45")
        colony.report_egg_conversion(Decimal("0.15"))
        assert colony.eggs == Decimal("0.30")
        assert colony.unassigned_workers == Decimal("0.15")

    def test_exact_cover_converts(self, colony: Colony) -> None:
        colony.eggs = Decimal("0.15")
        colony.report_egg_conversion(Decimal("0.15"))
        assert colony.eggs == Decimal("0")
        assert colony.unassigned_workers == Decimal("0.15")

    def test_fractional_accumulation_enables_assignment(self) -> None:
        """A lone egg care bee grows the pool by 0.15 per shift."""
        colony = _colony(
            initial_honey=Decimal("1000"),
            initial_unassigned_workers=Decimal("1"),
            starting_jobs=["Egg Care"],
        )
        for shift in range(1, 7):
            assert colony.advance_shift()
            assert colony.eggs == Decimal("0.30") * shift
            assert colony.unassigned_workers == Decimal("0.15") * shift
            assert not colony.can_assign_worker

        assert colony.advance_shift()
        assert colony.unassigned_workers == Decimal("1.05")
        assert colony.can_assign_worker

        colony.assign_worker("Honey Manufacturer")
        assert colony.unassigned_workers == Decimal("0.05")
        assert len(colony.workers) == 2


class TestAdvanceShift:
    """Tests for one colony-wide shift."""

    def test_first_shift_arithmetic(self, colony: Colony) -> None:
        assert colony.advance_shift()
        # egg care 1.35, collector 1.95, manufacturer +6.2985 -1.70,
        # idle upkeep 0.15 * 0.5, queen 2.15
        assert colony.vault.honey == Decimal("24.0735")
        assert colony.vault.nectar == Decimal("100.10")
        assert colony.eggs == Decimal("0.30")
        assert colony.unassigned_workers == Decimal("0.15")

    def test_first_shift_report(self, colony: Colony) -> None:
        colony.advance_shift()
        assert colony.status_report == (
            "Vault report:\n"
            "26.22 units of honey\n"
            "100.10 units of nectar\n"
            "\n"
            "Egg count: 0.30\n"
            "Unassigned workers: 0.15\n"
            "1 Nectar Collector bee\n"
            "1 Honey Manufacturer bee\n"
            "1 Egg Care bee\n"
            "TOTAL WORKERS: 3"
        )

    def test_unfed_worker_warning(self) -> None:
        colony = _colony(initial_honey=Decimal("2"))
        # Egg care eats, the collector goes hungry, the manufacturer
        # feeds itself from its own honey, then the queen still eats.
        assert colony.advance_shift()
        assert colony.vault.honey == Decimal("3.0235")
        assert colony.status_report.endswith(
            "TOTAL WORKERS: 3\nWARNING: NOT ALL WORKERS DID THEIR JOBS",
        )
        assert "LOW HONEY - ADD A HONEY MANUFACTURER" in colony.status_report

    def test_unfed_workers_stay_in_colony(self) -> None:
        colony = _colony(initial_honey=Decimal("0"), initial_nectar=Decimal("0"))
        colony.advance_shift()
        assert len(colony.workers) == 3

    def test_idle_upkeep_failure_does_not_block_shift(self) -> None:
        colony = _colony(
            initial_honey=Decimal("2.15"),
            initial_nectar=Decimal("0"),
            initial_unassigned_workers=Decimal("10"),
            starting_jobs=[],
        )
        # Upkeep of 5 cannot be paid; the queen still eats.
        assert colony.advance_shift()
        assert colony.vault.honey == Decimal("0")

    def test_exhaustion(self, colony: Colony) -> None:
        """Advance until the queen goes hungry; nothing goes negative."""
        results = []
        for _ in range(500):
            ok = colony.advance_shift()
            results.append(ok)
            assert colony.vault.honey >= 0
            assert colony.vault.nectar >= 0
            if not ok:
                break

        assert results[-1] is False
        assert all(results[:-1])
        assert colony.vault.honey < Decimal("2.15")
