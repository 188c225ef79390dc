"""Config — load colony parameters from YAML files.

Every shift cost, production rate and starting quantity lives in YAML
and is parsed into a typed dataclass here.  Numbers are held as
``Decimal`` so vault arithmetic stays exact to the cent.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from decimal import Decimal, InvalidOperation
from pathlib import Path

import yaml

_DEFAULT_STARTING_JOBS = ["Egg Care", "Nectar Collector", "Honey Manufacturer"]


def _to_decimal(name: str, value: object) -> Decimal:
    """Convert a YAML scalar to Decimal without binary-float noise.

    Raises:
        ValueError: If ``value`` is not a number.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise ValueError(f"{name} must be a number, got {value!r}")
    try:
        return Decimal(str(value))
    except InvalidOperation:
        raise ValueError(f"{name} must be a number, got {value!r}") from None


@dataclass
class SimulationConfig:
    """Top-level colony configuration.

    Attributes:
        initial_honey: Honey in the vault at start and after a reset.
        initial_nectar: Nectar in the vault at start and after a reset.
        low_level_warning: Level below which the vault warns about a
            resource.
        nectar_conversion_ratio: Honey produced per unit of nectar.
        queen_cost_per_shift: Honey the queen eats every shift.
        eggs_per_shift: Eggs the queen lays every shift.
        honey_per_unassigned_worker: Upkeep per idle worker per shift.
        initial_unassigned_workers: Worker pool a new colony starts with.
        nectar_collector_cost: Honey a nectar collector eats per shift.
        nectar_collected_per_shift: Nectar a collector brings in.
        honey_manufacturer_cost: Honey a manufacturer eats per shift.
        nectar_processed_per_shift: Nectar a manufacturer converts.
        egg_care_cost: Honey an egg care bee eats per shift.
        care_progress_per_shift: Eggs an egg care bee raises per shift.
        starting_jobs: Jobs assigned, in order, when a colony is founded.
    """

    initial_honey: Decimal = Decimal("25")
    initial_nectar: Decimal = Decimal("100")
    low_level_warning: Decimal = Decimal("10")
    nectar_conversion_ratio: Decimal = Decimal("0.19")

    # Queen
    queen_cost_per_shift: Decimal = Decimal("2.15")
    eggs_per_shift: Decimal = Decimal("0.45")
    honey_per_unassigned_worker: Decimal = Decimal("0.5")
    initial_unassigned_workers: Decimal = Decimal("3")

    # Workers
    nectar_collector_cost: Decimal = Decimal("1.95")
    nectar_collected_per_shift: Decimal = Decimal("33.25")
    honey_manufacturer_cost: Decimal = Decimal("1.70")
    nectar_processed_per_shift: Decimal = Decimal("33.15")
    egg_care_cost: Decimal = Decimal("1.35")
    care_progress_per_shift: Decimal = Decimal("0.15")

    starting_jobs: list[str] = field(
        default_factory=lambda: list(_DEFAULT_STARTING_JOBS),
    )

    @classmethod
    def from_yaml(cls, path: str | Path) -> SimulationConfig:
        """Load configuration from a YAML file.

        Keys that are absent keep their defaults; unknown keys are
        ignored.  An empty ``starting_jobs`` founds a colony with no
        workers.

        Args:
            path: Path to the YAML config file.

        Returns:
            A populated SimulationConfig instance.

        Raises:
            FileNotFoundError: If the config file does not exist.
            ValueError: If a numeric setting is not a number or
                ``starting_jobs`` is not a list.
        """
        path = Path(path)
        with path.open("r") as f:
            data = yaml.safe_load(f) or {}

        kwargs: dict[str, object] = {}
        for fld in fields(cls):
            if fld.name not in data:
                continue
            value = data[fld.name]
            if fld.name == "starting_jobs":
                jobs = value or []
                if not isinstance(jobs, list):
                    raise ValueError(f"starting_jobs must be a list, got {jobs!r}")
                kwargs[fld.name] = [str(job) for job in jobs]
            else:
                kwargs[fld.name] = _to_decimal(fld.name, value)
        return cls(**kwargs)
