"""HoneyVault — the shared honey and nectar store of one colony.

Every bee and the queen draw on the same vault.  It is passed around by
reference rather than held globally, so each simulation gets its own.
All mutations go through the methods below, which never let either
quantity drop below zero.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal

from beehive.simulation.config import SimulationConfig

logger = logging.getLogger(__name__)

_CENT = Decimal("0.01")


def format_quantity(value: Decimal) -> str:
    """Format a quantity to two decimals, rounding halves away from zero."""
    return f"{value.quantize(_CENT, rounding=ROUND_HALF_UP)}"


@dataclass
class HoneyVault:
    """Honey and nectar reserves.

    Attributes:
        config: Source of the starting quantities, conversion ratio and
            low-level threshold.
        honey: Honey currently stored.
        nectar: Nectar currently stored.
    """

    config: SimulationConfig = field(default_factory=SimulationConfig)
    honey: Decimal = field(init=False)
    nectar: Decimal = field(init=False)

    def __post_init__(self) -> None:
        """Fill the vault with the configured starting quantities."""
        self.honey = self.config.initial_honey
        self.nectar = self.config.initial_nectar

    def reset(self) -> None:
        """Restore honey and nectar to their starting quantities."""
        self.honey = self.config.initial_honey
        self.nectar = self.config.initial_nectar
        logger.info("Vault reset: %s honey, %s nectar", self.honey, self.nectar)

    def deposit(self, nectar: Decimal) -> None:
        """Add collected nectar.  Non-positive amounts are ignored.

        Args:
            nectar: Nectar brought in by a collector.
        """
        if nectar > 0:
            self.nectar += nectar

    def convert_nectar_to_honey(self, amount: Decimal) -> None:
        """Turn up to ``amount`` nectar into honey.

        Only the nectar actually in store is converted, so a shortfall
        produces less honey rather than an error.

        Args:
            amount: Nectar requested for conversion.
        """
        to_convert = min(amount, self.nectar)
        self.nectar -= to_convert
        self.honey += to_convert * self.config.nectar_conversion_ratio

    def try_consume_honey(self, amount: Decimal) -> bool:
        """Eat ``amount`` honey if the vault holds that much.

        Args:
            amount: Honey required.

        Returns:
            True if the honey was deducted, False (and nothing changed)
            if the vault could not cover it.
        """
        if self.honey >= amount:
            self.honey -= amount
            return True
        return False

    def status_summary(self) -> str:
        """Return the vault's two-line report plus any low-level warnings."""
        status = (
            f"{format_quantity(self.honey)} units of honey\n"
            f"{format_quantity(self.nectar)} units of nectar"
        )
        warnings = ""
        if self.honey < self.config.low_level_warning:
            warnings += "\nLOW HONEY - ADD A HONEY MANUFACTURER"
        if self.nectar < self.config.low_level_warning:
            warnings += "\nLOW NECTAR - ADD A NECTAR COLLECTOR"
        return status + warnings
