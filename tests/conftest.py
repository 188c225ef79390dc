"""Shared fixtures for the Beehive test suite."""

from __future__ import annotations

import pytest

from beehive.colony.colony import Colony
from beehive.colony.vault import HoneyVault
from beehive.simulation.config import SimulationConfig
from beehive.simulation.engine import SimulationEngine


@pytest.fixture
def default_config() -> SimulationConfig:
    """Default simulation config (no YAML file needed)."""
    return SimulationConfig()


@pytest.fixture
def vault(default_config: SimulationConfig) -> HoneyVault:
    """A freshly filled vault: 25 honey, 100 nectar."""
    return HoneyVault(config=default_config)


@pytest.fixture
def colony(vault: HoneyVault, default_config: SimulationConfig) -> Colony:
    """A newly founded colony with its three starting workers."""
    return Colony(vault=vault, config=default_config)


@pytest.fixture
def engine(default_config: SimulationConfig) -> SimulationEngine:
    """An engine on the default configuration."""
    return SimulationEngine(config=default_config)
