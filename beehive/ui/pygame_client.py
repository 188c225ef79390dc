"""Pygame window for playing the colony one shift at a time.

Shows the colony's status report, a gauge for each vault resource, and
a job picker.  Nothing advances on its own: the player assigns workers
and works shifts from the keyboard, and resets once the colony runs out
of honey.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

import numpy as np
import pygame

if TYPE_CHECKING:
    from beehive.simulation.engine import SimulationEngine

from beehive.colony.bee import Job

# Colour palette
_BG = (30, 24, 10)
_TEXT = (220, 210, 180)
_DIM = (110, 100, 80)
_ALERT = (255, 90, 60)
_GAUGE_BORDER = (90, 75, 40)

# Gauge colour range (empty -> full)
_GAUGE_LO = np.array([150, 40, 20], dtype=np.float64)
_GAUGE_HI = np.array([250, 190, 40], dtype=np.float64)

_JOB_KEYS: dict[int, Job] = {
    pygame.K_1: Job.NECTAR_COLLECTOR,
    pygame.K_2: Job.HONEY_MANUFACTURER,
    pygame.K_3: Job.EGG_CARE,
}


def gauge_colour(fraction: float) -> tuple[int, int, int]:
    """Interpolate the gauge colour for a fill fraction in [0, 1]."""
    t = min(max(fraction, 0.0), 1.0)
    colour = _GAUGE_LO + t * (_GAUGE_HI - _GAUGE_LO)
    r, g, b = colour.astype(int).tolist()
    return (r, g, b)


class PygameRenderer:
    """Renders a SimulationEngine and routes key presses to it.

    Attributes:
        engine: The simulation engine being played.
        screen: The Pygame display surface.
        selected: Index into ``JOBS`` of the job the picker points at.
    """

    JOBS: ClassVar[list[Job]] = list(Job)

    # Gauge scale: a full bar is this many times the starting quantity
    _GAUGE_SCALE: ClassVar[float] = 2.0

    def __init__(
        self,
        engine: SimulationEngine,
        width: int = 520,
        height: int = 460,
    ) -> None:
        """Initialise the window.

        Args:
            engine: The simulation engine to play.
            width: Window width in pixels.
            height: Window height in pixels.
        """
        self.engine = engine
        self.selected = 0

        pygame.init()
        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption("Beehive")
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("monospace", 15)
        self.running = True

    @property
    def selected_job(self) -> Job:
        """Return the job the picker currently points at."""
        return self.JOBS[self.selected]

    def run(self, fps: int = 30) -> None:
        """Main loop: handle events, render.

        Args:
            fps: Target frames per second.
        """
        while self.running:
            self.clock.tick(fps)
            self._handle_events()
            self._draw()

        pygame.quit()

    def handle_key(self, key: int) -> None:
        """Apply a single key press to the picker or the engine.

        Args:
            key: A Pygame key constant.
        """
        if key == pygame.K_ESCAPE:
            self.running = False
        elif key in _JOB_KEYS:
            self.selected = self.JOBS.index(_JOB_KEYS[key])
        elif key == pygame.K_LEFT:
            self.selected = (self.selected - 1) % len(self.JOBS)
        elif key == pygame.K_RIGHT:
            self.selected = (self.selected + 1) % len(self.JOBS)
        elif key == pygame.K_a:
            if self.engine.can_assign_worker:
                self.engine.assign(self.selected_job)
        elif key == pygame.K_SPACE:
            self.engine.step()
        elif key == pygame.K_r and self.engine.collapsed:
            self.engine.reset()

    def _handle_events(self) -> None:
        """Process Pygame input events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                self.handle_key(event.key)

    def _draw(self) -> None:
        """Render one frame."""
        self.screen.fill(_BG)
        self._draw_gauges()
        y = self._draw_report(top=70)
        self._draw_controls(top=y + 12)
        pygame.display.flip()

    def _draw_gauges(self) -> None:
        """Draw honey and nectar bars scaled to their starting amounts."""
        config = self.engine.config
        vault = self.engine.vault
        bar_w = self.screen.get_width() - 120
        rows = [
            ("Honey", vault.honey, config.initial_honey),
            ("Nectar", vault.nectar, config.initial_nectar),
        ]
        for i, (label, amount, initial) in enumerate(rows):
            y = 12 + i * 26
            full = float(initial) * self._GAUGE_SCALE or 1.0
            fraction = min(float(amount) / full, 1.0)
            surf = self.font.render(label, True, _TEXT)
            self.screen.blit(surf, (10, y))
            pygame.draw.rect(
                self.screen,
                gauge_colour(fraction),
                (100, y, int(bar_w * fraction), 18),
            )
            pygame.draw.rect(self.screen, _GAUGE_BORDER, (100, y, bar_w, 18), 1)

    def _draw_report(self, top: int) -> int:
        """Draw the colony status report; return the y below it."""
        y = top
        for line in self.engine.status_report.splitlines():
            colour = _ALERT if line.startswith(("LOW", "WARNING")) else _TEXT
            surf = self.font.render(line, True, colour)
            self.screen.blit(surf, (10, y))
            y += 18
        return y

    def _draw_controls(self, top: int) -> None:
        """Draw the job picker and the available actions."""
        assign_colour = _TEXT if self.engine.can_assign_worker else _DIM
        lines: list[tuple[str, tuple[int, int, int]]] = [
            (f"Job: < {self.selected_job.value} >  (LEFT/RIGHT, 1-3)", _TEXT),
            ("A: assign this job", assign_colour),
        ]
        if self.engine.collapsed:
            lines.append(("OUT OF HONEY - R: start a new colony", _ALERT))
        else:
            lines.append(("SPACE: work the next shift", _TEXT))
        lines.append((f"Shift: {self.engine.shift}   ESC: quit", _DIM))

        y = top
        for text, colour in lines:
            surf = self.font.render(text, True, colour)
            self.screen.blit(surf, (10, y))
            y += 18
