"""
Configuration
=============
This module is the central registry for the layout simulation settings.

Why is this file needed?
------------------------
1. Abstraction: Force coefficients and the tick rate are caller-supplied
   configuration, not constants buried in the engine.
2. Reuse: The headless demo, the Qt timer and the tests all build their
   settings from the same dataclass.

Exports:
    LayoutConfig: Force coefficients, time step and scheduling settings.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict, fields
from typing import Any, Dict
import logging

logger = logging.getLogger(__name__)


@dataclass
class LayoutConfig:
    # Force coefficients (0.0 disables a force)
    repulsion_strength: float = 0.1
    attraction_strength: float = 1e-3
    gravity_strength: float = 1e-2

    # Integration
    dt: float = 1.0 / 120.0

    # Scheduling
    interval_ms: int = 8
    max_ticks: int = 10_000

    # Exploration tree
    branching: int = 2

    def __post_init__(self) -> None:
        if self.dt <= 0.0:
            raise ValueError(f"Time step must be positive, got {self.dt}")
        if self.interval_ms < 0:
            raise ValueError(f"Tick interval must not be negative, got {self.interval_ms}")
        if self.branching < 1:
            raise ValueError(f"Branching factor must be positive, got {self.branching}")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> LayoutConfig:
        known = {f.name for f in fields(LayoutConfig)}
        unknown = set(data) - known
        if unknown:
            logger.warning(f"Ignoring unknown layout options: {sorted(unknown)}")
        return LayoutConfig(**{k: v for k, v in data.items() if k in known})
