"""Runtime settings for the HTTP service."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class ServiceConfig:
    host: str = "0.0.0.0"
    port: int = 8080
    solve_timeout: Optional[float] = None
    max_concurrent_solves: int = 4

    def validate(self) -> "ServiceConfig":
        if not 1 <= self.port <= 65535:
            raise ValueError(f"port must be between 1 and 65535, got {self.port}")
        if self.max_concurrent_solves < 1:
            raise ValueError("max_concurrent_solves must be at least 1")
        if self.solve_timeout is not None and self.solve_timeout <= 0:
            raise ValueError("solve_timeout must be positive")
        return self
