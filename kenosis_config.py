#!/usr/bin/env python3
"""
Kenosis Configuration

Runtime settings with built-in defaults, filled from command-line flags.
"""

from dataclasses import asdict, dataclass
from typing import Optional


@dataclass
class KenosisConfig:
    """Settings for one Kenosis run"""

    max_workers: Optional[int] = None
    verbose: bool = False

    def to_dict(self) -> dict:
        """Convert to dictionary"""
        return asdict(self)

    @classmethod
    def from_args(cls, args) -> "KenosisConfig":
        """Create from parsed command-line arguments"""
        config = cls.default()
        if getattr(args, "jobs", None):
            config.max_workers = args.jobs
        if getattr(args, "verbose", False):
            config.verbose = True
        return config

    @classmethod
    def default(cls) -> "KenosisConfig":
        """Create default configuration"""
        return cls()
