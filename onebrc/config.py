import os
from dataclasses import dataclass

from onebrc.errors import ConfigError


@dataclass(frozen=True)
class RunConfig:
    path: str
    workers: int = 1

    def validate(self) -> "RunConfig":
        if isinstance(self.workers, bool) or not isinstance(self.workers, int) or self.workers < 1:
            raise ConfigError(f"worker count must be a positive integer, got {self.workers!r}")
        if not os.path.isfile(self.path):
            raise ConfigError(f"not a readable file: {self.path}")
        if not os.access(self.path, os.R_OK):
            raise ConfigError(f"not a readable file: {self.path}")
        return self
