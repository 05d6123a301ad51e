"""
Deferred-Gaussian cache.

The Box-Muller transform turns two uniforms into two normals. When a caller
asks for only one, the second is parked here until the next request. The
transform itself belongs to the sampling layer; this module only holds the
parked values and drops them whenever the engine is reseeded or restarted,
since a repositioned stream must not hand out a value from its old position.
"""

from dataclasses import dataclass, field
from typing import Optional

import numpy as np


@dataclass
class BoxMullerCache:
    float_pending: bool = False
    double_pending: bool = False
    float_value: np.float32 = field(default_factory=lambda: np.float32(0.0))
    double_value: float = 0.0

    def attach(self, engine) -> 'BoxMullerCache':
        """Register reset() as a restart hook on engine."""
        engine.add_restart_hook(self.reset)
        return self

    def reset(self) -> None:
        # Values are left in place; only the pending flags gate them
        self.float_pending = False
        self.double_pending = False

    def store_float(self, value) -> None:
        self.float_value = np.float32(value)
        self.float_pending = True

    def take_float(self) -> Optional[np.float32]:
        if not self.float_pending:
            return None
        self.float_pending = False
        return self.float_value

    def store_double(self, value: float) -> None:
        self.double_value = float(value)
        self.double_pending = True

    def take_double(self) -> Optional[float]:
        if not self.double_pending:
            return None
        self.double_pending = False
        return self.double_value
