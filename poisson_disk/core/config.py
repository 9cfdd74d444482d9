"""Configuration object for a Poisson-disk sampling run."""
from __future__ import annotations

import math
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Mapping, Optional

from .constants import DEFAULT_REJECTION_LIMIT
from .geometry import Domain, narrow


@dataclass
class SamplerConfig:
    """Parameters of one ``generate`` call.

    Attributes
    ----------
    xmin, ymin, xmax, ymax : float
        Half-open sampling rectangle.
    min_dist : float
        Minimum separation between any two generated points.
    rejection_limit : int
        Candidates tried around each picked active point.
    seed : int, optional
        Seed of the random stream; ``None`` draws fresh OS entropy.
    """
    xmin: float = 0.0
    ymin: float = 0.0
    xmax: float = 1.0
    ymax: float = 1.0
    min_dist: float = 0.1
    rejection_limit: int = DEFAULT_REJECTION_LIMIT
    seed: Optional[int] = None

    @property
    def domain(self) -> Domain:
        return Domain(float(self.xmin), float(self.ymin), float(self.xmax), float(self.ymax))

    def validate(self) -> 'SamplerConfig':
        """Raise ``ValueError`` on precondition violations; return self."""
        coords = (self.xmin, self.ymin, self.xmax, self.ymax)
        # the sampler works in single precision, so check the narrowed values
        if not all(math.isfinite(c) and math.isfinite(narrow(c)) for c in coords):
            raise ValueError(f"domain bounds must be finite in single precision, got {coords}")
        if not self.xmax > self.xmin:
            raise ValueError(f"xmax ({self.xmax}) must be greater than xmin ({self.xmin})")
        if not self.ymax > self.ymin:
            raise ValueError(f"ymax ({self.ymax}) must be greater than ymin ({self.ymin})")
        if not (self.min_dist > 0 and math.isfinite(self.min_dist) and 0 < narrow(self.min_dist) < math.inf):
            raise ValueError(f"min_dist must be positive and finite, got {self.min_dist}")
        if int(self.rejection_limit) != self.rejection_limit or self.rejection_limit < 1:
            raise ValueError(f"rejection_limit must be an integer >= 1, got {self.rejection_limit}")
        return self

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> 'SamplerConfig':
        """Build from a mapping; accepts ``{'config': {...}}`` and ignores unknown keys."""
        cfg = payload.get('config', payload)
        allowed = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in cfg.items() if k in allowed})

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = ['SamplerConfig']
