"""
limits.py - Pointing limits for known telescopes

Each telescope mount restricts where it can point: alt-az mounts bound the
elevation, equatorial mounts bound hour angle and declination. This module
holds the default policy for the telescopes we know about.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

import numpy as np

from telescope_lookup.utils.coordinates import degrees_to_radians, hours_to_radians

# Set up logging
logger = logging.getLogger(__name__)

class MountType(Enum):
    """Mount geometry a pointing-limit policy applies to."""
    AZEL = "AZEL"
    HADEC = "HADEC"
    NONE = "NONE"

@dataclass(frozen=True)
class AxisLimits:
    """Lower and upper bound on one axis, in radians."""
    min: float
    max: float

    def __post_init__(self):
        if self.min > self.max:
            raise ValueError(f"Axis minimum {self.min} exceeds maximum {self.max}")

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max

    def as_dict(self) -> Dict[str, float]:
        return {'min': self.min, 'max': self.max}

@dataclass(frozen=True)
class LimitsSpec:
    """
    Pointing-limit policy of a telescope.

    AZEL policies carry an elevation range, HADEC policies an hour-angle and
    a declination range, NONE policies carry nothing.
    """
    type: MountType = MountType.NONE
    el: Optional[AxisLimits] = None
    ha: Optional[AxisLimits] = None
    dec: Optional[AxisLimits] = None

    def __post_init__(self):
        if self.type is MountType.AZEL and self.el is None:
            raise ValueError("AZEL limits require an elevation range")
        if self.type is MountType.HADEC and (self.ha is None or self.dec is None):
            raise ValueError("HADEC limits require hour angle and declination ranges")

    @classmethod
    def none(cls) -> "LimitsSpec":
        """Empty policy for telescopes with no defined limits."""
        return cls(type=MountType.NONE)

    @classmethod
    def from_dict(cls, spec: Dict[str, Any]) -> "LimitsSpec":
        """
        Build a policy from its mapping form.

        Args:
            spec: Mapping like {"type": "AZEL", "el": {"min": 0.1, "max": 1.5}}.

        Returns:
            LimitsSpec instance.

        Raises:
            ValueError: If the mount type is unknown or required axes are missing.
        """
        try:
            mount = MountType(str(spec.get('type', 'NONE')).upper())
        except ValueError:
            raise ValueError(f"Unknown mount type: {spec.get('type')}. "
                             f"Available types: {', '.join(m.value for m in MountType)}")

        axes = {}
        for axis in ('el', 'ha', 'dec'):
            if axis in spec:
                axes[axis] = AxisLimits(min=spec[axis]['min'], max=spec[axis]['max'])

        return cls(type=mount, **axes)

    def as_dict(self) -> Dict[str, Any]:
        """Mapping form of the policy, axes in radians."""
        result: Dict[str, Any] = {'type': self.type.value}
        for axis in ('el', 'ha', 'dec'):
            limits = getattr(self, axis)
            if limits is not None:
                result[axis] = limits.as_dict()
        return result

# Known telescopes, keyed by catalog mnemonic
TELESCOPE_LIMITS: Dict[str, LimitsSpec] = {
    'JCMT': LimitsSpec(
        type=MountType.AZEL,
        el=AxisLimits(min=degrees_to_radians(5.0), max=degrees_to_radians(88.0))
    ),
    'UKIRT': LimitsSpec(
        type=MountType.HADEC,
        ha=AxisLimits(min=hours_to_radians(-4.5), max=hours_to_radians(4.5)),
        dec=AxisLimits(min=degrees_to_radians(-42.0), max=degrees_to_radians(60.0))
    ),
}

# Anything above the horizon
HORIZON_LIMITS = LimitsSpec(
    type=MountType.AZEL,
    el=AxisLimits(min=0.0, max=np.pi / 2)
)

def lookup_limits(name: Optional[str]) -> LimitsSpec:
    """
    Look up the tabulated limits of a telescope.

    Args:
        name: Telescope mnemonic.

    Returns:
        Tabulated LimitsSpec, or an empty NONE policy if none is defined.
    """
    if name is None:
        return LimitsSpec.none()
    return TELESCOPE_LIMITS.get(name.upper(), LimitsSpec.none())

def default_limits(name: Optional[str]) -> LimitsSpec:
    """
    Limits assigned to a telescope whenever its identity changes.

    Telescopes without tabulated limits get the horizon policy.

    Args:
        name: Telescope mnemonic.

    Returns:
        LimitsSpec to install on the telescope.
    """
    limits = lookup_limits(name)
    if limits.type is MountType.NONE:
        logger.debug(f"No tabulated limits for {name}; using horizon limits")
        return HORIZON_LIMITS
    return limits
