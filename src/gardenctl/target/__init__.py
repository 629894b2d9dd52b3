"""Target selection: the Target value and the flags that produce it."""

from gardenctl.target.target import Target, TargetValidationError, new_target
from gardenctl.target.target_flags import TargetFlags, new_target_flags

__all__ = [
    "Target",
    "TargetFlags",
    "TargetValidationError",
    "new_target",
    "new_target_flags",
]
