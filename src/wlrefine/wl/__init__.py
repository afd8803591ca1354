from .refine import (
    DEFAULT_MAX_K,
    Mapping,
    NodeState,
    WLStep,
    refine,
)
from .partition import (
    color_classes,
    joint_partition,
    histogram_witness,
    first_distinguishing_step,
    first_stable_step,
    SignatureTree,
    expand_signature,
)
from .features import KernelScore, feature_vectors, wl_kernel

__all__ = [
    "DEFAULT_MAX_K",
    "Mapping",
    "NodeState",
    "WLStep",
    "refine",
    "color_classes",
    "joint_partition",
    "histogram_witness",
    "first_distinguishing_step",
    "first_stable_step",
    "SignatureTree",
    "expand_signature",
    "KernelScore",
    "feature_vectors",
    "wl_kernel",
]
