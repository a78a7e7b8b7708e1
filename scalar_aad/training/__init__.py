# training/__init__.py
# Manual gradient-descent loop (zero_grad -> backward -> step)

from .config import TrainingConfig, DEMO_XS, DEMO_YS
from .loop import TrainingResult, squared_error_loss, sgd_step, train

__all__ = [
    "TrainingConfig", "DEMO_XS", "DEMO_YS",
    "TrainingResult", "squared_error_loss", "sgd_step", "train",
]
