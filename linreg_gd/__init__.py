"""
Linear regression trained with batch gradient descent.
"""

from .errors import ShapeError
from .dataset import Dataset, Observation
from .model import GradientDescentRegressor

__all__ = ["ShapeError", "Dataset", "Observation", "GradientDescentRegressor"]
