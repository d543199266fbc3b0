"""
Core pool algorithms
"""

from .pool_v1 import (
    Action,
    ActionParams,
    PoolState,
    StepResult,
    create_pool_state,
    price,
    quote_swap,
    step,
    step_or_raise,
)

__all__ = [
    "Action",
    "ActionParams",
    "PoolState",
    "StepResult",
    "create_pool_state",
    "price",
    "quote_swap",
    "step",
    "step_or_raise",
]
