"""Recomputation workflow for the plant capacity model."""

from .recompute import CapacityReport, recompute, reset_to_baseline

__all__ = [
    'CapacityReport',
    'recompute',
    'reset_to_baseline',
]
