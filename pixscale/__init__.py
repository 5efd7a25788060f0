"""Alpha association, alpha scanning, resampling weights and colour accumulators for image scaling."""

__version__ = "0.1.7"

__all__ = ["alpha", "alpha_check", "filter_weights", "compute_weights", "color_group"]