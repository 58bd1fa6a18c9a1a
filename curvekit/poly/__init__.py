"""
Dense univariate polynomials over curvekit prime fields.
"""

from .polynomial import Polynomial

__all__ = ["Polynomial"]
