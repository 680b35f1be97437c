"""Test helpers module for shared test utilities.

- values: sample integers around limb boundaries and an int oracle for
  truncating division
"""

from tests.helpers.values import EDGE_VALUES, SAMPLE_VALUES, trunc_divmod

__all__ = [
    "EDGE_VALUES",
    "SAMPLE_VALUES",
    "trunc_divmod",
]
