"""
Common types for the selection kernels.
"""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any, Union

from numpy.typing import NDArray


# Anything indexable with item assignment: lists, deques, 1-D numpy arrays.
# Elements must support <, -, + and float() conversion.
MutableSample = Union[MutableSequence[Any], NDArray[Any]]
