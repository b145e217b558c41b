"""
Descriptive statistics backends.

Available backends:
    CPUDescriptiveBackend: CPU reference implementation (quickselect)
"""

from robstats.descriptive.backends.cpu import CPUDescriptiveBackend

__all__ = [
    "CPUDescriptiveBackend",
]
