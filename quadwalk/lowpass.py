"""First-order low-pass filter for scalar signals."""

from __future__ import annotations

import math


class LowPassFilter:
    """Exponential smoothing filter parameterised by sample period and cut-off."""

    def __init__(self, sample_period: float, cut_frequency: float) -> None:
        self.weight = 1.0 / (1.0 + 1.0 / (2.0 * math.pi * sample_period * cut_frequency))
        self._started = False
        self._value = 0.0

    def add_value(self, new_value: float) -> None:
        """Feed one sample; the first sample after a clear seeds the filter."""
        if not self._started:
            self._started = True
            self._value = new_value
        self._value = self.weight * new_value + (1.0 - self.weight) * self._value

    @property
    def value(self) -> float:
        """The current filtered value."""
        return self._value

    def clear(self) -> None:
        """Restart the filter so the next sample seeds it again."""
        self._started = False