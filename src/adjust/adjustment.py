from __future__ import annotations

from dataclasses import dataclass


# One tunable attribute as read from the adjustments file
@dataclass(frozen=True)
class AdjustmentSpec:
    name: str
    low: float
    high: float
    step: float
    initial: float
    commandTemplate: str


@dataclass
class AdjustmentSession:
    spec: AdjustmentSpec
    value: float

    @classmethod
    def fromSpec(cls, spec: AdjustmentSpec) -> AdjustmentSession:
        # initial is taken as-is, the first move clamps it
        return cls(spec, spec.initial)

    def clamp(self, value: float) -> float:
        return max(self.spec.low, min(self.spec.high, value))

    def decrement(self) -> float:
        self.value = self.clamp(max(self.value - self.spec.step, self.spec.low))
        return self.value

    def increment(self) -> float:
        self.value = self.clamp(min(self.value + self.spec.step, self.spec.high))
        return self.value
