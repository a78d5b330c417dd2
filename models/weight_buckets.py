"""
Weight bucketing rules.

A scheme is an ordered list of upper-bound rules plus a default label. The first
rule whose bound admits the weight wins; anything no rule admits (including a
missing weight) falls through to the default, the same way a SQL ``CASE ... ELSE``
behaves. The schemes below are separate named variants with their own boundary
semantics and must not be merged.
"""

import math
from dataclasses import dataclass, field

import numpy as np
import pandas as pd


@dataclass(frozen=True)
class WeightRule:
    label: str
    upper_bound: float
    inclusive: bool = False

    def admits(self, weight: float) -> bool:
        if self.inclusive:
            return weight <= self.upper_bound
        return weight < self.upper_bound

    def describe(self) -> str:
        op = "<=" if self.inclusive else "<"
        return f"{self.label}: weight {op} {self.upper_bound:g}"


@dataclass(frozen=True)
class WeightBucketScheme:
    name: str
    rules: tuple[WeightRule, ...]
    default_label: str
    labels: tuple[str, ...] = field(init=False)

    def __post_init__(self):
        bounds = [r.upper_bound for r in self.rules]
        if bounds != sorted(bounds):
            raise ValueError(f"Rules of scheme '{self.name}' must have ascending bounds.")
        object.__setattr__(self, "labels", tuple(r.label for r in self.rules) + (self.default_label,))

    def assign(self, weight: float | None) -> str:
        """Label for a single weight."""
        if weight is None or (isinstance(weight, float) and math.isnan(weight)):
            return self.default_label
        for rule in self.rules:
            if rule.admits(weight):
                return rule.label
        return self.default_label

    def assign_series(self, weights: pd.Series) -> pd.Series:
        """Vectorised assign(); NaN comparisons are False so missing weights get the default."""
        values = pd.to_numeric(weights, errors="coerce")
        conditions = [
            (values <= r.upper_bound) if r.inclusive else (values < r.upper_bound)
            for r in self.rules
        ]
        labels = np.select(
            [c.to_numpy(dtype=bool, na_value=False) for c in conditions],
            [r.label for r in self.rules],
            default=self.default_label,
        )
        return pd.Series(labels, index=weights.index, dtype=object)


CATALOGUE_WEIGHT_BUCKETS = WeightBucketScheme(
    name="catalogue",
    rules=(WeightRule("Low", 1000), WeightRule("Medium", 5000)),
    default_label="Bulk",
)

ORDER_WEIGHT_GROUPS = WeightBucketScheme(
    name="order",
    rules=(WeightRule("Light", 1000), WeightRule("Medium", 5000)),
    default_label="Heavy",
)

COMPACT_WEIGHT_BUCKETS = WeightBucketScheme(
    name="compact",
    rules=(WeightRule("Low", 500, inclusive=True), WeightRule("Medium", 5000, inclusive=True)),
    default_label="Bulk",
)

WEIGHT_SCHEMES = {
    scheme.name: scheme
    for scheme in (CATALOGUE_WEIGHT_BUCKETS, ORDER_WEIGHT_GROUPS, COMPACT_WEIGHT_BUCKETS)
}
