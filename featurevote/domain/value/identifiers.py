"""Strongly typed identifiers for Feature Vote domain entities."""

from typing import NewType

# Store-assigned, monotonically increasing integer
FeatureRequestId = NewType("FeatureRequestId", int)
