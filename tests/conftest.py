"""Test configuration and fixtures."""

from datetime import datetime, timezone

from featurevote.domain.model import FeatureRequest
from featurevote.domain.value import FeatureDraft, FeatureRequestId


def make_feature(
    feature_id: int,
    title: str = "Add dark mode",
    votes: int = 0,
    created_at: datetime | None = None,
) -> FeatureRequest:
    """Helper function to build feature requests for tests."""
    return FeatureRequest(
        id=FeatureRequestId(feature_id),
        title=title,
        description=None,
        votes=votes,
        created_at=created_at or datetime.now(timezone.utc),
    )


def make_draft(title: str = "Add dark mode", description: str | None = None) -> FeatureDraft:
    """Helper function to build validated feature input."""
    return FeatureDraft(title=title, description=description)
