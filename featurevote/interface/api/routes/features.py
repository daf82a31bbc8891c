"""Feature request routes."""

from typing import Annotated

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Path, status
from pydantic import BaseModel, StringConstraints

from featurevote.application.usecase.feature import (
    CreateFeatureRequest,
    CreateFeatureUseCase,
    FeatureItem,
    GetFeatureRequest,
    GetFeatureUseCase,
    ListFeaturesUseCase,
    VoteFeatureRequest,
    VoteFeatureUseCase,
)
from featurevote.domain.error import (
    NotFoundError,
    TransientStorageError,
    ValidationError,
)
from featurevote.domain.value import DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH
from featurevote.interface import error as api_error

router = APIRouter(prefix="/features", tags=["features"], route_class=DishkaRoute)

FeatureIdPath = Annotated[int, Path(ge=1, description="Feature ID")]


class CreateFeatureAPIRequest(BaseModel):
    """API request for creating a feature."""

    title: Annotated[
        str,
        StringConstraints(strip_whitespace=True, min_length=1, max_length=TITLE_MAX_LENGTH),
    ]
    description: (
        Annotated[
            str,
            StringConstraints(strip_whitespace=True, max_length=DESCRIPTION_MAX_LENGTH),
        ]
        | None
    ) = None


class FeatureListAPIResponse(BaseModel):
    """Ranked feature list."""

    success: bool = True
    data: list[FeatureItem]
    count: int


class FeatureAPIResponse(BaseModel):
    """Single feature."""

    success: bool = True
    data: FeatureItem


class FeatureMessageAPIResponse(FeatureAPIResponse):
    """Single feature with a confirmation message."""

    message: str


def _not_found(feature_id: int) -> api_error.NotFoundError:
    return api_error.NotFoundError(
        "Feature not found",
        message=f"Feature with ID {feature_id} does not exist",
    )


def _unavailable(e: TransientStorageError) -> api_error.ServiceUnavailableError:
    logfire.warn("Storage unavailable", error=str(e))
    return api_error.ServiceUnavailableError(
        "Storage unavailable",
        message="The feature store is temporarily unavailable, please retry",
    )


@router.get("", response_model=FeatureListAPIResponse)
async def list_features(
    list_features_use_case: FromDishka[ListFeaturesUseCase],
) -> FeatureListAPIResponse:
    """List all feature requests ranked by votes.

    Ties are broken by the most recently created feature.
    """
    try:
        result = await list_features_use_case.execute()
    except TransientStorageError as e:
        raise _unavailable(e)

    return FeatureListAPIResponse(data=result.features, count=result.count)


@router.post(
    "",
    response_model=FeatureMessageAPIResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_feature(
    request: CreateFeatureAPIRequest,
    create_feature_use_case: FromDishka[CreateFeatureUseCase],
) -> FeatureMessageAPIResponse:
    """Create a new feature request.

    Raises:
        ValidationError: If title or description are out of bounds (400)
    """
    try:
        result = await create_feature_use_case.execute(
            CreateFeatureRequest(title=request.title, description=request.description)
        )
    except ValidationError as e:
        logfire.warn("Feature creation validation error", error=str(e))
        raise api_error.ValidationError("Validation failed", details=e.details)
    except TransientStorageError as e:
        raise _unavailable(e)

    return FeatureMessageAPIResponse(
        message="Feature created successfully", data=result.feature
    )


@router.post("/{feature_id}/vote", response_model=FeatureMessageAPIResponse)
async def vote_feature(
    feature_id: FeatureIdPath,
    vote_feature_use_case: FromDishka[VoteFeatureUseCase],
) -> FeatureMessageAPIResponse:
    """Upvote a feature request.

    Raises:
        NotFoundError: If the feature doesn't exist (404)
    """
    try:
        result = await vote_feature_use_case.execute(
            VoteFeatureRequest(feature_id=feature_id)
        )
    except NotFoundError:
        raise _not_found(feature_id)
    except TransientStorageError as e:
        raise _unavailable(e)

    return FeatureMessageAPIResponse(
        message="Vote recorded successfully", data=result.feature
    )


@router.get("/{feature_id}", response_model=FeatureAPIResponse)
async def get_feature(
    feature_id: FeatureIdPath,
    get_feature_use_case: FromDishka[GetFeatureUseCase],
) -> FeatureAPIResponse:
    """Get a single feature request.

    Raises:
        NotFoundError: If the feature doesn't exist (404)
    """
    try:
        result = await get_feature_use_case.execute(
            GetFeatureRequest(feature_id=feature_id)
        )
    except NotFoundError:
        raise _not_found(feature_id)
    except TransientStorageError as e:
        raise _unavailable(e)

    return FeatureAPIResponse(data=result.feature)
