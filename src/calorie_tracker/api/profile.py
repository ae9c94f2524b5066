"""User profile endpoints: onboarding, login and body metrics."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request, status

from calorie_tracker.api.schemas import (
    GoalRequest,
    LoginRequest,
    OnboardingRequest,
    ProfileResponse,
    PublicUser,
    TargetCaloriesRequest,
    TargetProteinRequest,
    WeightRequest,
)
from calorie_tracker.services.calculations import get_weight_unit
from calorie_tracker.services.users import create_user

if TYPE_CHECKING:
    from calorie_tracker.containers import AppContainer
    from calorie_tracker.services.users import UserService

router = APIRouter(tags=["profile"])


def _user_service(request: Request) -> UserService:
    container: AppContainer = request.app.state.container
    return container.user_service


def _profile(service: UserService) -> ProfileResponse:
    user = service.user
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="No user profile yet."
        )
    return ProfileResponse(
        user=PublicUser.from_user(user),
        weight_unit=get_weight_unit(user.unit_system),
        protein_target=service.effective_protein_target(),
        is_onboarded=service.state.is_onboarded,
        is_logged_in=service.state.is_logged_in,
    )


@router.post("/users", status_code=status.HTTP_201_CREATED)
async def onboard(payload: OnboardingRequest, request: Request) -> ProfileResponse:
    """Create the local user and finish onboarding."""
    container: AppContainer = request.app.state.container
    service = container.user_service
    user = create_user(
        username=payload.username,
        password=payload.password,
        name=payload.name,
        age=payload.age,
        weight=payload.weight,
        target_weight=payload.target_weight,
        goal=payload.goal,
        unit_system=payload.unit_system,
        gender=payload.gender,
        tz=service.timezone,
    )
    service.set_user(user)
    service.complete_onboarding()
    return _profile(service)


@router.get("/users/me")
async def get_profile(request: Request) -> ProfileResponse:
    return _profile(_user_service(request))


@router.delete("/users/me", status_code=status.HTTP_204_NO_CONTENT)
async def reset_profile(request: Request) -> None:
    """Forget the user profile; food logs are kept."""
    _user_service(request).reset_user()


@router.post("/login")
async def login(payload: LoginRequest, request: Request) -> dict[str, bool]:
    """Log in with the stored credentials."""
    if not _user_service(request).login(payload.username, payload.password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password.",
        )
    return {"logged_in": True}


@router.post("/logout")
async def logout(request: Request) -> dict[str, bool]:
    _user_service(request).logout()
    return {"logged_in": False}


@router.put("/users/me/weight")
async def update_weight(payload: WeightRequest, request: Request) -> ProfileResponse:
    """Record today's weight."""
    service = _user_service(request)
    service.update_weight(payload.weight)
    return _profile(service)


@router.put("/users/me/target-weight")
async def update_target_weight(
    payload: WeightRequest, request: Request
) -> ProfileResponse:
    service = _user_service(request)
    service.update_target_weight(payload.weight)
    return _profile(service)


@router.put("/users/me/goal")
async def update_goal(payload: GoalRequest, request: Request) -> ProfileResponse:
    """Change the goal and recompute the calorie target."""
    service = _user_service(request)
    service.update_goal(payload.goal)
    return _profile(service)


@router.put("/users/me/target-calories")
async def update_target_calories(
    payload: TargetCaloriesRequest, request: Request
) -> ProfileResponse:
    service = _user_service(request)
    service.update_target_calories(payload.target_calories)
    return _profile(service)


@router.put("/users/me/target-protein")
async def update_target_protein(
    payload: TargetProteinRequest, request: Request
) -> ProfileResponse:
    service = _user_service(request)
    service.update_target_protein(payload.target_protein)
    return _profile(service)
