"""User routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request

from wishes.application.usecase.wish import (
    GetUserWishRequest,
    GetUserWishResponse,
    GetUserWishUseCase,
)
from wishes.config import Settings
from wishes.domain.service import JWTService
from wishes.interface.api.caller import resolve_caller

router = APIRouter(prefix="/user", tags=["user"], route_class=DishkaRoute)


@router.get("/wish", response_model=GetUserWishResponse)
async def get_user_wish(
    request: Request,
    get_user_wish_use_case: FromDishka[GetUserWishUseCase],
    jwt_service: FromDishka[JWTService],
    settings: FromDishka[Settings],
) -> GetUserWishResponse:
    """Get the caller's own wish (by user first, then by session).

    Returns:
        ``{"wish": null}`` when the caller has not posted
    """
    caller = resolve_caller(request, jwt_service, settings)
    return await get_user_wish_use_case.execute(
        GetUserWishRequest(user_id=caller.user_id, session_id=caller.session_id)
    )
