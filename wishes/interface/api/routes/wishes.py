"""Wish routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Request, Response, status
from pydantic import BaseModel

from wishes.application.usecase.wish import (
    CreateWishRequest,
    CreateWishResponse,
    CreateWishUseCase,
    GetCurrentWishRequest,
    GetCurrentWishResponse,
    GetCurrentWishUseCase,
    GetLatestWishesRequest,
    GetLatestWishesResponse,
    GetLatestWishesUseCase,
    UpdateWishRequest,
    UpdateWishResponse,
    UpdateWishUseCase,
)
from wishes.config import Settings
from wishes.domain.service import JWTService
from wishes.interface.api.caller import resolve_caller, set_session_cookie

router = APIRouter(prefix="/wishes", tags=["wishes"], route_class=DishkaRoute)


def _query_int(value: str | None) -> int | None:
    """Parse an integer query parameter; garbage counts as absent."""
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


class WishBody(BaseModel):
    """Request body for creating or editing a wish."""

    name: str | None = None
    wish: str


@router.post(
    "",
    response_model=CreateWishResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_wish(
    body: WishBody,
    request: Request,
    response: Response,
    create_wish_use_case: FromDishka[CreateWishUseCase],
    jwt_service: FromDishka[JWTService],
    settings: FromDishka[Settings],
) -> CreateWishResponse:
    """Post the caller's wish.

    Anonymous callers without a session get one minted; it is returned in
    the body and set as the session cookie.

    Args:
        body: Name and wish text
        request: Incoming request (cookies)
        response: Outgoing response (session cookie)
        create_wish_use_case: Create wish use case from DI
        jwt_service: JWT service for token verification (injected)
        settings: Application settings from DI

    Returns:
        The new wish and the caller's session ID
    """
    caller = resolve_caller(request, jwt_service, settings)
    result = await create_wish_use_case.execute(
        CreateWishRequest(
            name=body.name,
            wish=body.wish,
            session_id=caller.session_id,
            user_id=caller.user_id,
        )
    )

    if result.session_id and result.session_id != caller.session_id:
        set_session_cookie(response, result.session_id, settings)

    return result


@router.put("", response_model=UpdateWishResponse)
async def update_wish(
    body: WishBody,
    request: Request,
    update_wish_use_case: FromDishka[UpdateWishUseCase],
    jwt_service: FromDishka[JWTService],
    settings: FromDishka[Settings],
) -> UpdateWishResponse:
    """Edit the caller's wish.

    Returns:
        Confirmation message and the updated wish
    """
    caller = resolve_caller(request, jwt_service, settings)
    return await update_wish_use_case.execute(
        UpdateWishRequest(
            name=body.name,
            wish=body.wish,
            user_id=caller.user_id,
            session_id=caller.session_id,
        )
    )


@router.get("", response_model=GetLatestWishesResponse)
async def list_wishes(
    request: Request,
    get_latest_wishes_use_case: FromDishka[GetLatestWishesUseCase],
    jwt_service: FromDishka[JWTService],
    settings: FromDishka[Settings],
    limit: str | None = Query(default=None),
    offset: str | None = Query(default=None),
) -> GetLatestWishesResponse:
    """List the newest wishes with the caller's support status.

    ``limit`` is clamped to [1, 100] and ``offset`` to >= 0. Values that are
    not integers fall back to the defaults.
    """
    caller = resolve_caller(request, jwt_service, settings)
    return await get_latest_wishes_use_case.execute_with_support_status(
        GetLatestWishesRequest(
            limit=_query_int(limit),
            offset=_query_int(offset) or 0,
            session_id=caller.session_id,
            user_id=caller.user_id,
        )
    )


@router.get("/current", response_model=GetCurrentWishResponse)
async def get_current_wish(
    request: Request,
    get_current_wish_use_case: FromDishka[GetCurrentWishUseCase],
    settings: FromDishka[Settings],
) -> GetCurrentWishResponse:
    """Get the wish posted from the caller's anonymous session."""
    session_id = request.cookies.get(settings.auth.session_cookie_name)
    return await get_current_wish_use_case.execute(
        GetCurrentWishRequest(session_id=session_id)
    )
