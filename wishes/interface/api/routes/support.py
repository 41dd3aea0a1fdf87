"""Support routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, Response

from wishes.application.usecase.support import (
    GetWishSupportStatusRequest,
    GetWishSupportStatusResponse,
    GetWishSupportStatusUseCase,
    SupportWishRequest,
    SupportWishResponse,
    SupportWishUseCase,
    UnsupportWishRequest,
    UnsupportWishResponse,
    UnsupportWishUseCase,
)
from wishes.config import Settings
from wishes.domain.service import JWTService
from wishes.interface.api.caller import (
    ensure_session,
    resolve_caller,
    set_session_cookie,
)

router = APIRouter(prefix="/wishes", tags=["support"], route_class=DishkaRoute)


@router.post("/{wish_id}/support", response_model=SupportWishResponse)
async def support_wish(
    wish_id: str,
    request: Request,
    response: Response,
    support_wish_use_case: FromDishka[SupportWishUseCase],
    jwt_service: FromDishka[JWTService],
    settings: FromDishka[Settings],
) -> SupportWishResponse:
    """Support a wish.

    Anonymous callers without a session get one minted so the support has
    an identity to belong to. The session cookie is only set when the
    support goes through.

    Args:
        wish_id: Wish ID
        request: Incoming request (cookies)
        response: Outgoing response (session cookie)
        support_wish_use_case: Support wish use case from DI
        jwt_service: JWT service for token verification (injected)
        settings: Application settings from DI

    Returns:
        Support result; ``alreadySupported`` is true for repeats
    """
    caller = resolve_caller(request, jwt_service, settings)
    supporter = ensure_session(caller)

    result = await support_wish_use_case.execute(
        SupportWishRequest(
            wish_id=wish_id,
            session_id=supporter.session_id,
            user_id=supporter.user_id,
        )
    )

    if supporter is not caller and supporter.session_id is not None:
        set_session_cookie(response, supporter.session_id, settings)
    return result


@router.delete("/{wish_id}/support", response_model=UnsupportWishResponse)
async def unsupport_wish(
    wish_id: str,
    request: Request,
    unsupport_wish_use_case: FromDishka[UnsupportWishUseCase],
    jwt_service: FromDishka[JWTService],
    settings: FromDishka[Settings],
) -> UnsupportWishResponse:
    """Withdraw the caller's support from a wish."""
    caller = resolve_caller(request, jwt_service, settings)
    return await unsupport_wish_use_case.execute(
        UnsupportWishRequest(
            wish_id=wish_id,
            session_id=caller.session_id,
            user_id=caller.user_id,
        )
    )


@router.get("/{wish_id}/support", response_model=GetWishSupportStatusResponse)
async def get_support_status(
    wish_id: str,
    request: Request,
    get_wish_support_status_use_case: FromDishka[GetWishSupportStatusUseCase],
    jwt_service: FromDishka[JWTService],
    settings: FromDishka[Settings],
) -> GetWishSupportStatusResponse:
    """Whether the caller supports a wish, with the wish's current state."""
    caller = resolve_caller(request, jwt_service, settings)
    return await get_wish_support_status_use_case.execute(
        GetWishSupportStatusRequest(
            wish_id=wish_id,
            session_id=caller.session_id,
            user_id=caller.user_id,
        )
    )
