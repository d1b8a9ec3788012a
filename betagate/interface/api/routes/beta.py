"""Beta access routes."""

import hmac

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query, status
from fastapi.responses import JSONResponse, RedirectResponse
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel

from betagate.application.usecase.beta import (
    AddBetaUserRequest,
    AddBetaUserUseCase,
    CheckCodeRequest,
    CheckCodeResponse,
    CheckCodeUseCase,
    ConfirmSignUpRequest,
    ConfirmSignUpUseCase,
    RemoveBetaUserRequest,
    RemoveBetaUserResponse,
    RemoveBetaUserUseCase,
    SignUpBetaUserRequest,
    SignUpBetaUserUseCase,
)
from betagate.config import BetaSettings
from betagate.domain.error import ForbiddenError

router = APIRouter(prefix="/beta", tags=["beta"], route_class=DishkaRoute)

ADMIN_HEADER = "X-Beta-Admin"


class AddBetaUserAPIRequest(BaseModel):
    """API request for minting an invite.

    Keys other than the ones below are passed on as additional field
    values; undeclared ones are dropped.
    """

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="allow"
    )

    email: EmailStr | None = None
    wildcard: bool = False
    golden_ticket: bool = False
    redirect_to: str | None = None

    @field_validator("email", mode="before")
    @classmethod
    def blank_email_is_none(cls, v: object) -> object:
        """Treat an empty email as absent."""
        if isinstance(v, str) and not v.strip():
            return None
        return v


class RemoveBetaUserAPIRequest(BaseModel):
    """API request for revoking an invite."""

    email: EmailStr


class SignUpAPIRequest(BaseModel):
    """API request for redeeming a code and creating the account."""

    name: str = Field(..., min_length=1)
    username: str = Field(..., min_length=1)
    email: EmailStr
    password: str = Field(..., min_length=8)
    code: str | None = None


def _authorize_admin(beta_settings: BetaSettings, provided: str | None) -> None:
    """Check the admin header when an admin secret is configured.

    Raises:
        ForbiddenError: If the header is missing or wrong
    """
    if not beta_settings.admin_secret:
        return
    if not provided or not hmac.compare_digest(
        provided.encode("utf-8"), beta_settings.admin_secret.encode("utf-8")
    ):
        raise ForbiddenError("Admin access required")


@router.post("/add-user")
async def add_beta_user(
    request: AddBetaUserAPIRequest,
    add_beta_user_use_case: FromDishka[AddBetaUserUseCase],
    beta_settings: FromDishka[BetaSettings],
    x_beta_admin: str | None = Header(default=None, alias=ADMIN_HEADER),
) -> JSONResponse:
    """Mint an invite code.

    Example:
        POST /beta/add-user
        {"email": "a@x.com", "redirectTo": "https://app.example.com/sign-up"}

        Response:
        {
            "id": "5b0e...",
            "email": "a@x.com",
            "code": "qWeRtY...",
            "wildcard": false,
            "goldenTicket": false,
            "addedAt": "2025-01-15T12:34:56Z"
        }
    """
    _authorize_admin(beta_settings, x_beta_admin)

    item = await add_beta_user_use_case.execute(
        AddBetaUserRequest(
            email=request.email,
            wildcard=request.wildcard,
            golden_ticket=request.golden_ticket,
            redirect_to=request.redirect_to,
            extra=request.model_extra or {},
        )
    )
    return JSONResponse(content=item.model_dump(mode="json", by_alias=True))


@router.delete("/remove-user", response_model=RemoveBetaUserResponse)
async def remove_beta_user(
    request: RemoveBetaUserAPIRequest,
    remove_beta_user_use_case: FromDishka[RemoveBetaUserUseCase],
    beta_settings: FromDishka[BetaSettings],
    x_beta_admin: str | None = Header(default=None, alias=ADMIN_HEADER),
) -> RemoveBetaUserResponse:
    """Revoke the invite bound to an email."""
    _authorize_admin(beta_settings, x_beta_admin)

    return await remove_beta_user_use_case.execute(
        RemoveBetaUserRequest(email=request.email)
    )


@router.get("/sign-up/{code}")
async def confirm_sign_up(
    code: str,
    confirm_sign_up_use_case: FromDishka[ConfirmSignUpUseCase],
    callback_url: str | None = Query(default=None, alias="callbackURL"),
) -> RedirectResponse:
    """Landing endpoint for the link in an invite email.

    Always answers with a redirect: to the callback page with ``code``
    attached, or to an error page with ``error`` set.
    """
    response = await confirm_sign_up_use_case.execute(
        ConfirmSignUpRequest(code=code, callback_url=callback_url)
    )
    return RedirectResponse(
        url=response.redirect_url, status_code=status.HTTP_302_FOUND
    )


@router.post("/sign-up")
async def sign_up(
    request: SignUpAPIRequest,
    sign_up_use_case: FromDishka[SignUpBetaUserUseCase],
    code: str | None = Query(default=None),
) -> JSONResponse:
    """Redeem a code and create the account.

    The code may come in the body or the query string; the body wins.
    The registration endpoint's status and body are returned unchanged.
    """
    result = await sign_up_use_case.execute(
        SignUpBetaUserRequest(
            name=request.name,
            username=request.username,
            email=request.email,
            password=request.password,
            code=request.code or code,
        )
    )
    return JSONResponse(status_code=result.status_code, content=result.body)


@router.get(
    "/check", response_model=CheckCodeResponse, response_model_exclude_none=True
)
async def check_code(
    check_code_use_case: FromDishka[CheckCodeUseCase],
    code: str | None = Query(default=None),
) -> CheckCodeResponse:
    """Check whether a code exists, without consuming it.

    Example:
        GET /beta/check?code=qWeRtY...

        Response:
        {"status": true, "wildcard": false}
    """
    return await check_code_use_case.execute(CheckCodeRequest(code=code))
