"""
stream_token_issuer.api.routers.tokens

Token issuance endpoints, using the callable request/response envelope
(`{"data": {...}}` in, `{"result": {...}}` out).

Responsibilities:
- Signed stream tokens for any deployment.
- Development tokens outside prod only.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from starlette.status import HTTP_404_NOT_FOUND

from stream_token_issuer.api.deps import issuers_from_app
from stream_token_issuer.auth.deps import get_optional_principal
from stream_token_issuer.auth.models import Principal
from stream_token_issuer.tokens.base import TokenIssuer, TokenKind
from stream_token_issuer.tokens.errors import (
    InternalIssuanceError,
    InvalidRequestError,
    UnauthenticatedError,
)

router = APIRouter(prefix="/v1/tokens", tags=["tokens"])


class TokenRequestData(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: str | None = Field(default=None, alias="userId", max_length=256)


class TokenRequest(BaseModel):
    # A misplaced top-level `userId` must not silently fall back to the caller.
    model_config = ConfigDict(extra="forbid")

    # Callable clients send `{"data": null}` when invoked without arguments.
    data: TokenRequestData | None = None


class SignedTokenResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    token: str
    user_id: str = Field(alias="userId")
    expires_at: int = Field(alias="expiresAt")


class DevTokenResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    token: str
    user_id: str = Field(alias="userId")
    note: str


class SignedTokenResponse(BaseModel):
    result: SignedTokenResult


class DevTokenResponse(BaseModel):
    result: DevTokenResult


async def _read_request_data(request: Request, principal: Principal | None) -> TokenRequestData:
    # Authentication is decided before the payload is looked at.
    if principal is None:
        raise UnauthenticatedError()

    raw = await request.body()
    if not raw.strip():
        return TokenRequestData()
    try:
        body = TokenRequest.model_validate_json(raw)
    except ValidationError as e:
        raise InvalidRequestError() from e
    return body.data or TokenRequestData()


@router.post("/stream", response_model=SignedTokenResponse, response_model_by_alias=True)
async def generate_stream_token(
    request: Request,
    principal: Principal | None = Depends(get_optional_principal),
    issuers: dict[TokenKind, TokenIssuer] = Depends(issuers_from_app),
) -> SignedTokenResponse:
    data = await _read_request_data(request, principal)
    issued = issuers[TokenKind.SIGNED].issue(principal, data.user_id)
    if issued.expires_at is None:
        raise InternalIssuanceError()
    return SignedTokenResponse(
        result=SignedTokenResult(token=issued.token, user_id=issued.subject, expires_at=issued.expires_at)
    )


@router.post("/dev", response_model=DevTokenResponse, response_model_by_alias=True)
async def generate_dev_token(
    request: Request,
    principal: Principal | None = Depends(get_optional_principal),
    issuers: dict[TokenKind, TokenIssuer] = Depends(issuers_from_app),
) -> DevTokenResponse:
    issuer = issuers.get(TokenKind.DEV)
    if issuer is None:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Not found")

    data = await _read_request_data(request, principal)
    issued = issuer.issue(principal, data.user_id)
    return DevTokenResponse(
        result=DevTokenResult(token=issued.token, user_id=issued.subject, note=issued.note or "")
    )
