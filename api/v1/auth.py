from __future__ import annotations
from typing import Any

from fastapi import APIRouter, Depends, status

from api.v1.deps import account_service, json_body
from api.v1.schemas import Created, TokenOut
from core.services.accounts import AccountService

router = APIRouter()


@router.post("/register", response_model=Created, status_code=status.HTTP_201_CREATED)
async def register(
    payload: Any = Depends(json_body),
    svc: AccountService = Depends(account_service),
) -> Created:
    user_id = await svc.register(payload)
    return Created(id=user_id, message="User created successfully")


@router.post("/login", response_model=TokenOut)
async def login(
    payload: Any = Depends(json_body),
    svc: AccountService = Depends(account_service),
) -> TokenOut:
    user_id, token = await svc.login(payload)
    return TokenOut(access_token=token, user_id=user_id)
