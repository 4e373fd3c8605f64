from datetime import datetime
from typing import Annotated, Callable

from fastapi import APIRouter, Depends, status
from starlette.concurrency import run_in_threadpool

from otp_auth.application.login_user import login_user
from otp_auth.application.register_user import register_user
from otp_auth.application.verify_otp import verify_otp
from otp_auth.domain.ports.otp_notifier import OTPNotifierPort
from otp_auth.domain.ports.unit_of_work import UnitOfWorkPort
from otp_auth.presentation.dependencies import (
    get_clock,
    get_hash_password,
    get_otp_notifier,
    get_otp_ttl_seconds,
    get_uow,
    get_verify_password,
)
from otp_auth.schemas.requests import LoginIn, RegisterIn, VerifyOTPIn
from otp_auth.schemas.responses import MessageOut

router = APIRouter(tags=["Auth"])

# The use cases are synchronous and CPU-bound (bcrypt), so each request runs
# them on a worker thread instead of the event loop.


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=MessageOut,
)
async def post_register(
    body: RegisterIn,
    uow: Annotated[UnitOfWorkPort, Depends(get_uow)],
    hash_password: Annotated[Callable[[str], str], Depends(get_hash_password)],
):
    await run_in_threadpool(
        register_user,
        uow=uow,
        username=body.username,
        password=body.password,
        hash_password=hash_password,
    )
    return MessageOut(message="User registered successfully")


@router.post("/login", response_model=MessageOut)
async def post_login(
    body: LoginIn,
    uow: Annotated[UnitOfWorkPort, Depends(get_uow)],
    notifier: Annotated[OTPNotifierPort, Depends(get_otp_notifier)],
    verify_password: Annotated[
        Callable[[str, str], bool], Depends(get_verify_password)
    ],
    otp_ttl_seconds: Annotated[int, Depends(get_otp_ttl_seconds)],
    clock: Annotated[Callable[[], datetime], Depends(get_clock)],
):
    await run_in_threadpool(
        login_user,
        uow=uow,
        notifier=notifier,
        username=body.username,
        password=body.password,
        verify_password=verify_password,
        otp_ttl_seconds=otp_ttl_seconds,
        clock=clock,
    )
    return MessageOut(message="Password verified. OTP sent.")


@router.post("/verify-otp", response_model=MessageOut)
async def post_verify_otp(
    body: VerifyOTPIn,
    uow: Annotated[UnitOfWorkPort, Depends(get_uow)],
    clock: Annotated[Callable[[], datetime], Depends(get_clock)],
):
    await run_in_threadpool(
        verify_otp,
        uow=uow,
        username=body.username,
        code=body.otp,
        clock=clock,
    )
    return MessageOut(message="Login successful")
