"""Authentication endpoints for the admin dashboard."""
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from bureau.interfaces.http.deps import (
    get_account_guard,
    get_account_service,
    get_current_admin,
    get_db_session,
    get_super_admin,
)
from bureau.modules.accounts import (
    Account,
    AccountAlreadyExistsError,
    AccountCreateInput,
    AccountGuard,
    AccountNotFoundError,
    AccountService,
    AuthFailure,
)
from bureau.schemas import (
    AccountCreate,
    AccountDetailResponse,
    AccountResponse,
    AccountStatusResponse,
    AdminData,
    AuthData,
    ChangePasswordRequest,
    Envelope,
    LoginRequest,
    SuccessResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()

LOGIN_FAILURES = {
    AuthFailure.INVALID_CREDENTIALS: (status.HTTP_401_UNAUTHORIZED, "Invalid credentials"),
    AuthFailure.ACCOUNT_DEACTIVATED: (status.HTTP_401_UNAUTHORIZED, "Account is deactivated"),
    AuthFailure.ACCOUNT_LOCKED: (
        status.HTTP_423_LOCKED,
        "Account is temporarily locked due to too many failed login attempts",
    ),
}


@router.post("/login", response_model=Envelope[AuthData], summary="Admin login")
async def login(
    payload: LoginRequest,
    db: AsyncSession = Depends(get_db_session),
    guard: AccountGuard = Depends(get_account_guard),
):
    outcome = await guard.authenticate(payload.username, payload.password)
    if not outcome.ok:
        # keep the failed-attempt counter; raising below rolls the request session back
        await db.commit()
        status_code, message = LOGIN_FAILURES[outcome.failure]
        raise HTTPException(status_code=status_code, detail=message)

    profile = outcome.value
    token = guard.issue_token(profile.id)
    return Envelope[AuthData](
        message="Login successful",
        data=AuthData(token=token, admin=AccountResponse.model_validate(profile)),
    )


@router.post(
    "/register",
    response_model=Envelope[AuthData],
    status_code=status.HTTP_201_CREATED,
    summary="Register a new admin (super-admin only)",
)
async def register(
    payload: AccountCreate,
    _: Account = Depends(get_super_admin),
    service: AccountService = Depends(get_account_service),
    guard: AccountGuard = Depends(get_account_guard),
):
    try:
        account = await service.create_account(
            AccountCreateInput(
                username=payload.username,
                email=payload.email,
                password=payload.password,
                name=payload.name,
                role=payload.role,
            )
        )
    except AccountAlreadyExistsError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Admin with this email or username already exists",
        ) from exc

    token = guard.issue_token(account.id)
    return Envelope[AuthData](
        message="Admin registered successfully",
        data=AuthData(token=token, admin=AccountResponse.model_validate(account.profile())),
    )


@router.post("/logout", response_model=SuccessResponse, summary="Logout (client discards the token)")
async def logout():
    return SuccessResponse(message="Logout successful")


@router.get("/verify", response_model=Envelope[AdminData], summary="Verify token and return the admin")
async def verify(account: Account = Depends(get_current_admin)):
    return Envelope[AdminData](data=AdminData(admin=AccountDetailResponse.model_validate(account)))


@router.put("/change-password", response_model=SuccessResponse, summary="Change the current admin's password")
async def change_password(
    payload: ChangePasswordRequest,
    account: Account = Depends(get_current_admin),
    guard: AccountGuard = Depends(get_account_guard),
):
    outcome = await guard.change_password(account.id, payload.current_password, payload.new_password)
    if not outcome.ok:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Current password is incorrect")
    return SuccessResponse(message="Password changed successfully")


@router.post(
    "/accounts/{account_id}/unlock",
    response_model=Envelope[AccountStatusResponse],
    summary="Clear a lockout (super-admin only)",
)
async def unlock_account(
    account_id: str,
    admin: Account = Depends(get_super_admin),
    service: AccountService = Depends(get_account_service),
):
    try:
        account = await service.unlock(account_id)
    except AccountNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Admin not found") from exc

    logger.info("Account %s unlocked by %s", account_id, admin.id)
    return Envelope[AccountStatusResponse](
        message="Account unlocked",
        data=AccountStatusResponse.model_validate(account),
    )
