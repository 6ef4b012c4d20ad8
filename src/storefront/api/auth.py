"""FastAPI endpoints for registration, login and the caller's profile."""

from fastapi import APIRouter, Depends

from storefront.api.guards import current_principal
from storefront.api.schemas import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    UserView,
)
from storefront.identity import authentication

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", status_code=201, response_model=RegisterResponse)
async def register(body: RegisterRequest) -> dict:
    return authentication.register(
        name=body.name,
        email=body.email,
        password=body.password,
        is_admin=body.is_admin,
    )


@router.post("/login", response_model=LoginResponse)
async def login(body: LoginRequest) -> dict:
    return authentication.login(email=body.email, password=body.password)


@router.get("/profile", response_model=UserView)
async def profile(principal: dict = Depends(current_principal)) -> dict:
    return principal
