"""Login and logout for dashboard users."""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse, RedirectResponse
from sqlalchemy.orm import Session

from backend.app.core.settings import get_settings
from backend.app.db.session import get_db
from backend.app.dependencies.auth import get_current_user
from backend.app.models.user import User
from backend.app.schemas.user import UserRead
from backend.app.services.auth import CredentialsProvider, authenticate

router = APIRouter(tags=["auth"])


@router.post("/login")
async def login(request: Request, db: Session = Depends(get_db)):
    settings = get_settings()
    form = await request.form()
    result = authenticate(None, form, CredentialsProvider(db))
    if not result.ok:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"message": result.message})

    response = RedirectResponse(settings.dashboard_path, status_code=status.HTTP_303_SEE_OTHER)
    response.set_cookie(
        settings.session_cookie_name,
        result.token,
        max_age=settings.access_token_expire_minutes * 60,
        httponly=True,
        samesite="lax",
    )
    return response


@router.post("/logout")
async def logout():
    settings = get_settings()
    response = RedirectResponse(settings.login_path, status_code=status.HTTP_303_SEE_OTHER)
    response.delete_cookie(settings.session_cookie_name)
    return response


@router.get("/me", response_model=UserRead)
def read_me(current_user: User = Depends(get_current_user)):
    return current_user
