from fastapi import APIRouter, Depends, HTTPException, status, Request
from sqlalchemy.orm import Session

from database import get_db
from models import User, ROLE_CUSTOMER
import schemas
from auth import (
    authenticate_user,
    create_user_token,
    get_current_user,
    get_password_hash
)
from services import Conflict
from .limiter import limiter

router = APIRouter(prefix="/api/auth", tags=["Authentication"])


@router.post("/register", response_model=schemas.TokenResult, status_code=status.HTTP_201_CREATED)
@limiter.limit("5/minute")
async def register(request: Request, payload: schemas.UserRegister, db: Session = Depends(get_db)):
    """Create a customer account and log it in"""
    existing = db.query(User).filter(User.email == payload.email).first()
    if existing:
        raise Conflict("User already exists with this email")

    user = User(
        email=payload.email,
        password_hash=get_password_hash(payload.password),
        name=payload.name,
        role=ROLE_CUSTOMER
    )
    db.add(user)
    db.commit()
    db.refresh(user)

    return {
        "success": True,
        "message": "User registered successfully",
        "token": create_user_token(user),
        "user": user
    }


@router.post("/login", response_model=schemas.TokenResult)
@limiter.limit("5/minute")
async def login(request: Request, credentials: schemas.UserLogin, db: Session = Depends(get_db)):
    """Login endpoint - Rate limited to prevent brute force attacks"""
    user = authenticate_user(db, credentials.email, credentials.password)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return {
        "success": True,
        "message": "Login successful",
        "token": create_user_token(user),
        "user": user
    }


@router.get("/profile", response_model=schemas.ProfileResult)
async def read_profile(current_user: User = Depends(get_current_user)):
    """Get current user info"""
    return {"success": True, "user": current_user}
