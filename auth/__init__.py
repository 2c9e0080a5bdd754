from .utils import (
    authenticate_user,
    create_access_token,
    create_user_token,
    decode_access_token,
    get_current_user,
    get_optional_user,
    get_current_admin,
    get_password_hash,
    ACCESS_TOKEN_EXPIRE_MINUTES,
    verify_password
)

__all__ = [
    "authenticate_user",
    "create_access_token",
    "create_user_token",
    "decode_access_token",
    "get_current_user",
    "get_optional_user",
    "get_current_admin",
    "get_password_hash",
    "ACCESS_TOKEN_EXPIRE_MINUTES",
    "verify_password"
]
