from typing import Optional

from .storage import JsonFileStore

STORAGE_KEY = "auth-storage"


class AuthSession:
    """Logged-in user and bearer token.

    Nothing is written until save() is called.
    """

    def __init__(self, store: Optional[JsonFileStore] = None):
        self.store = store
        self.user: Optional[dict] = None
        self.token: Optional[str] = None
        self.is_authenticated = False
        self.is_loading = False

    @property
    def is_admin(self) -> bool:
        return bool(self.user) and self.user.get("role") == "admin"

    def login(self, token: str, user: dict):
        self.token = token
        self.user = user
        self.is_authenticated = True
        self.is_loading = False

    def logout(self):
        self.token = None
        self.user = None
        self.is_authenticated = False
        self.is_loading = False

    def set_loading(self, loading: bool):
        self.is_loading = loading

    def auth_header(self) -> dict:
        return {"Authorization": f"Bearer {self.token}"} if self.token else {}

    def load(self) -> "AuthSession":
        if self.store is None:
            return self
        state = self.store.load(STORAGE_KEY) or {}
        self.user = state.get("user")
        self.token = state.get("token")
        self.is_authenticated = bool(state.get("is_authenticated") and self.token)
        return self

    def save(self):
        if self.store is None:
            return
        self.store.save(STORAGE_KEY, {
            "user": self.user,
            "token": self.token,
            "is_authenticated": self.is_authenticated,
        })
