from slowapi import Limiter
from slowapi.util import get_remote_address

# Shared limiter; app.py registers this same instance on app.state
limiter = Limiter(key_func=get_remote_address)
