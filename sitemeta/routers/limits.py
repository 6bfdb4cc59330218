from slowapi import Limiter
from slowapi.util import get_remote_address

# Shared by every router so a single app.state.limiter governs all routes
limiter = Limiter(key_func=get_remote_address)

DERIVE_LIMIT = "120/minute"
RENDER_LIMIT = "30/minute"
