from .password_hashing import WerkzeugPasswordHasher
from .token_service import DEFAULT_TOKEN_TTL_SECONDS, JwtTokenService

__all__ = ["DEFAULT_TOKEN_TTL_SECONDS", "JwtTokenService", "WerkzeugPasswordHasher"]
