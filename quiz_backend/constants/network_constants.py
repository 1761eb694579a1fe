"""Network configuration constants for the quiz backend."""

DEFAULT_HOST: str = "0.0.0.0"
DEFAULT_PORT: int = 8080
API_PREFIX: str = "/api/quiz"
CORS_ALLOWED_ORIGINS: tuple[str, ...] = ("http://localhost:5173",)
