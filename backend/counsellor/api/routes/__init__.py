# API Routes Module
from counsellor.api.routes import (
    chat,
    profiles,
    universities,
)

__all__ = [
    "chat",
    "profiles",
    "universities",
]
