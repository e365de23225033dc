from fastapi import Request
from storage.round_store import RoundStore


def get_store(request: Request) -> RoundStore:
    """FastAPI dependency that provides the RoundStore."""
    return request.app.state.round_store
