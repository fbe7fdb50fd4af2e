from fastapi import Request

from dafurn.repositories.user_repository import UserRepository

def get_user_repository(request: Request) -> UserRepository:
    """
    FastAPI dependency returning the repository attached to the application.

    The handle is created by create_app() and stored on app.state, so tests
    can swap it through app.dependency_overrides or by replacing the state.

    Usage:
        @router.get("/users")
        async def list_users(repo: UserRepository = Depends(get_user_repository)):
            return await repo.list_all()
    """
    return request.app.state.user_repository
