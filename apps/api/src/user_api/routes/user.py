"""User API routes."""

from fastapi import APIRouter, Depends, Response, status

from user_api.models.user import UserPayload
from user_api.services import get_user_service
from user_core.models.user import User
from user_core.services.user_service import UserService

# Handlers are sync so FastAPI runs them on its threadpool; the store lock blocks.
router = APIRouter(prefix="/users", tags=["users"], redirect_slashes=False)


@router.get("", response_model=list[User])
@router.get("/", response_model=list[User])
def list_users(service: UserService = Depends(get_user_service)) -> list[User]:
    return service.list_users()


@router.post("", response_model=User, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=User, status_code=status.HTTP_201_CREATED)
def create_user(payload: UserPayload, service: UserService = Depends(get_user_service)) -> User:
    return service.create_user(payload.name, payload.email)


@router.get("/{user_id}", response_model=User)
def get_user(user_id: str, service: UserService = Depends(get_user_service)) -> User:
    return service.get_user(user_id)


@router.put("/{user_id}", response_model=User)
def update_user(
    user_id: str,
    payload: UserPayload,
    service: UserService = Depends(get_user_service),
) -> User:
    return service.update_user(user_id, payload.name, payload.email)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: str, service: UserService = Depends(get_user_service)) -> Response:
    service.delete_user(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
