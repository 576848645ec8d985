from typing import List

from sqlalchemy.orm import Session

from freshcart.data.models.user import UserModel
from freshcart.domain.enums import UserRole
from freshcart.domain.schemas import UserCreate, UserRead, ShippingProfile
from freshcart.repos.user_repo import UserRepo
from freshcart.services.errors import NotFoundError
from freshcart.utils.logging import get_logger

logger = get_logger(__name__)


class UserService:
    def __init__(self, db: Session):
        self.repo = UserRepo(db)

    def create_user(self, payload: UserCreate) -> UserRead:
        if payload.id:
            existing = self.repo.get_user(payload.id)
            if existing:
                return UserRead.model_validate(existing)

        if payload.email and self.repo.get_user_by_email(payload.email):
            raise ValueError(f"Email {payload.email} is already registered")

        user = UserModel(name=payload.name, email=payload.email, role=UserRole.USER.value)
        if payload.id:
            user.id = payload.id
        created = self.repo.create_user(user)
        logger.info(f"Created user {created.id}")
        return UserRead.model_validate(created)

    def get_user(self, user_id: str) -> UserRead:
        return UserRead.model_validate(self._get(user_id))

    def list_users(self) -> List[UserRead]:
        return [UserRead.model_validate(u) for u in self.repo.list_users()]

    def update_shipping(self, user_id: str, profile: ShippingProfile) -> UserRead:
        user = self._get(user_id)
        for key, value in profile.model_dump(exclude_unset=True).items():
            setattr(user, key, value)
        return UserRead.model_validate(self.repo.save(user))

    def set_role(self, user_id: str, role: str) -> UserRead:
        try:
            role = UserRole(role).value
        except ValueError:
            raise ValueError(f"Unknown role: {role}")
        user = self._get(user_id)
        user.role = role
        logger.info(f"User {user_id} role -> {role}")
        return UserRead.model_validate(self.repo.save(user))

    def is_admin(self, user_id: str) -> bool:
        user = self.repo.get_user(user_id)
        return bool(user and user.role == UserRole.ADMIN.value)

    def _get(self, user_id: str) -> UserModel:
        user = self.repo.get_user(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user
