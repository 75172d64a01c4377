from __future__ import annotations

from typing import Any, List, Optional, Tuple

from django.db import IntegrityError, transaction
from django.db.models import ProtectedError

from apps.common import get_logger
from .commands import AddressCommand, ProfileUpdateCommand
from .dtos import AddressDTO, UserDTO, address_to_dto, user_to_dto
from .protocols import AddressRepositoryProtocol, UserRepositoryProtocol

logger = get_logger(__name__).bind(component="users", layer="service")

ServiceError = Tuple[str, str, Optional[Any]]


class UserService:
    def __init__(self, users: UserRepositoryProtocol):
        self.users = users
        self.logger = logger.bind(service="UserService")

    def get_current_user(self, user_id: int) -> Optional[UserDTO]:
        self.logger.debug("Fetching current user", user_id=user_id)
        user = self.users.get(id=user_id)
        return user_to_dto(user) if user else None

    def _authorize(self, actor_id: int, user_id: int, action: str) -> Optional[ServiceError]:
        if actor_id != user_id:
            self.logger.warning(
                "Profile action forbidden",
                action=action,
                actor_id=actor_id,
                user_id=user_id,
            )
            return (
                "FORBIDDEN",
                "You can only access your own profile",
                None,
            )
        return None

    def get_profile(
        self, actor_id: int, user_id: int
    ) -> Tuple[Optional[UserDTO], Optional[ServiceError]]:
        error = self._authorize(actor_id, user_id, "retrieve")
        if error:
            return None, error
        self.logger.debug("Fetching user profile", user_id=user_id)
        user = self.users.get(id=user_id)
        if not user:
            self.logger.info("User not found", user_id=user_id)
            return None, ("NOT_FOUND", "User not found", {"id": str(user_id)})
        return user_to_dto(user), None

    def update_profile(
        self, actor_id: int, user_id: int, command: ProfileUpdateCommand
    ) -> Tuple[Optional[UserDTO], Optional[ServiceError]]:
        error = self._authorize(actor_id, user_id, "update")
        if error:
            return None, error
        user = self.users.get(id=user_id)
        if not user:
            self.logger.warning("Profile update failed: not found", user_id=user_id)
            return None, ("NOT_FOUND", "User not found", {"id": str(user_id)})
        conflict = (
            "CONFLICT",
            "Username or Email already taken by another user",
            None,
        )
        if self.users.is_taken(
            username=command.username, email=command.email, exclude_id=user_id
        ):
            self.logger.warning(
                "Profile update rejected: identity taken",
                user_id=user_id,
                username=command.username,
            )
            return None, conflict
        try:
            user = self.users.update(
                user, username=command.username, email=command.email
            )
        except IntegrityError as exc:
            self.logger.warning(
                "Profile update failed due to integrity error",
                user_id=user_id,
                error=str(exc),
            )
            return None, conflict
        self.logger.info("User profile updated", user_id=user_id)
        return user_to_dto(user), None


class AddressService:
    """Address book operations, always scoped to the owning user.

    At most one address per user carries ``is_default``; setting the flag on
    one address clears it on the others inside the same transaction.
    """

    def __init__(self, addresses: AddressRepositoryProtocol):
        self.addresses = addresses
        self.logger = logger.bind(service="AddressService")

    def list_addresses(self, user_id: int) -> List[AddressDTO]:
        self.logger.debug("Listing addresses", user_id=user_id)
        return [address_to_dto(a) for a in self.addresses.list_for_user(user_id)]

    def _not_found(self, address_id: int) -> ServiceError:
        return ("NOT_FOUND", "Address not found", {"addressId": str(address_id)})

    def create_address(
        self, user_id: int, command: AddressCommand
    ) -> Tuple[Optional[AddressDTO], Optional[ServiceError]]:
        self.logger.info(
            "Creating address", user_id=user_id, is_default=command.is_default
        )
        with transaction.atomic():
            if command.is_default:
                cleared = self.addresses.clear_default(user_id)
                self.logger.debug(
                    "Cleared previous default addresses", user_id=user_id, cleared=cleared
                )
            address = self.addresses.create(user_id=user_id, **command.fields())
        self.logger.info("Address created", user_id=user_id, address_id=address.id)
        return address_to_dto(address), None

    def update_address(
        self, user_id: int, address_id: int, command: AddressCommand
    ) -> Tuple[Optional[AddressDTO], Optional[ServiceError]]:
        self.logger.info("Updating address", user_id=user_id, address_id=address_id)
        with transaction.atomic():
            address = self.addresses.get(id=address_id, user_id=user_id)
            if not address:
                self.logger.warning(
                    "Address update failed: not found",
                    user_id=user_id,
                    address_id=address_id,
                )
                return None, self._not_found(address_id)
            if command.is_default:
                self.addresses.clear_default(user_id, exclude_id=address_id)
            address = self.addresses.update(address, **command.fields())
        self.logger.info("Address updated", user_id=user_id, address_id=address_id)
        return address_to_dto(address), None

    def delete_address(
        self, user_id: int, address_id: int
    ) -> Tuple[bool, Optional[ServiceError]]:
        self.logger.info("Deleting address", user_id=user_id, address_id=address_id)
        address = self.addresses.get(id=address_id, user_id=user_id)
        if not address:
            self.logger.warning(
                "Address deletion failed: not found",
                user_id=user_id,
                address_id=address_id,
            )
            return False, self._not_found(address_id)
        try:
            self.addresses.delete(address)
        except ProtectedError:
            self.logger.warning(
                "Address deletion blocked by existing orders",
                user_id=user_id,
                address_id=address_id,
            )
            return False, (
                "CONFLICT",
                "Address is used by an existing order",
                {"addressId": str(address_id)},
            )
        self.logger.info("Address deleted", user_id=user_id, address_id=address_id)
        return True, None
