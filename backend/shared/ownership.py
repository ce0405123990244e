"""
Resource ownership checks.

One reusable capability answers "does this caller own this resource" for
every resource type. Each checker is configured with three callables:

- load: fetch the resource by ID (None when missing or soft-deleted)
- owner_of: extract the owner key from a loaded resource
- owner_keys_for: list the owner keys held by a user

For certificates the owner key is an account ID and a user holds the IDs
of all their accounts. For user profiles the owner key is the user ID
itself.
"""

from typing import Callable, Generic, Iterable, Optional, TypeVar


R = TypeVar("R")


class OwnershipChecker(Generic[R]):
    """Decides whether a user may read or modify a resource."""

    def __init__(
        self,
        load: Callable[[str], Optional[R]],
        owner_of: Callable[[R], str],
        owner_keys_for: Callable[[str], Iterable[str]],
    ) -> None:
        self._load = load
        self._owner_of = owner_of
        self._owner_keys_for = owner_keys_for

    def holds(self, user_id: str, owner_key: str) -> bool:
        """Check whether the user holds an owner key, without loading anything."""
        return owner_key in set(self._owner_keys_for(user_id))

    def owns(self, user_id: str, resource: R) -> bool:
        """Check ownership of an already loaded resource."""
        return self.holds(user_id, self._owner_of(resource))

    def can_modify(self, user_id: str, resource_id: str) -> bool:
        """
        Load the resource and check ownership.

        Fails closed: a missing or soft-deleted resource yields False.
        Nothing is cached, every call hits the store.
        """
        resource = self._load(resource_id)
        if resource is None:
            return False
        return self.owns(user_id, resource)
