"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.

Routes depend on the get_*_service functions below, so tests can swap
implementations with app.dependency_overrides.
"""

from typing import TYPE_CHECKING

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthService
    from modules.users.interfaces import IUserService
    from modules.users.repository import UserRepository
    from modules.accounts.repository import AccountRepository
    from modules.certificates.interfaces import ICertificateService
    from modules.certificates.repository import CertificateRepository


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self) -> None:
        self._user_repository: "UserRepository | None" = None
        self._account_repository: "AccountRepository | None" = None
        self._certificate_repository: "CertificateRepository | None" = None
        self._auth_service: "IAuthService | None" = None
        self._user_service: "IUserService | None" = None
        self._certificate_service: "ICertificateService | None" = None

    @property
    def user_repository(self) -> "UserRepository":
        if self._user_repository is None:
            from modules.users.repository import UserRepository
            from shared.database import get_supabase_client
            self._user_repository = UserRepository(get_supabase_client())
        return self._user_repository

    @property
    def account_repository(self) -> "AccountRepository":
        if self._account_repository is None:
            from modules.accounts.repository import AccountRepository
            from shared.database import get_supabase_client
            self._account_repository = AccountRepository(get_supabase_client())
        return self._account_repository

    @property
    def certificate_repository(self) -> "CertificateRepository":
        if self._certificate_repository is None:
            from modules.certificates.repository import CertificateRepository
            from shared.database import get_supabase_client
            self._certificate_repository = CertificateRepository(get_supabase_client())
        return self._certificate_repository

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            from shared.config import get_settings
            self._auth_service = AuthService(
                users=self.user_repository,
                settings=get_settings(),
            )
        return self._auth_service

    @property
    def users(self) -> "IUserService":
        """Get the user service instance."""
        if self._user_service is None:
            from modules.users.service import UserService
            self._user_service = UserService(repository=self.user_repository)
        return self._user_service

    @property
    def certificates(self) -> "ICertificateService":
        """Get the certificate service instance."""
        if self._certificate_service is None:
            from modules.certificates.service import CertificateService
            from shared.config import get_settings
            settings = get_settings()
            self._certificate_service = CertificateService(
                repository=self.certificate_repository,
                accounts=self.account_repository,
                frontend_url=settings.frontend_url,
                share_token_bytes=settings.share_token_bytes,
            )
        return self._certificate_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._user_repository = None
        self._account_repository = None
        self._certificate_repository = None
        self._auth_service = None
        self._user_service = None
        self._certificate_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_user_service() -> "IUserService":
    """FastAPI dependency for user service."""
    return get_container().users


def get_certificate_service() -> "ICertificateService":
    """FastAPI dependency for certificate service."""
    return get_container().certificates
