"""Login and registration: local checks, legacy identity check, token issuance."""

import asyncio
import enum
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from boardsctrl.core.security import create_access_token, hash_password, verify_password
from boardsctrl.models import Role
from boardsctrl.repositories.accounts import AccountRepository, DuplicateUsernameError
from boardsctrl.services.legacy_auth import IdentityVerifier, LegacyAuthUnavailableError

if TYPE_CHECKING:
    from boardsctrl.core.config import Settings

logger = logging.getLogger(__name__)


class AuthFailure(str, enum.Enum):
    """Why a login or registration was refused."""

    INVALID_CREDENTIALS = "invalid_credentials"
    ROLE_UNAVAILABLE = "role_unavailable"
    EXTERNAL_REJECTED = "external_rejected"
    EXTERNAL_UNAVAILABLE = "external_unavailable"
    DUPLICATE_USERNAME = "duplicate_username"


# Client-visible reason for each failure.
FAILURE_MESSAGES: dict[AuthFailure, str] = {
    AuthFailure.INVALID_CREDENTIALS: "Credenciales inválidas",
    AuthFailure.ROLE_UNAVAILABLE: "El rol del usuario no está disponible",
    AuthFailure.EXTERNAL_REJECTED: "Credenciales inválidas del servidor externo",
    AuthFailure.EXTERNAL_UNAVAILABLE: "Servicio de autenticación externo no disponible",
    AuthFailure.DUPLICATE_USERNAME: "El usuario ya existe",
}

# "Not found" and "inactive" share one message so account status does not leak to callers.
ACCOUNT_NOT_FOUND_MESSAGE = "Usuario no encontrado o inactivo"
ROLE_NOT_FOUND_MESSAGE = "Rol no encontrado"
LOGIN_SUCCESS_MESSAGE = "Inicio de sesión exitoso."
REGISTER_SUCCESS_MESSAGE = "Usuario registrado exitosamente"


@dataclass(frozen=True)
class Authenticated:
    account_id: int
    username: str
    role_name: str
    token: str


@dataclass(frozen=True)
class Registered:
    account_id: int
    username: str
    role_name: str


@dataclass(frozen=True)
class Rejected:
    reason: AuthFailure
    message: str

    @classmethod
    def of(cls, reason: AuthFailure, message: str | None = None) -> "Rejected":
        return cls(reason=reason, message=message or FAILURE_MESSAGES[reason])


AuthResult = Authenticated | Rejected
RegistrationResult = Registered | Rejected


class AuthService:
    """
    Orchestrates login and registration over an injected credential store and
    identity verifier.

    Login checks run in a fixed order and stop at the first failure:
    account lookup, local password (when a hash is stored), role resolution,
    legacy identity check. The cheap local checks come first so a bad password
    never costs a network round trip. Login writes nothing.
    """

    def __init__(
        self,
        accounts: AccountRepository,
        verifier: IdentityVerifier,
        settings: "Settings",
    ) -> None:
        self.accounts = accounts
        self.verifier = verifier
        self.settings = settings

    async def login(self, username: str, password: str) -> AuthResult:
        # Lookup and bcrypt are blocking; keep them off the event loop.
        local = await asyncio.to_thread(self._check_local, username, password)
        if isinstance(local, Rejected):
            return self._reject(username, local)
        account, role = local

        try:
            outcome = await self.verifier.verify(username, password)
        except LegacyAuthUnavailableError as e:
            logger.error(
                "Login failed: legacy identity service unavailable",
                extra={"username": username, "reason": e.message},
            )
            return Rejected.of(AuthFailure.EXTERNAL_UNAVAILABLE)
        if not outcome.success:
            logger.warning(
                "Login rejected by legacy identity service",
                extra={
                    "username": username,
                    "legacy_code": outcome.response_code,
                    "http_status": outcome.http_status,
                },
            )
            return Rejected.of(AuthFailure.EXTERNAL_REJECTED)

        token = create_access_token(
            account.id,
            account.username,
            role.name,
            settings=self.settings,
        )
        logger.info(
            "Login succeeded",
            extra={"username": account.username, "account_id": account.id, "role": role.name},
        )
        return Authenticated(
            account_id=account.id,
            username=account.username,
            role_name=role.name,
            token=token,
        )

    def register(
        self,
        username: str,
        password: str | None,
        email: str,
        role: int | str,
        created_by_id: int | None = None,
    ) -> RegistrationResult:
        """
        Create an active account with a bcrypt hash. `role` is a role id or name.
        Without a password the account can only pass the legacy identity check.
        Does not consult the legacy identity service.
        """
        if self.accounts.username_exists(username):
            return self._reject(username, Rejected.of(AuthFailure.DUPLICATE_USERNAME))

        resolved = self._resolve_role(role)
        if resolved is None:
            return self._reject(
                username,
                Rejected.of(AuthFailure.ROLE_UNAVAILABLE, ROLE_NOT_FOUND_MESSAGE),
            )

        try:
            account = self.accounts.add_account(
                username=username,
                password_hash=hash_password(password) if password else None,
                email=email,
                role=resolved,
                created_by_id=created_by_id,
            )
        except DuplicateUsernameError:
            return self._reject(username, Rejected.of(AuthFailure.DUPLICATE_USERNAME))

        logger.info(
            "Account registered",
            extra={"username": username, "account_id": account.id, "role": resolved.name},
        )
        return Registered(account_id=account.id, username=account.username, role_name=resolved.name)

    def _check_local(self, username: str, password: str) -> tuple[Any, Role] | Rejected:
        """Account lookup, local hash, role resolution. Runs in a worker thread."""
        account = self.accounts.get_active_by_username(username)
        if account is None:
            return Rejected.of(AuthFailure.INVALID_CREDENTIALS, ACCOUNT_NOT_FOUND_MESSAGE)
        if account.password_hash and not verify_password(password, account.password_hash):
            return Rejected.of(AuthFailure.INVALID_CREDENTIALS)
        role = self.accounts.get_role(account.role_id)
        if role is None:
            return Rejected.of(AuthFailure.ROLE_UNAVAILABLE)
        return account, role

    def _resolve_role(self, role: int | str) -> Role | None:
        if isinstance(role, int):
            return self.accounts.get_role(role)
        role = role.strip()
        if role.isdecimal():
            return self.accounts.get_role(int(role))
        return self.accounts.get_role_by_name(role)

    @staticmethod
    def _reject(username: str, rejected: Rejected) -> Rejected:
        logger.warning(
            "Authentication request rejected",
            extra={"username": username, "reason": rejected.reason.value},
        )
        return rejected
