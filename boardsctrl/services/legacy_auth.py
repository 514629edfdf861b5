"""External identity verifier: delegated credential check against the legacy login service."""

import asyncio
import json
import logging
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

import httpx
from pydantic import ValidationError

from boardsctrl.schemas.legacy_auth import LegacyAuthRequest, LegacyAuthResponse

if TYPE_CHECKING:
    from boardsctrl.core.config import Settings

logger = logging.getLogger(__name__)

# Application-level code the legacy service returns for accepted credentials.
LEGACY_ACCEPTED_CODE = 0


class LegacyAuthUnavailableError(Exception):
    """Raised when the legacy service cannot give a verdict (unreachable, timeout, bad body)."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        self.message = message
        self.cause = cause
        super().__init__(message)


@dataclass(frozen=True)
class ExternalVerificationOutcome:
    """Verdict from the legacy service. response_code is None when no body was read."""

    success: bool
    response_code: int | None
    http_status: int | None = None
    description: str | None = None
    roles: list[str] = field(default_factory=list)


class IdentityVerifier(Protocol):
    async def verify(self, username: str, password: str) -> ExternalVerificationOutcome: ...


class LegacyIdentityVerifier:
    """
    Posts {User, Passwd, IdAplicativo, Firma} to the legacy login endpoint.

    No retries. A non-2xx status or a non-zero CodigoMensaje is a rejection;
    transport failures raise LegacyAuthUnavailableError.
    """

    def __init__(self, settings: "Settings") -> None:
        self.settings = settings

    async def verify(self, username: str, password: str) -> ExternalVerificationOutcome:
        if not self.settings.LEGACY_AUTH_ENABLED:
            logger.warning(
                "Legacy identity check is disabled (LEGACY_AUTH_ENABLED=false); accepting login"
            )
            return ExternalVerificationOutcome(success=True, response_code=LEGACY_ACCEPTED_CODE)

        url = self.settings.legacy_auth_url
        payload = LegacyAuthRequest(
            user=username,
            password=password,
            app_id=self.settings.LEGACY_AUTH_APP_ID,
            signature=self.settings.LEGACY_AUTH_SIGNATURE.get_secret_value(),
        ).model_dump(by_alias=True)
        timeout = httpx.Timeout(self.settings.LEGACY_AUTH_TIMEOUT_SEC)
        start = time.perf_counter()

        # httpx limits each phase; the outer deadline bounds the whole call.
        try:
            async with asyncio.timeout(self.settings.LEGACY_AUTH_TIMEOUT_SEC):
                async with httpx.AsyncClient(timeout=timeout) as client:
                    response = await client.post(url, json=payload)
        except httpx.ConnectError as e:
            self._log_failure(start, "connect_error")
            raise LegacyAuthUnavailableError(
                "Legacy identity service is unreachable.", cause=e
            ) from e
        except (httpx.TimeoutException, TimeoutError) as e:
            self._log_failure(start, "timeout")
            raise LegacyAuthUnavailableError(
                "Legacy identity service timed out. Check LEGACY_AUTH_TIMEOUT_SEC.", cause=e
            ) from e
        except httpx.HTTPError as e:
            self._log_failure(start, "transport_error")
            raise LegacyAuthUnavailableError(
                "Legacy identity service request failed.", cause=e
            ) from e

        elapsed = time.perf_counter() - start
        if not response.is_success:
            logger.info(
                "Legacy identity check returned an error status",
                extra={
                    "legacy_latency_seconds": elapsed,
                    "http_status": response.status_code,
                },
            )
            return ExternalVerificationOutcome(
                success=False,
                response_code=None,
                http_status=response.status_code,
            )

        try:
            body = LegacyAuthResponse.model_validate(response.json())
        except (json.JSONDecodeError, ValidationError) as e:
            self._log_failure(start, "invalid_body")
            raise LegacyAuthUnavailableError(
                "Legacy identity service returned an unexpected body.", cause=e
            ) from e

        code = body.message.code
        logger.info(
            "Legacy identity check completed",
            extra={
                "legacy_latency_seconds": elapsed,
                "http_status": response.status_code,
                "legacy_code": code,
            },
        )
        return ExternalVerificationOutcome(
            success=code == LEGACY_ACCEPTED_CODE,
            response_code=code,
            http_status=response.status_code,
            description=body.message.description,
            roles=[r.description for r in body.roles or [] if r.description],
        )

    def _log_failure(self, start: float, reason: str) -> None:
        logger.warning(
            "Legacy identity check failed",
            extra={
                "legacy_latency_seconds": time.perf_counter() - start,
                "reason": reason,
            },
        )
