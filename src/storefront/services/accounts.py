"""AccountService — registration and one-time-code login."""

from __future__ import annotations

from storefront.domain.validators import is_valid_email
from storefront.services._helpers import resolve
from storefront.services.base import BaseService
from storefront.services.contracts import LoginData, SignUpData, dump_validated
from storefront.services.result import ServiceError, ServiceResult
from storefront.services.telemetry import trace_span, traced

WELCOME_MESSAGE = "Welcome aboard!"


class AccountService(BaseService):
    """Sign-up and login flows; both talk to the customer by email."""

    @traced
    async def sign_up(self, email: str) -> ServiceResult:
        """Register *email* and send one welcome email.

        An invalid address is an ``invalid_email`` outcome and sends nothing.
        The welcome email is sent before this coroutine resolves.
        """
        op = "sign_up"
        if not is_valid_email(email):
            return ServiceResult(
                ok=False,
                op=op,
                data={"email": str(email), "registered": False},
                error=ServiceError(code="invalid_email", message=f"Invalid email address: {email}"),
            )

        with trace_span("email.send_email"):
            await resolve(self._collaborators.email.send_email(email, WELCOME_MESSAGE))

        warnings: list[str] = []
        self._dispatch_event("post_sign_up", {"email": email}, warnings)
        return ServiceResult(
            ok=True,
            op=op,
            data=dump_validated(SignUpData, {"email": email, "registered": True}),
            warnings=warnings,
        )

    @traced
    async def login(self, email: str) -> ServiceResult:
        """Generate a fresh one-time code and email it to *email*.

        The email body is exactly ``str(code)``. Codes are not stored.
        """
        with trace_span("security.generate_code"):
            code = self._collaborators.security.generate_code()

        with trace_span("email.send_email"):
            await resolve(self._collaborators.email.send_email(email, str(code)))

        warnings: list[str] = []
        self._dispatch_event("post_login", {"email": email}, warnings)
        return ServiceResult(
            ok=True,
            op="login",
            data=dump_validated(LoginData, {"email": email, "code_sent": True}),
            warnings=warnings,
        )
