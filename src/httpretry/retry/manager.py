r"""Hook manager invoking the lifecycle hooks of an attempt."""

from __future__ import annotations

__all__ = ["HookManager"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

    from httpretry.policies import ErrorHook, RequestHook, ResponseHook


class HookManager:
    """Invokes the optional request, response and error hooks.

    Each method is a no-op when the corresponding hook is not
    configured.

    Args:
        request_hook: Optional hook called before every attempt.
        response_hook: Optional hook called after every response.
        error_hook: Optional hook called after every transport error.
    """

    def __init__(
        self,
        request_hook: RequestHook | None = None,
        response_hook: ResponseHook | None = None,
        error_hook: ErrorHook | None = None,
    ) -> None:
        self.request_hook = request_hook
        self.response_hook = response_hook
        self.error_hook = error_hook

    def on_request(self, request: httpx.Request, attempt: int) -> None:
        """Call the request hook before the attempt ``attempt``."""
        if self.request_hook is not None:
            self.request_hook(request, attempt)

    def on_response(self, request: httpx.Request, response: httpx.Response) -> None:
        """Call the response hook with the response of an attempt."""
        if self.response_hook is not None:
            self.response_hook(request, response)

    def on_error(self, request: httpx.Request, error: Exception, attempt: int) -> None:
        """Call the error hook with the transport error of the attempt
        ``attempt``."""
        if self.error_hook is not None:
            self.error_hook(request, error, attempt)
