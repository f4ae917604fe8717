import time
import uuid
from typing import Callable, Dict, Any
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from src.core.config import settings
from src.utils.logging.error_logger import error_logger
from src.utils.logging.activity_logger import logger_instance as activity_logger

REQUEST_ID_HEADER = "X-Request-ID"


class LoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware that tags each request with an ID, logs it as activity,
    and logs any unhandled error before re-raising it.
    """

    def __init__(self, app: ASGIApp):
        super().__init__(app)

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id

        # Start timer
        start_time = time.time()

        try:
            response = await call_next(request)
        except Exception as e:
            await error_logger.log_error(
                error=e,
                request=request,
                additional_context=self._get_additional_context(request)
            )

            # Re-raise the exception to be handled by exception handlers
            raise

        response.headers[REQUEST_ID_HEADER] = request_id

        if not self._should_skip_logging(request.url.path):
            process_time = time.time() - start_time
            await self._log_activity(request, response, process_time)

        return response

    def _should_skip_logging(self, path: str) -> bool:
        """
        Determine if logging should be skipped for this path.

        Args:
            path: Request path

        Returns:
            True if logging should be skipped, False otherwise
        """
        if path.startswith("/static/"):
            return True

        return path in settings.log_skip_paths

    def _get_additional_context(self, request: Request) -> Dict[str, Any]:
        return {
            "request_id": getattr(request.state, "request_id", None),
            "user_agent": request.headers.get("User-Agent"),
            "referer": request.headers.get("Referer"),
            "accept_language": request.headers.get("Accept-Language"),
        }

    async def _log_activity(
        self, request: Request, response: Response, process_time: float
    ) -> None:
        """
        Log the request activity.

        Args:
            request: The FastAPI request object
            response: The response object
            process_time: Request processing time in seconds
        """
        await activity_logger.log_activity(
            message=self._create_narrative(request, response),
            activity_type="api_request",
            metadata={
                "request_id": request.state.request_id,
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "process_time_ms": round(process_time * 1000, 2),
                "query_params": dict(request.query_params),
                "client_host": request.client.host if request.client else None,
                "user_agent": request.headers.get("User-Agent")
            }
        )

    def _create_narrative(self, request: Request, response: Response) -> str:
        """
        Create a narrative description of the request.

        Args:
            request: The FastAPI request object
            response: The response object

        Returns:
            Narrative description
        """
        narrative = f"Client made a {request.method} request to {request.url.path}"

        if request.query_params:
            params_str = ", ".join(f"{k}={v}" for k, v in request.query_params.items())
            narrative += f" with parameters: {params_str}"

        if 200 <= response.status_code < 300:
            narrative += f" and received a successful response ({response.status_code})"
        elif 400 <= response.status_code < 500:
            narrative += f" but had a client error ({response.status_code})"
        elif 500 <= response.status_code < 600:
            narrative += f" but encountered a server error ({response.status_code})"
        else:
            narrative += f" and received a {response.status_code} response"

        return narrative
