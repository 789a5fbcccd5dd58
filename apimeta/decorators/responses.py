"""Response annotations for controller classes and handler methods."""

from __future__ import annotations

from http import HTTPStatus
from typing import Any, Callable, Optional, TypeVar, Union

from ..constants import DEFAULT_STATUS
from ..errors import InvalidOptionsError
from ..models import ElementKind
from ..options import ResponseOptions, build_options
from ..registry import MetadataRegistry
from .base import resolve_element, resolve_registry

T = TypeVar("T")


def api_response(
    options: Optional[ResponseOptions] = None,
    /,
    *,
    override_existing: Optional[bool] = None,
    registry: Optional[MetadataRegistry] = None,
    **fields: Any,
) -> Callable[[T], T]:
    """Describe one response of a class (all its operations) or of a method.

    Options may be given as a :class:`ResponseOptions` record, as keyword
    fields, or both (fields win). Responses are bucketed by ``status``, which
    defaults to ``'default'``. A later response for the same status replaces
    the earlier one unless ``override_existing=False``, in which case the later
    call is silently ignored for that status.
    """
    resolved = build_options(ResponseOptions, options, fields)

    def decorator(target: T) -> T:
        ref = resolve_element(target, "api_response", ElementKind.CLASS, ElementKind.METHOD)
        resolve_registry(registry).describe_response(
            ref, resolved, override_existing=override_existing
        )
        return target

    return decorator


def _status_response(status: Union[HTTPStatus, str], name: str) -> Callable[..., Callable[[T], T]]:
    key = int(status) if isinstance(status, HTTPStatus) else status

    def wrapper(
        options: Optional[ResponseOptions] = None,
        /,
        *,
        registry: Optional[MetadataRegistry] = None,
        **fields: Any,
    ) -> Callable[[T], T]:
        if "status" in fields or (options is not None and "status" in options.model_fields_set):
            raise InvalidOptionsError(f"{name} sets its own status; use api_response instead")
        resolved = build_options(ResponseOptions, options, fields)
        return api_response(
            resolved.model_copy(update={"status": key}),
            override_existing=True,
            registry=registry,
        )

    wrapper.__name__ = wrapper.__qualname__ = name
    wrapper.__doc__ = f"Shortcut for ``api_response(status={key!r})``; always overrides, status is fixed."
    return wrapper


api_ok_response = _status_response(HTTPStatus.OK, "api_ok_response")
api_created_response = _status_response(HTTPStatus.CREATED, "api_created_response")
api_accepted_response = _status_response(HTTPStatus.ACCEPTED, "api_accepted_response")
api_no_content_response = _status_response(HTTPStatus.NO_CONTENT, "api_no_content_response")
api_moved_permanently_response = _status_response(
    HTTPStatus.MOVED_PERMANENTLY, "api_moved_permanently_response"
)
api_found_response = _status_response(HTTPStatus.FOUND, "api_found_response")
api_bad_request_response = _status_response(HTTPStatus.BAD_REQUEST, "api_bad_request_response")
api_unauthorized_response = _status_response(HTTPStatus.UNAUTHORIZED, "api_unauthorized_response")
api_too_many_requests_response = _status_response(
    HTTPStatus.TOO_MANY_REQUESTS, "api_too_many_requests_response"
)
api_not_found_response = _status_response(HTTPStatus.NOT_FOUND, "api_not_found_response")
api_internal_server_error_response = _status_response(
    HTTPStatus.INTERNAL_SERVER_ERROR, "api_internal_server_error_response"
)
api_bad_gateway_response = _status_response(HTTPStatus.BAD_GATEWAY, "api_bad_gateway_response")
api_conflict_response = _status_response(HTTPStatus.CONFLICT, "api_conflict_response")
api_forbidden_response = _status_response(HTTPStatus.FORBIDDEN, "api_forbidden_response")
api_gateway_timeout_response = _status_response(
    HTTPStatus.GATEWAY_TIMEOUT, "api_gateway_timeout_response"
)
api_gone_response = _status_response(HTTPStatus.GONE, "api_gone_response")
api_method_not_allowed_response = _status_response(
    HTTPStatus.METHOD_NOT_ALLOWED, "api_method_not_allowed_response"
)
api_not_acceptable_response = _status_response(
    HTTPStatus.NOT_ACCEPTABLE, "api_not_acceptable_response"
)
api_not_implemented_response = _status_response(
    HTTPStatus.NOT_IMPLEMENTED, "api_not_implemented_response"
)
api_precondition_failed_response = _status_response(
    HTTPStatus.PRECONDITION_FAILED, "api_precondition_failed_response"
)
api_payload_too_large_response = _status_response(
    HTTPStatus.REQUEST_ENTITY_TOO_LARGE, "api_payload_too_large_response"
)
api_request_timeout_response = _status_response(
    HTTPStatus.REQUEST_TIMEOUT, "api_request_timeout_response"
)
api_service_unavailable_response = _status_response(
    HTTPStatus.SERVICE_UNAVAILABLE, "api_service_unavailable_response"
)
api_unprocessable_entity_response = _status_response(
    HTTPStatus.UNPROCESSABLE_ENTITY, "api_unprocessable_entity_response"
)
api_unsupported_media_type_response = _status_response(
    HTTPStatus.UNSUPPORTED_MEDIA_TYPE, "api_unsupported_media_type_response"
)
api_default_response = _status_response(DEFAULT_STATUS, "api_default_response")

__all__ = [
    "api_accepted_response",
    "api_bad_gateway_response",
    "api_bad_request_response",
    "api_conflict_response",
    "api_created_response",
    "api_default_response",
    "api_forbidden_response",
    "api_found_response",
    "api_gateway_timeout_response",
    "api_gone_response",
    "api_internal_server_error_response",
    "api_method_not_allowed_response",
    "api_moved_permanently_response",
    "api_no_content_response",
    "api_not_acceptable_response",
    "api_not_found_response",
    "api_not_implemented_response",
    "api_ok_response",
    "api_payload_too_large_response",
    "api_precondition_failed_response",
    "api_request_timeout_response",
    "api_response",
    "api_service_unavailable_response",
    "api_too_many_requests_response",
    "api_unauthorized_response",
    "api_unprocessable_entity_response",
    "api_unsupported_media_type_response",
]
