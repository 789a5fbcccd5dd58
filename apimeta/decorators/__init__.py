"""Decorator surface for attaching documentation metadata."""

from .models import api_extension, api_extra_models
from .properties import HIDDEN, HiddenProperty, api_hide_property, api_model, api_property
from .responses import (
    api_accepted_response,
    api_bad_gateway_response,
    api_bad_request_response,
    api_conflict_response,
    api_created_response,
    api_default_response,
    api_forbidden_response,
    api_found_response,
    api_gateway_timeout_response,
    api_gone_response,
    api_internal_server_error_response,
    api_method_not_allowed_response,
    api_moved_permanently_response,
    api_no_content_response,
    api_not_acceptable_response,
    api_not_found_response,
    api_not_implemented_response,
    api_ok_response,
    api_payload_too_large_response,
    api_precondition_failed_response,
    api_request_timeout_response,
    api_response,
    api_service_unavailable_response,
    api_too_many_requests_response,
    api_unauthorized_response,
    api_unprocessable_entity_response,
    api_unsupported_media_type_response,
)

__all__ = [
    "HIDDEN",
    "HiddenProperty",
    "api_accepted_response",
    "api_bad_gateway_response",
    "api_bad_request_response",
    "api_conflict_response",
    "api_created_response",
    "api_default_response",
    "api_extension",
    "api_extra_models",
    "api_forbidden_response",
    "api_found_response",
    "api_gateway_timeout_response",
    "api_gone_response",
    "api_hide_property",
    "api_internal_server_error_response",
    "api_method_not_allowed_response",
    "api_model",
    "api_moved_permanently_response",
    "api_no_content_response",
    "api_not_acceptable_response",
    "api_not_found_response",
    "api_not_implemented_response",
    "api_ok_response",
    "api_payload_too_large_response",
    "api_precondition_failed_response",
    "api_property",
    "api_request_timeout_response",
    "api_response",
    "api_service_unavailable_response",
    "api_too_many_requests_response",
    "api_unauthorized_response",
    "api_unprocessable_entity_response",
    "api_unsupported_media_type_response",
]
