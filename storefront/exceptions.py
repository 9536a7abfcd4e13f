"""
Storefront error taxonomy

Every error raised by the service layer derives from StorefrontError and
carries the HTTP status it is reported with.
"""


class StorefrontError(Exception):
    """Base exception for Storefront errors"""
    status_code = 500
    code = "INTERNAL"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(StorefrontError):
    """Referenced store, product, order or user does not exist"""
    status_code = 404
    code = "NOT_FOUND"


class ConflictError(StorefrontError):
    """Duplicate SKU/slug/email, disallowed status transition, insufficient stock"""
    status_code = 409
    code = "CONFLICT"


class AuthenticationError(StorefrontError):
    """Missing or invalid credential"""
    status_code = 401
    code = "UNAUTHENTICATED"


class AuthorizationError(StorefrontError):
    """Credential is valid but does not grant access to the resource"""
    status_code = 403
    code = "UNAUTHORIZED"


class UpstreamUnavailableError(StorefrontError):
    """External collaborator (text generation, asset host) unavailable or unconfigured"""
    status_code = 503
    code = "UPSTREAM_UNAVAILABLE"


class InvalidInputError(StorefrontError):
    """Input passed schema validation but is still unusable"""
    status_code = 422
    code = "INVALID_INPUT"
