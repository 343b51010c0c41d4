"""Application-wide constants.

This module defines constants used throughout the application
to avoid magic numbers and ensure consistency.
"""

# Slug generation (one DNS label)
MAX_SLUG_LENGTH = 63
MAX_SLUG_ATTEMPTS = 100

# Tenant names are validated after trimming
MIN_TENANT_NAME_LENGTH = 2
MAX_TENANT_NAME_LENGTH = 64

# Slugs that would collide with platform hosts or routes
RESERVED_SLUGS = frozenset({"admin", "api", "www"})

# Subdomain labels that never resolve to a tenant
DEFAULT_RESERVED_SUBDOMAINS = ("www", "api")

# String field lengths
MAX_EMAIL_LENGTH = 255
MAX_NAME_LENGTH = 255
MAX_IPV6_LENGTH = 45
MAX_ROLE_NAME_LENGTH = 50
MAX_STATUS_LENGTH = 20
MAX_AUDIT_ACTION_LENGTH = 50
MAX_AUDIT_RESOURCE_LENGTH = 100

# Password hashing
BCRYPT_ROUNDS = 12

# Admin sessions
ADMIN_ROLES = frozenset({"super_admin", "admin"})
DEFAULT_ADMIN_ROLE = "super_admin"
SESSION_TOKEN_TYPE = "session"
DEFAULT_SESSION_MAX_AGE = 86400  # 24 hours

# Request context
TENANT_SLUG_HEADER = "x-tenant-slug"
REQUEST_ID_HEADER = "X-Request-ID"

# Secret key requirements
MIN_SECRET_KEY_LENGTH = 32
DEFAULT_INSECURE_SECRET = "change-me-in-production"
