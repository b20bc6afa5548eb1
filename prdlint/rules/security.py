"""
Security Rules - Authentication, authorization and data privacy.
"""

from typing import List

from .helpers import keyword_rule
from .models import Category, PRDLintRule, Severity


has_authentication = keyword_rule(
    "has-authentication",
    Category.SECURITY,
    Severity.ERROR,
    "Authentication Requirements",
    "PRD must specify authentication when users are mentioned",
    keywords=('authentication', 'auth', 'login', 'log in', 'sign in', 'oauth', 'sso'),
    triggers=('user', 'users', 'account', 'accounts', 'profile', 'member', 'members', 'customer', 'customers'),
    message='Users mentioned but no authentication specified',
    suggestion='Define authentication requirements',
    suggestions=(
        '## Authentication\n- Method: OAuth 2.0 with Google/GitHub\n- MFA: Optional TOTP\n- Session: JWT with 24h expiry',
        '### Auth Requirements\n- Email/password with email verification\n- Account lockout after 5 failed attempts',
    ),
)

has_data_privacy = keyword_rule(
    "has-data-privacy",
    Category.SECURITY,
    Severity.WARNING,
    "Data Privacy",
    "PRD should address data privacy when handling personal data",
    keywords=('privacy', 'gdpr', 'ccpa', 'encryption', 'encrypt', 'anonymize', 'data protection', 'pii'),
    triggers=('personal', 'email', 'phone', 'address', 'payment', 'password', 'sensitive'),
    message='Personal data mentioned but no privacy requirements',
    suggestion='Define data privacy and protection measures',
    suggestions=(
        '## Data Privacy\n- Encryption: AES-256 at rest, TLS 1.3 in transit\n- Compliance: GDPR, CCPA',
    ),
)

has_authorization = keyword_rule(
    "has-authorization",
    Category.SECURITY,
    Severity.WARNING,
    "Authorization & Access Control",
    "PRD should define role-based access control when roles are mentioned",
    keywords=('rbac', 'authorization', 'authorisation', 'access control', 'permission'),
    triggers=('role', 'roles', 'admin', 'admins', 'administrator', 'manager', 'managers'),
    message='Roles mentioned but no authorization rules defined',
    suggestion='Define role-based access control',
    suggestions=(
        '## Authorization\n- Admin: Full access\n- Manager: Read/write own team\n- User: Read/write own data',
    ),
)


SECURITY_RULES: List[PRDLintRule] = [
    has_authentication,
    has_data_privacy,
    has_authorization,
]
