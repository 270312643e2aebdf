"""
Enum definitions for domain models.

Codes are positional: new labels are only ever appended, so rows written
under an older version still decode to the same labels.
"""

from enumfield.core.column import EnumField
from enumfield.core.definition import define

# Original roles; "vendor" and "customer" were appended later.
USER_ROLES_V1 = define(["volunteer", "admin"])
USER_ROLES = USER_ROLES_V1.extend("vendor", "customer")

USER_STATUSES = define(["active", "suspended", "archived"])

ROLE = EnumField(USER_ROLES, default="volunteer")
STATUS = EnumField(USER_STATUSES, default="active")
