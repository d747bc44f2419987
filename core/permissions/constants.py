"""
Composer Permissions — ACL Constants
"""

OP_CREATE = "CREATE"
OP_READ = "READ"
OP_UPDATE = "UPDATE"
OP_DELETE = "DELETE"
OP_ALL = "ALL"

VALID_OPERATIONS = frozenset({OP_CREATE, OP_READ, OP_UPDATE, OP_DELETE, OP_ALL})

ACTION_ALLOW = "ALLOW"
ACTION_DENY = "DENY"

VALID_ACTIONS = frozenset({ACTION_ALLOW, ACTION_DENY})

# Matches every participant / resource.
ANY = "ANY"
