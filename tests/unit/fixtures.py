"""
Test data identifiers shared by the fixtures and the tests.

IDs are stored with their type prefix, the way the handlers normalize them.
"""

ORG_ID = "ORG#org-1"
ADMIN_ID = "USER#admin-1"
CREATOR_ID = "USER#creator-1"
MEMBER_ID = "USER#member-1"
OUTSIDER_ID = "USER#outsider-1"
SUPERADMIN_ID = "USER#super-1"
REQUEST_ID = "REQUEST#req-1"
EVENT_ID = "EVENT#event-1"
GROUP_CHAT_ID = "CHAT#group-1"
DIRECT_CHAT_ID = "CHAT#direct-1"
