"""
Identity Event Models

Structured representation of an identity platform admin event that can
change relationships (role assignments, group membership, composite roles,
sub-groups).
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class EventResourceType(str, Enum):
    """Admin event resource types that carry relationship changes"""
    REALM_ROLE_MAPPING = "REALM_ROLE_MAPPING"
    CLIENT_ROLE_MAPPING = "CLIENT_ROLE_MAPPING"
    GROUP_MEMBERSHIP = "GROUP_MEMBERSHIP"
    REALM_ROLE = "REALM_ROLE"
    GROUP = "GROUP"


class OperationType(str, Enum):
    """Admin event operation types"""
    CREATE = "CREATE"
    UPDATE = "UPDATE"
    DELETE = "DELETE"
    ACTION = "ACTION"


class SubjectType(str, Enum):
    """Entity the event's resource path points at"""
    USER = "user"
    GROUP = "group"
    ROLE = "role"


class IdentityEvent(BaseModel):
    """
    Structured identity event

    subject_* identifies the entity in the resource path (the user whose role
    mappings changed, the parent group, the composite role). object_ids holds
    the ids of the roles / groups the change refers to.
    """

    event_id: str = Field(..., description="Event ID used for correlation")
    realm_id: Optional[str] = Field(None, description="Realm the event belongs to")
    resource_type: EventResourceType
    operation_type: OperationType
    subject_type: SubjectType
    subject_id: str
    object_ids: List[str] = Field(default_factory=list)
    time: Optional[datetime] = None

    def __str__(self) -> str:
        return (
            f"IdentityEvent(id={self.event_id}, realm={self.realm_id}, "
            f"resource_type={self.resource_type.value}, operation={self.operation_type.value}, "
            f"subject={self.subject_type.value}:{self.subject_id}, objects={self.object_ids})"
        )
