"""
Admin Event Parser

Turns a raw admin event, as delivered by the host platform, into an
IdentityEvent. Events that carry no relationship change parse to None.
Users, groups and roles are identified by their ids, taken from the
resource path and the representation.

Raw event shape:
{
    "id": "evt-1",
    "realmId": "master",
    "resourceType": "REALM_ROLE_MAPPING",
    "operationType": "CREATE",
    "resourcePath": "users/<user-id>/role-mappings/realm",
    "representation": "[{\"id\": \"...\", \"name\": \"admin\"}]",
    "time": 1700000000000
}
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from .models import EventResourceType, IdentityEvent, OperationType, SubjectType

logger = logging.getLogger(__name__)


def _ids(representation: Any) -> List[str]:
    """Entity ids from a representation object or list"""
    items = representation if isinstance(representation, list) else [representation]
    ids = []
    for item in items:
        if isinstance(item, dict) and item.get("id"):
            ids.append(str(item["id"]))
    return ids


def _parse_time(value: Any) -> Optional[datetime]:
    if value is None:
        return None
    try:
        return datetime.fromtimestamp(int(value) / 1000, tz=timezone.utc)
    except (TypeError, ValueError):
        return None


def _load_representation(raw: Dict[str, Any]) -> Any:
    representation = raw.get("representation")
    if representation is None or isinstance(representation, (list, dict)):
        return representation
    return json.loads(representation)


def parse_admin_event(raw: Dict[str, Any]) -> Optional[IdentityEvent]:
    """
    Parse a raw admin event

    Args:
        raw: Admin event as a dictionary

    Returns:
        IdentityEvent, or None when the event carries no relationship change
    """
    try:
        resource_type = EventResourceType(raw.get("resourceType"))
        operation_type = OperationType(raw.get("operationType"))
    except ValueError:
        logger.debug(f"Ignoring admin event {raw.get('id')}: unsupported resource or operation type")
        return None

    try:
        representation = _load_representation(raw)
    except (TypeError, ValueError) as e:
        logger.warning(f"Ignoring admin event {raw.get('id')}: malformed representation ({e})")
        return None

    parts = [p for p in (raw.get("resourcePath") or "").split("/") if p]
    parsed = _parse_path(resource_type, parts, representation)
    if parsed is None:
        logger.debug(
            f"Ignoring admin event {raw.get('id')}: no relationship in path {raw.get('resourcePath')}"
        )
        return None

    subject_type, subject_id, object_ids = parsed
    if not object_ids:
        return None

    return IdentityEvent(
        event_id=str(raw.get("id") or ""),
        realm_id=raw.get("realmId"),
        resource_type=resource_type,
        operation_type=operation_type,
        subject_type=subject_type,
        subject_id=subject_id,
        object_ids=object_ids,
        time=_parse_time(raw.get("time")),
    )


def _parse_path(resource_type: EventResourceType, parts: List[str], representation: Any):
    if resource_type in (EventResourceType.REALM_ROLE_MAPPING, EventResourceType.CLIENT_ROLE_MAPPING):
        # users/{id}/role-mappings/... or groups/{id}/role-mappings/...
        if len(parts) >= 3 and parts[2] == "role-mappings":
            if parts[0] == "users":
                return SubjectType.USER, parts[1], _ids(representation)
            if parts[0] == "groups":
                return SubjectType.GROUP, parts[1], _ids(representation)
        return None

    if resource_type == EventResourceType.GROUP_MEMBERSHIP:
        # users/{id}/groups/{group-id}
        if len(parts) >= 4 and parts[0] == "users" and parts[2] == "groups":
            return SubjectType.USER, parts[1], [parts[3]]
        return None

    if resource_type == EventResourceType.REALM_ROLE:
        # roles-by-id/{id}/composites; roles/{name}/composites has no parent id
        if len(parts) >= 3 and parts[0] == "roles-by-id" and parts[2] == "composites":
            return SubjectType.ROLE, parts[1], _ids(representation)
        return None

    if resource_type == EventResourceType.GROUP:
        # groups/{parent-id}/children
        if len(parts) >= 3 and parts[0] == "groups" and parts[2] == "children":
            return SubjectType.GROUP, parts[1], _ids(representation)
        return None

    return None


__all__ = ["parse_admin_event"]
