"""
OpenFGA Tuple Translator

Maps identity events onto relationship tuples:

    role mapping      user:<id>              assignee  role:<id>
                      group:<id>#member      assignee  role:<id>
    group membership  user:<id>              member    group:<id>
    composite role    role:<parent>#assignee assignee  role:<child>
    sub-group         group:<parent>         parent    group:<child>

CREATE events become writes, DELETE events become deletes; other operations
translate to an empty request.
"""

import logging
from typing import Dict, List, Optional, Set

from .events.models import EventResourceType, IdentityEvent, OperationType, SubjectType
from .models import AuthorizationModel, TupleKey, WriteRequest

logger = logging.getLogger(__name__)

OBJECT_TYPE_ROLE = "role"
OBJECT_TYPE_GROUP = "group"

RELATION_ASSIGNEE = "assignee"
RELATION_MEMBER = "member"
RELATION_PARENT = "parent"


class OpenFgaTupleTranslator:
    """Translates IdentityEvents into OpenFGA write requests"""

    def __init__(self):
        # type name -> relations defined for it; None until a model is loaded
        self._relations: Optional[Dict[str, Set[str]]] = None
        self.authorization_model_id: Optional[str] = None

    def load_model(self, model: AuthorizationModel) -> None:
        """Cache the relations each type of the authorization model defines"""
        self._relations = {
            definition.type: set(definition.relations.keys())
            for definition in model.type_definitions
        }
        self.authorization_model_id = model.id
        logger.info(
            f"Loaded authorization model {model.id} with types: {sorted(self._relations)}"
        )

    def to_write_request(self, event: IdentityEvent) -> WriteRequest:
        tuples = [t for t in self._build_tuples(event) if self._is_supported(t)]

        if event.operation_type == OperationType.CREATE:
            return WriteRequest(writes=tuples)
        if event.operation_type == OperationType.DELETE:
            return WriteRequest(deletes=tuples)
        return WriteRequest()

    def is_available(self, request: Optional[WriteRequest]) -> bool:
        return request is not None and not request.is_empty

    def _build_tuples(self, event: IdentityEvent) -> List[TupleKey]:
        subject = f"{event.subject_type.value}:{event.subject_id}"

        if event.resource_type in (
            EventResourceType.REALM_ROLE_MAPPING,
            EventResourceType.CLIENT_ROLE_MAPPING,
        ):
            if event.subject_type == SubjectType.GROUP:
                # Every member of the group gets the role
                subject = f"{subject}#{RELATION_MEMBER}"
            return [
                TupleKey(user=subject, relation=RELATION_ASSIGNEE, object=f"{OBJECT_TYPE_ROLE}:{object_id}")
                for object_id in event.object_ids
            ]

        if event.resource_type == EventResourceType.GROUP_MEMBERSHIP:
            return [
                TupleKey(user=subject, relation=RELATION_MEMBER, object=f"{OBJECT_TYPE_GROUP}:{object_id}")
                for object_id in event.object_ids
            ]

        if event.resource_type == EventResourceType.REALM_ROLE and event.subject_type == SubjectType.ROLE:
            # Anyone assigned the composite role is an assignee of each child
            return [
                TupleKey(
                    user=f"{subject}#{RELATION_ASSIGNEE}",
                    relation=RELATION_ASSIGNEE,
                    object=f"{OBJECT_TYPE_ROLE}:{object_id}",
                )
                for object_id in event.object_ids
            ]

        if event.resource_type == EventResourceType.GROUP and event.subject_type == SubjectType.GROUP:
            return [
                TupleKey(user=subject, relation=RELATION_PARENT, object=f"{OBJECT_TYPE_GROUP}:{object_id}")
                for object_id in event.object_ids
            ]

        return []

    def _is_supported(self, tuple_key: TupleKey) -> bool:
        if self._relations is None:
            return True

        object_type = tuple_key.object.split(":", 1)[0]
        if tuple_key.relation in self._relations.get(object_type, set()):
            return True

        logger.debug(
            f"Dropping tuple '{tuple_key}': relation not defined for type '{object_type}' "
            f"in model {self.authorization_model_id}"
        )
        return False


__all__ = ["OpenFgaTupleTranslator"]
