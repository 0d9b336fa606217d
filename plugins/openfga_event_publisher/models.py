"""
OpenFGA Event Publisher Data Models

Remote descriptors (stores, authorization models), tuple write payloads and
the publisher's target coordinates.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from core.config.openfga_config import OpenFgaConfig


# ====================
# Enums
# ====================

class DiscoveryStatus(str, Enum):
    """Outcome of a store / authorization model discovery run"""
    READY = "ready"
    NO_STORE = "no_store"
    NO_MODEL = "no_model"


# ====================
# Remote Descriptors
# ====================

class Store(BaseModel):
    """OpenFGA store descriptor"""
    model_config = ConfigDict(extra="ignore")

    id: str
    name: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class TypeDefinition(BaseModel):
    """Type definition of an authorization model"""
    model_config = ConfigDict(extra="ignore")

    type: str
    relations: Dict[str, Any] = Field(default_factory=dict)
    metadata: Optional[Dict[str, Any]] = None


class AuthorizationModel(BaseModel):
    """OpenFGA authorization model descriptor"""
    model_config = ConfigDict(extra="ignore")

    id: str
    schema_version: Optional[str] = None
    type_definitions: List[TypeDefinition] = Field(default_factory=list)


# ====================
# Tuple Write Models
# ====================

class TupleKey(BaseModel):
    """A (user, relation, object) relationship tuple"""
    user: str
    relation: str
    object: str

    def __str__(self) -> str:
        return f"{self.user} {self.relation} {self.object}"


class WriteRequest(BaseModel):
    """Tuples to add and remove in one write call"""
    writes: List[TupleKey] = Field(default_factory=list)
    deletes: List[TupleKey] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.writes and not self.deletes

    def to_body(self, authorization_model_id: Optional[str] = None) -> Dict[str, Any]:
        """Build the JSON body for the write endpoint, omitting empty sections"""
        body: Dict[str, Any] = {}
        if self.writes:
            body["writes"] = {"tuple_keys": [t.model_dump() for t in self.writes]}
        if self.deletes:
            body["deletes"] = {"tuple_keys": [t.model_dump() for t in self.deletes]}
        if authorization_model_id:
            body["authorization_model_id"] = authorization_model_id
        return body


class WriteOptions(BaseModel):
    """Per-call write options"""
    authorization_model_id: Optional[str] = None


class WriteResponse(BaseModel):
    """Response of a successful write"""
    model_config = ConfigDict(extra="allow")

    status_code: int = 200
    writes: int = 0
    deletes: int = 0


# ====================
# Publisher State Models
# ====================

class TargetCoordinates(BaseModel):
    """Service endpoint plus the store and model the publisher writes to"""
    api_url: str
    store_id: Optional[str] = None
    authorization_model_id: Optional[str] = None

    @property
    def is_resolved(self) -> bool:
        return bool(self.store_id and self.store_id.strip()) and bool(
            self.authorization_model_id and self.authorization_model_id.strip()
        )

    @classmethod
    def from_config(cls, config: OpenFgaConfig) -> 'TargetCoordinates':
        """Starting coordinates; blank ids are kept as unresolved (None)"""
        return cls(
            api_url=config.api_url,
            store_id=config.store_id.strip() or None,
            authorization_model_id=config.authorization_model_id.strip() or None,
        )


class DiscoveryResult(BaseModel):
    """Tagged result of a discovery run"""
    status: DiscoveryStatus
    coordinates: TargetCoordinates
    model: Optional[AuthorizationModel] = None

    @property
    def is_ready(self) -> bool:
        return self.status == DiscoveryStatus.READY
