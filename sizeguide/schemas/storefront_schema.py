"""Schema of the Storefront GraphQL metaobjects response."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class MetaobjectField(BaseModel):
    key: str
    value: Optional[str] = None


class Metaobject(BaseModel):
    handle: str = ""
    fields: List[MetaobjectField] = Field(default_factory=list)


class MetaobjectEdge(BaseModel):
    node: Metaobject


class MetaobjectConnection(BaseModel):
    edges: List[MetaobjectEdge] = Field(default_factory=list)


class StorefrontData(BaseModel):
    metaobjects: Optional[MetaobjectConnection] = None


class GraphQLError(BaseModel):
    model_config = ConfigDict(extra="allow")

    message: str = "Unknown GraphQL error"


class StorefrontResponse(BaseModel):
    data: Optional[StorefrontData] = None
    errors: Optional[List[GraphQLError]] = None

    def documents(self) -> List[Metaobject]:
        """Metaobjects in response order; empty when the connection is absent."""
        if self.data is None or self.data.metaobjects is None:
            return []
        return [edge.node for edge in self.data.metaobjects.edges]
