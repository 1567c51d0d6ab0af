"""Display model ports.

A DisplayModelBuilder turns a visible entity plus the paging command and
visitor context into a view-ready model. A LayoutResolver maps an entity's
layout id onto a template name. Neither makes access decisions.
"""

from abc import ABC, abstractmethod

from storefront.catalog.kinds import EntityKind
from storefront.visitor import PagingFilter, VisitorContext


class DisplayModelBuilder(ABC):
    @abstractmethod
    def build(self, entity, paging: PagingFilter, visitor: VisitorContext) -> dict: ...


class LayoutResolver(ABC):
    @abstractmethod
    def resolve(self, kind: EntityKind, layout_id: str | None) -> str: ...
