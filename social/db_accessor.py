from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Type
from django.db.models import Model, QuerySet

from social.errors import NotFound
from social.utils.ids import parse_id


class DB_Accessor:
    """Generic data accessor to wrap basic queryset operations.

    ``list_fields`` maps a denormalized list name (as exposed by the API) to
    the edge model backing it: ``{field: (edge_model, owner_attr, value_attr)}``.
    """

    list_fields: Dict[str, Tuple[Type[Model], str, str]] = {}

    def __init__(self, model: Type[Model]) -> None:
        self.model = model

    @property
    def label(self) -> str:
        return self.model.__name__

    def list(
        self,
        *,
        filters: Optional[Mapping[str, Any]] = None,
        order_by: Sequence[str] = (),
    ) -> QuerySet:
        """Return a filtered, ordered queryset."""
        qs: QuerySet = self.model.objects.filter(**(filters or {}))
        return qs.order_by(*order_by) if order_by else qs

    def create(self, **data: Any) -> Model:
        """Create and return a new object."""
        return self.model.objects.create(**data)

    def delete(self, **lookup: Any) -> int:
        """Delete objects matching lookup; return count deleted."""
        count, _ = self.model.objects.filter(**lookup).delete()
        return count

    # --- id-based access -------------------------------------------------
    def find_by_id(self, entity_id: Any) -> Optional[Model]:
        """Return the object with this id, or None."""
        try:
            pk = parse_id(entity_id, self.label)
        except NotFound:
            return None
        return self.model.objects.filter(pk=pk).first()

    def get_by_id(self, entity_id: Any) -> Model:
        """Return the object with this id or raise NotFound."""
        obj = self.find_by_id(entity_id)
        if obj is None:
            raise NotFound(f"{self.label} not found")
        return obj

    def update_by_id(self, entity_id: Any, **patch: Any) -> Model:
        """Overwrite fields whose new value is truthy; absent input keeps the old value."""
        obj = self.get_by_id(entity_id)
        changed = [field for field, value in patch.items() if value]
        for field in changed:
            setattr(obj, field, patch[field])
        if changed:
            obj.save(update_fields=changed)
        return obj

    def delete_by_id(self, entity_id: Any) -> Model:
        """Delete the object with this id and return it (with its id intact)."""
        obj = self.get_by_id(entity_id)
        pk = obj.pk
        obj.delete()
        obj.pk = pk
        return obj

    # --- denormalized lists ----------------------------------------------
    def _edge(self, field: str) -> Tuple[Type[Model], str, str]:
        try:
            return self.list_fields[field]
        except KeyError:
            raise ValueError(f"{self.label} has no list field {field!r}")

    def list_contains(self, entity_id: Any, field: str, value: Any) -> bool:
        """Return True when value is a member of the entity's list field."""
        edge_model, owner_attr, value_attr = self._edge(field)
        return edge_model.objects.filter(
            **{f"{owner_attr}_id": entity_id, f"{value_attr}_id": value}
        ).exists()

    def list_values(self, entity_id: Any, field: str) -> List[Any]:
        """Return the ids held in the entity's list field, newest first."""
        edge_model, owner_attr, value_attr = self._edge(field)
        return list(
            edge_model.objects.filter(**{f"{owner_attr}_id": entity_id})
            .order_by("-created_at")
            .values_list(f"{value_attr}_id", flat=True)
        )

    def add_to_list(self, entity_id: Any, field: str, value: Any) -> bool:
        """Add value to a list field; adding a present value is a no-op. Returns True if added."""
        edge_model, owner_attr, value_attr = self._edge(field)
        _, created = edge_model.objects.get_or_create(
            **{f"{owner_attr}_id": entity_id, f"{value_attr}_id": value}
        )
        return created

    def remove_from_list(self, entity_id: Any, field: str, value: Any) -> bool:
        """Remove value from a list field; removing an absent value is a no-op. Returns True if removed."""
        edge_model, owner_attr, value_attr = self._edge(field)
        count, _ = edge_model.objects.filter(
            **{f"{owner_attr}_id": entity_id, f"{value_attr}_id": value}
        ).delete()
        return count > 0
