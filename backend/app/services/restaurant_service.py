"""Restaurant rules: a create needs a non-blank restaurant_name."""

from typing import Any, Dict

from app.exceptions import ValidationError
from app.models.restaurant import Restaurant
from app.schemas.restaurant import RestaurantOut
from app.services.resource_service import ResourceService

RESTAURANT_COLUMNS = ("restaurant_name", "address", "phone", "menu_description")


class RestaurantService(ResourceService):
    model = Restaurant
    schema = RestaurantOut
    label = "Restaurant"
    columns = (
        Restaurant.id,
        Restaurant.restaurant_name,
        Restaurant.address,
        Restaurant.phone,
        Restaurant.menu_description,
        Restaurant.created_at,
        Restaurant.updated_at,
    )
    insert_columns = RESTAURANT_COLUMNS
    mutable_columns = RESTAURANT_COLUMNS

    def prepare_insert(self, values: Dict[str, Any]) -> Dict[str, Any]:
        name = values.get("restaurant_name")
        if not name or not name.strip():
            raise ValidationError("restaurant_name is required", field="restaurant_name")
        return super().prepare_insert(values)

    def validate_changes(self, changes: Dict[str, Any]) -> None:
        # The column is NOT NULL; reject clearing it instead of surfacing a 409
        if "restaurant_name" in changes and not (changes["restaurant_name"] or "").strip():
            raise ValidationError("restaurant_name is required", field="restaurant_name")


restaurant_service = RestaurantService()
