"""
Restaurant Ordering API: Menu Service
========================================

What:  /api/menus on the generic contract, with the restaurant name joined in.
How:   select_query() LEFT OUTER JOINs tbl_restaurants, so a menu whose
       restaurant is gone still lists (restaurant_name = null).
"""

from sqlalchemy import Select, select

from app.models.menu import Menu
from app.models.restaurant import Restaurant
from app.schemas.menu import MenuOut
from app.services.resource_service import ResourceService

MENU_COLUMNS = ("restaurant_id", "menu_name", "description", "price", "category")


class MenuService(ResourceService):
    model = Menu
    schema = MenuOut
    label = "Menu"
    columns = (
        Menu.id,
        Menu.restaurant_id,
        Restaurant.restaurant_name,
        Menu.menu_name,
        Menu.description,
        Menu.price,
        Menu.category,
        Menu.created_at,
        Menu.updated_at,
    )
    required_fields = ("restaurant_id", "menu_name", "price", "category")
    insert_columns = MENU_COLUMNS
    mutable_columns = MENU_COLUMNS

    def select_query(self) -> Select:
        return select(*self.columns).select_from(Menu).outerjoin(
            Restaurant, Menu.restaurant_id == Restaurant.id
        )


menu_service = MenuService()
