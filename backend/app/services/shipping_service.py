"""Shipping rows: plain generic contract, status defaults to 'pending'."""

from app.models.shipping import Shipping
from app.schemas.shipping import ShippingOut
from app.services.resource_service import ResourceService


class ShippingService(ResourceService):
    model = Shipping
    schema = ShippingOut
    label = "Shipping"
    columns = (
        Shipping.id,
        Shipping.order_id,
        Shipping.receiver_name,
        Shipping.shipping_address,
        Shipping.phone,
        Shipping.shipping_status,
        Shipping.created_at,
        Shipping.updated_at,
    )
    required_fields = ("order_id", "receiver_name", "shipping_address", "phone")
    insert_columns = required_fields
    mutable_columns = ("receiver_name", "shipping_address", "phone", "shipping_status")


shipping_service = ShippingService()
