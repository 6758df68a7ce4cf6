# Services package init
"""
Restaurant Ordering API: Services Layer
==========================================

Service Inventory:
    - resource_service: PageRequest, parse_id, required-field and
      partial-update helpers, and the ResourceService base class
    - auth_service:     bcrypt hashing, JWT issue/verify, login
    - user_service, restaurant_service, menu_service, order_service,
      payment_service, shipping_service: one ResourceService per table

Services take the AsyncSession as an argument and hold no per-request
state, so the module-level instances are shared by every request.
"""
