# Routes package init
"""
Restaurant Ordering API: Routes Package
==========================================

Route Inventory:
    - health.py:       GET /ping, GET /health                      (public)
    - auth.py:         POST /login (public), POST /logout, GET /profile
    - users.py:        /api/users        (POST public, rest gated)
    - restaurants.py:  /api/restaurants  (gated, strict pagination)
    - menus.py:        /api/menus        (gated)
    - orders.py:       /api/orders, /api/orders/summary (gated)
    - payments.py:     /api/payments     (gated, strict pagination)
    - shippings.py:    /api/shippings    (gated)
    - dependencies.py: page parsing, path ids, app.state lookups

Handlers stay thin: parse input, call a service, wrap the result.
"""
