# Routes package init
"""
Postboard Backend — API Routes Package
========================================

Route Inventory:
    - users.py:   POST /api/v1/users/register
                  POST /api/v1/users/login
                  POST /api/v1/users/logout
    - posts.py:   POST /api/v1/posts/create
    - health.py:  GET  /health

Routes are pure dispatch: parse the body, call one service method, return
its result. Status codes for failures are chosen by the exception handlers
in main.py, never in a route.
"""
