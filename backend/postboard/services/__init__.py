# Services package init
"""
Postboard Backend — Services Layer
====================================

What:  The request handlers: one method per endpoint, sitting between the
       routes (HTTP) and the stores (persistence).

Service Inventory:
    - UserService.register_user: validate → normalize → uniqueness → hash → insert
    - UserService.login_user:    validate → lookup by email → verify hash
    - UserService.logout_user:   validate → lookup by email
    - PostService.create_post:   validate → insert
    - validation: shared required-field and bounds checks

Services are stateless singletons; the database session is passed in on
every call.
"""
