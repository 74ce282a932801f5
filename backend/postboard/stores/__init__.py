# Stores package init
"""
Postboard Backend — Stores Layer
==================================

What:  Persistence for one record type per store.
Why:   Services decide *what* to read or write; stores know *how* to express
       it in SQLAlchemy. No validation or business rules live here.

Store Inventory:
    - UserStore: user lookups by email/username and user creation
    - PostStore: post creation

Stores receive the request's AsyncSession as an argument and only flush;
the commit belongs to the session dependency. They let SQLAlchemy errors
propagate untouched so the calling service can tell a unique-constraint
violation (IntegrityError) apart from any other failure.
"""
