"""
Blog API - Services Layer
==========================

What:  Business logic between the routes (HTTP) and the repositories (data).
How:   Services take the request-scoped session as an explicit argument,
       apply validation and raise application exceptions; routes only
       map results to status codes and envelopes.

Service Inventory:
    - CategoryService: list / get / create / update / delete categories
"""
