"""
Blog API - API Routes Package
==============================

Route Inventory:
    - home.py:        GET    /                        (liveness probe)
    - categories.py:  GET    /v1/categories           (list)
                      GET    /v1/categories/{id}      (detail)
                      POST   /v1/categories           (create)
                      PUT    /v1/categories/{id}      (update)
                      DELETE /v1/categories/{id}      (delete)

Routes stay thin: bind input, call the service, wrap the result in a
ResultEnvelope. Failures are raised and turned into envelopes by the
exception handlers registered in main.py.
"""
