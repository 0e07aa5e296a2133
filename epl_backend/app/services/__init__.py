"""
Service layer.

``record_service`` holds the generic CRUD logic; the ``<kind>_service``
modules instantiate it for each entity kind and expose the operations
as plain functions taking the ``AppState`` first.
"""
