"""
Endpoint subpackage for API v1.

Each module defines an APIRouter for one entity kind.  The routers
only translate between HTTP and the record services: errors raised by
the services are turned into responses by the handler registered in
``main``.
"""
