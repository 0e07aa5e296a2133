"""
Application package initializer.

``core`` holds configuration, logging, the database and the
application state; ``schemas`` the pydantic payload and record models;
``services`` the id allocator, entity stores and per-kind record
services; ``api`` the versioned FastAPI routers that expose them.

The FastAPI app lives in ``main`` and is not imported here, so the
services can be used in-process without loading the web framework or
opening a database.
"""
