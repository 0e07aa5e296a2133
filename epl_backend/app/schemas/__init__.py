"""
Pydantic schema definitions for payloads and records.

Each entity kind defines a ``<Kind>Payload`` model (the fields a caller
supplies) and a record model that adds the system-assigned ``id``.
Schemas only decode; required-field validation belongs to the
services so that it runs on every create and update regardless of
how the payload was built.
"""
