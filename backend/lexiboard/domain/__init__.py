"""
Domain layer.

The domain layer contains the core business logic of the catalog.
It has no dependencies on external frameworks or infrastructure, which is
what lets the client package import it directly.

This layer contains:
- Entities: Objects with identity and lifecycle
- Value Objects: Immutable objects defined by attributes
- Domain Services: Stateless operations such as validation
"""
