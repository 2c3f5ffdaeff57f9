"""Domain layer - Core business logic, entities, and rules.

This layer contains:
- Entities: Objects with identity and lifecycle (Order, OrderItem, Product)
- Value Objects: Immutable objects defined by their attributes (Money, OrderId)
- Domain Exceptions: Business rule violations

The domain layer has NO dependencies on external frameworks or infrastructure,
and performs no I/O or logging.
"""
