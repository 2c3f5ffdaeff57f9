"""Application layer - Use cases and port definitions.

This layer contains:
- Use Cases: Drive the Order aggregate for one request or one outcome message
- Ports: Abstract interfaces for persistence, locking and id generation
- Results: OrderSuccess / OrderFailure returned by every use case

The application layer depends only on the domain layer.
Infrastructure implementations are injected via ports.
"""
