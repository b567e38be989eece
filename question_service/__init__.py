"""
Question Service: in-memory FAQ question listing and insertion API.

Application package root. A small modular monolith using hexagonal
architecture (ports & adapters).

Bounded contexts:
    - questions: Listing (optionally windowed) and upserting question records.

Layers:
    - domain: Entities, pagination validation, ports (ABCs), errors.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: Concurrent in-memory store and seed loading.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
