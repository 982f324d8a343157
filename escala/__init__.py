"""Escala - weekly service-order scheduling for a workforce.

Modules:
- domain: Employee, Department, ServiceOrder, Session entities
- engine: schedule codec, weekly projector, availability and label resolvers
- repositories: API access (interfaces + httpx implementation)
- store: immutable snapshot of the loaded entities
- session: admin/collaborator login and logout
- views: dict views for the presentation layer
- cli: terminal entry point
"""

__version__ = "0.1.0"
