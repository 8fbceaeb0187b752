"""
Service layer abstraction.

Each service encapsulates the business logic for one entity.  Services
raise the errors from ``core.errors``; API handlers never touch the
record store directly.
"""
