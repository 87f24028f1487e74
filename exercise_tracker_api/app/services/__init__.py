"""
Service layer abstraction.

Each service encapsulates the business logic for a domain and receives
the ``Database`` gateway as an explicit argument, so API handlers stay
thin and the services can be exercised against any database instance.
"""
