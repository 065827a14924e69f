"""
Service layer abstraction.

Each service encapsulates business logic for a domain and works on a
storage handle passed in by the application factory, so API handlers
never touch the data file directly.
"""
