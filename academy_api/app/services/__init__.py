"""
Service layer abstraction.

Each service encapsulates the logic for one resource and talks to the
collaborators (Record Store, Media Upload, Credential Store) it is
given, so API handlers stay thin and tests can pass in fakes.
"""
