"""
Service layer.

Each service binds the shared document lifecycle in ``base`` to one
MongoDB collection and adds the lookups specific to that resource.
Route handlers call services; services are the only code that issues
store calls.
"""
