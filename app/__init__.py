"""Users, roles and products API.

Layers: ``domain`` (entities and errors), ``application`` (use cases),
``infrastructure`` (database, cache, repositories) and ``interfaces`` (HTTP).
"""
