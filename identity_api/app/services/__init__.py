"""
Service layer.

One service class per domain.  Services assign IDs and defaults,
perform a single store mutation and record audit or activity entries
as a side effect.  They raise the domain exceptions of
``core.exceptions``; routers translate them into HTTP responses.
"""
