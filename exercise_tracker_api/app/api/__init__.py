"""
API package containing the HTTP routes.

``router`` aggregates the domain-specific routers defined in
``endpoints``; ``deps`` holds the dependencies they share.
"""
