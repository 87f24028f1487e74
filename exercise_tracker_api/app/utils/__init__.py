"""
Small helpers shared by the services.

``coercion`` turns raw request fields into typed values and
``formatting`` renders dates for responses.
"""
