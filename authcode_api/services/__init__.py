"""Service layer package housing the request handling logic.

Contains the validation rules and the authorization code service that
the routes delegate to.
"""
