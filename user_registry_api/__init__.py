"""
Top-level package for the User Registry API.

All functionality lives in submodules under ``app``; import the ASGI
application as ``user_registry_api.app.main:app``.
"""
