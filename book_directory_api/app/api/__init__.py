"""
API package.

``router.py`` exposes a top-level ``router`` which includes the
domain routers defined in ``endpoints``.
"""
