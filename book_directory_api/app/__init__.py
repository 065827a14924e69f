"""
Application package initializer.

This package contains the application factory and its submodules:
``core`` (configuration, logging, errors, file storage), ``schemas``
(request and response models), ``services`` (CRUD logic) and ``api``
(HTTP routes).
"""
