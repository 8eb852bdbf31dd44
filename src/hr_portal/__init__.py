"""HR Portal package.

This package is organized by feature modules (users, attendance, leaves, chat, ...)
with a thin Flask controller layer and service/repository layers over a single
JSON document store.
"""
