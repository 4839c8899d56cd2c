"""Adapters – HTTP tenant directory and FastAPI integration.

Each adapter needs its optional extra (``schooldesk[http]``,
``schooldesk[fastapi]``); import them from their subpackages.
"""
