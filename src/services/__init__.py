"""Business logic services used by handlers.

Handlers import services lazily so the customer store is only built when a
route that needs it is first invoked in a container.
"""
