"""
Data access layer.

DAOs issue raw storage operations and know nothing about HTTP or error
translation; that is the job of the services built on top of them.
"""
