"""
Service layer abstraction.

Services hold the SQL for a domain.  They receive the store handle
from the caller and never open connections themselves.
"""
