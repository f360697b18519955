"""authorgraph: authenticated author/article API.

Plain HTTP endpoints for registration and login, and a GraphQL endpoint
for reading authors and articles and for the author/article mutations.
"""

__version__ = "0.1.0"
