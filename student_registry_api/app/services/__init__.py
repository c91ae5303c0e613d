"""
Service layer.

Each service encapsulates business logic for a domain and receives its
data store through the constructor, so API handlers stay free of SQL.
"""
