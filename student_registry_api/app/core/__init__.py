"""
Core infrastructure shared by the API: settings, logging setup, the
SQLite record store and the error taxonomy.
"""
