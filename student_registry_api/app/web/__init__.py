"""
Browser front end: a single page with a create form and a records table.
"""
