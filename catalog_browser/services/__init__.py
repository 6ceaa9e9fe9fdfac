"""
Service layer: catalog loading, the table controller and theme preference logic.
"""
