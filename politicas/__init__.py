"""
Internal-control policies. Seeding of initial data hangs off this app.
"""
