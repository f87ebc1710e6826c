"""
Use Cases

Organized into domain folders:
- accounts/: Registration and login
- applications/: Application lifecycle and gate pass rendering
- views/: Role-scoped dashboards
- departments/: Department catalogue
"""
