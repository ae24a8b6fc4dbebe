"""Infrastructure layer — home directory lookup and profile file I/O.

This layer depends on stdlib only.
It must never import from services, commands, or output.
The service layer bridges between domain formatting and infrastructure.
"""
