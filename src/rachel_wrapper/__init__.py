"""
RACHEL module wrapper package.

Provides a lightweight FastAPI service that:
  - Wraps a module's index fragment in the shared HTML shell.
  - Serves the viewer page that hosts a module inside an auto-sized iframe.
  - Exposes health and module listing endpoints for monitoring.
"""
