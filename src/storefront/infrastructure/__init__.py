"""Infrastructure layer — collaborator contracts and in-process adapters.

Services receive a :class:`Collaborators` bundle instead of importing
concrete gateways, so every external step can be replaced in tests.
"""
