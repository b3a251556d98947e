"""Application layer.

This layer contains *use cases* that orchestrate the external data-access
collaborator and the in-process coordination state.

Rule of thumb:
UI -> application.use_cases -> ports (commands) / core (events, navigation)
"""
