"""Web API for the focus timer."""
