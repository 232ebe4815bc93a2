"""Ports - contracts between the query engine and its collaborators."""
