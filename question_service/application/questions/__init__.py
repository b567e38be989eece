"""Use cases for the questions bounded context."""
