"""Application services that drive the domain from the user interface."""
