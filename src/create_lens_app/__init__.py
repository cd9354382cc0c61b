"""create-lens-app - scaffold a Lens web app from a boilerplate template."""

__version__ = "0.1.0"
