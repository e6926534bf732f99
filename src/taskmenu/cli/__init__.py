"""Entry point, composition root and menu commands."""
