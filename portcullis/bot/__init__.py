"""Discord bot layer: commands, views, handlers, replies."""
