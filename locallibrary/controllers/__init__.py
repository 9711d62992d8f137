"""Request handlers, one module per catalog entity kind."""
