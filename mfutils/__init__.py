"""Small utilities: pauseable clocks, lazy streams, fixed-size containers, console prompts, environment variables, local dates and filesystem helpers."""

__version__ = "0.1.0"