"""Sample file commands wired to a typer app, used by `verbmenu-demo`."""
