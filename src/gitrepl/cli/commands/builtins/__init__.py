"""Built-in gitrepl commands, one package per verb."""
