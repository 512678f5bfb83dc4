from gitscribe.cli import app

app()
