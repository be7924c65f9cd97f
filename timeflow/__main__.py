from timeflow.cli import app

app()
